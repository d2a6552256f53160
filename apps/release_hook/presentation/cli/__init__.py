"""CLI Presentation."""

from apps.release_hook.presentation.cli.commands import build_parser, run

__all__ = ["build_parser", "run"]
