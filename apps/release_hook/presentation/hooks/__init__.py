"""Release Hooks."""

from apps.release_hook.presentation.hooks.release import pre_commit

__all__ = ["pre_commit"]
