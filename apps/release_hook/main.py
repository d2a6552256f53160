"""Release Hook Entry Point.

릴리스 커밋 직전에 kustomization의 이미지 태그를 릴리스 버전으로 갱신합니다.

Architecture:
    release orchestrator / CLI
        │
        └── pre_commit / release-hook (presentation)
                │
                └── PatchImageTagCommand
                        │
                        └── YamlManifestStore
                                │
                                └── config/manager/kustomization.yaml

Run:
    python -m apps.release_hook.main pre-commit --version 1.2.3
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from apps.release_hook.presentation.cli.commands import run
from apps.release_hook.setup.dependencies import Container
from apps.release_hook.setup.logging import setup_logging


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point."""
    container = Container()
    setup_logging(container.settings)
    return run(argv, container)


if __name__ == "__main__":
    sys.exit(main())
