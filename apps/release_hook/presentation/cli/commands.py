"""CLI Commands.

argparse 기반 명령행 인터페이스입니다.

Usage:
    release-hook pre-commit --version 1.2.3 [--file PATH] [--image NAME] [--dry-run]
    release-hook show [--file PATH] [--image NAME]
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TYPE_CHECKING

from apps.release_hook.application.patch.dto import PatchRequest
from apps.release_hook.domain.exceptions.base import DomainError

if TYPE_CHECKING:
    from apps.release_hook.setup.dependencies import Container


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-hook",
        description="Patch the image tag of a Kustomize overlay before a release commit",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    patch = sub.add_parser("pre-commit", help="Write the release version into newTag")
    patch.add_argument("--version", required=True, help="Release version (image tag)")
    patch.add_argument("--file", help="Path to kustomization.yaml")
    patch.add_argument("--image", help="Image name to update (default: first entry)")
    patch.add_argument("--dry-run", action="store_true", help="Do not write the file")

    show = sub.add_parser("show", help="Print the current newTag")
    show.add_argument("--file", help="Path to kustomization.yaml")
    show.add_argument("--image", help="Image name to read (default: first entry)")
    return parser


def run(argv: Sequence[str] | None, container: "Container") -> int:
    """CLI를 실행하고 종료 코드를 반환합니다."""
    args = build_parser().parse_args(argv)
    settings = container.settings
    target = args.file or settings.manifest_path
    image_name = args.image or settings.image_name

    try:
        if args.command == "pre-commit":
            result = container.patch_command.execute(
                PatchRequest(
                    version=args.version,
                    target_path=target,
                    image_name=image_name,
                    dry_run=args.dry_run,
                )
            )
            if result.changed:
                suffix = " (dry run)" if args.dry_run else ""
                print(f"Updated {target}: {result.previous_tag} -> {args.version}{suffix}")
            else:
                print(f"{target} already at {args.version}")
        else:
            tag = container.read_query.execute(target, image_name)
            print(tag if tag is not None else "")
    except DomainError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    return 0
