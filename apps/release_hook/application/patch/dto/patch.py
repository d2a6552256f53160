"""Patch DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PatchRequest:
    """이미지 태그 패치 요청."""

    version: str
    target_path: str | Path
    image_name: str | None = None
    dry_run: bool = False
