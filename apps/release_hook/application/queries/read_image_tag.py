"""Read Image Tag Query.

매니페스트에 기록된 현재 이미지 태그를 조회합니다.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from apps.release_hook.domain.services.image_entry_locator import (
    NEW_TAG_KEY,
    locate_image_entry,
)

if TYPE_CHECKING:
    from apps.release_hook.application.patch.ports import ManifestStore


class ReadImageTagQuery:
    """현재 태그 조회 Query."""

    def __init__(self, manifest_store: "ManifestStore") -> None:
        self._store = manifest_store

    def execute(self, target_path: str | Path, image_name: str | None = None) -> str | None:
        """newTag 값을 반환합니다. 키가 없으면 None."""
        path = Path(target_path)
        document = self._store.load(path)
        entry = locate_image_entry(document, str(path), image_name)
        value = entry.get(NEW_TAG_KEY)
        return None if value is None else str(value)
