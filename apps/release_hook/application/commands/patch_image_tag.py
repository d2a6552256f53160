"""Patch Image Tag Command.

kustomization의 이미지 태그를 릴리스 버전으로 갱신하는 Use Case입니다.

Architecture:
    - UseCase(지휘자): PatchImageTagCommand
    - Domain(규칙): ImageTag, locate_image_entry
    - Ports(인프라): ManifestStore
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from apps.release_hook.application.common.result import PatchResult
from apps.release_hook.domain.services.image_entry_locator import (
    NEW_TAG_KEY,
    locate_image_entry,
)
from apps.release_hook.domain.value_objects.image_tag import ImageTag

if TYPE_CHECKING:
    from apps.release_hook.application.patch.dto import PatchRequest
    from apps.release_hook.application.patch.ports import ManifestStore

logger = logging.getLogger(__name__)


class PatchImageTagCommand:
    """이미지 태그 패치 Command.

    Workflow:
        1. 버전 검증 (파일 I/O 이전)
        2. 매니페스트 로드
        3. images 항목의 newTag 갱신
        4. 값이 바뀐 경우에만 같은 경로에 저장

    모든 예외는 호출자에게 그대로 전파됩니다. 재시도하지 않습니다.
    """

    def __init__(self, manifest_store: "ManifestStore") -> None:
        """Initialize.

        Args:
            manifest_store: 매니페스트 저장소 (DI)
        """
        self._store = manifest_store

    def execute(self, request: "PatchRequest") -> PatchResult:
        """태그를 패치합니다.

        Args:
            request: 패치 요청 DTO

        Returns:
            PatchResult

        Raises:
            InvalidInputError: 버전이 비어 있거나 안전하지 않음
            NotFoundError: 매니페스트 없음
            MalformedDocumentError: 파싱 실패 또는 images 경로 없음
            ManifestIOError: 읽기/쓰기 실패
        """
        tag = ImageTag(request.version)
        path = Path(request.target_path)

        document = self._store.load(path)
        entry = locate_image_entry(document, str(path), request.image_name)

        previous = entry.get(NEW_TAG_KEY)
        previous_tag = None if previous is None else str(previous)

        if previous == tag.value:
            logger.debug(
                "Image tag already current",
                extra={"path": str(path), "tag": tag.value},
            )
            return PatchResult.patched(str(path), previous_tag, changed=False)

        entry[NEW_TAG_KEY] = tag.value
        if request.dry_run:
            logger.info(
                "Dry run: image tag not written",
                extra={"path": str(path), "from": previous_tag, "to": tag.value},
            )
            return PatchResult.patched(str(path), previous_tag, changed=True)

        self._store.save(path, document)
        logger.info(
            "Image tag patched",
            extra={"path": str(path), "from": previous_tag, "to": tag.value},
        )
        return PatchResult.patched(str(path), previous_tag, changed=True)
