"""Release Hook.

릴리스 오케스트레이터가 릴리스 커밋 직전에 호출하는 훅입니다.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from apps.release_hook.application.common.result import PatchResult
from apps.release_hook.application.patch.dto import PatchRequest
from apps.release_hook.domain.exceptions.validation import InvalidInputError
from apps.release_hook.setup.dependencies import Container

logger = logging.getLogger(__name__)


def pre_commit(props: Mapping[str, Any], container: Container | None = None) -> PatchResult:
    """릴리스 버전을 매니페스트 newTag에 기록합니다.

    Args:
        props: 릴리스 속성 (최소 "version" 포함)
        container: 의존성 컨테이너 (테스트용 주입)

    Returns:
        PatchResult

    Raises:
        InvalidInputError: version 누락 또는 형식 오류
        DomainError: 패치 실패 (그대로 전파)
    """
    version = props.get("version")
    if not isinstance(version, str) or not version.strip():
        raise InvalidInputError("Release properties must include a non-empty 'version'")

    container = container or Container()
    settings = container.settings
    request = PatchRequest(
        version=version,
        target_path=settings.manifest_path,
        image_name=settings.image_name,
    )
    logger.debug("pre_commit hook invoked", extra={"version": version})
    return container.patch_command.execute(request)
