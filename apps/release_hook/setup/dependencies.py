"""Dependency Injection.

Composition Root입니다. 모든 의존성을 여기서 조립합니다.
"""

from __future__ import annotations

from apps.release_hook.application.commands.patch_image_tag import PatchImageTagCommand
from apps.release_hook.application.queries.read_image_tag import ReadImageTagQuery
from apps.release_hook.infrastructure.persistence_yaml.manifest_store_yaml import (
    YamlManifestStore,
)
from apps.release_hook.setup.config import Settings, get_settings


class Container:
    """의존성 컨테이너.

    호출마다 새로 만들어지며 프로세스 전역 상태를 갖지 않습니다.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._manifest_store = YamlManifestStore()

    @property
    def settings(self) -> Settings:
        """설정."""
        return self._settings

    @property
    def patch_command(self) -> PatchImageTagCommand:
        """태그 패치 Command."""
        return PatchImageTagCommand(self._manifest_store)

    @property
    def read_query(self) -> ReadImageTagQuery:
        """현재 태그 조회 Query."""
        return ReadImageTagQuery(self._manifest_store)
