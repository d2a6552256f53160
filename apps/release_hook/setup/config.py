"""Application Settings.

env_prefix="RELEASE_HOOK_" 사용으로 RELEASE_HOOK_MANIFEST_PATH 등의 환경변수 매핑.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """릴리스 훅 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        RELEASE_HOOK_MANIFEST_PATH → manifest_path
        RELEASE_HOOK_LOG_FORMAT → log_format
    """

    # Manifest
    manifest_path: str = "./config/manager/kustomization.yaml"
    image_name: Optional[str] = None  # None이면 images[0]

    # Logging
    log_level: str = "INFO"
    log_format: Literal["text", "ecs"] = "text"

    # Service
    service_name: str = "release-hook"
    service_version: str = "1.0.0"
    environment: str = "local"

    model_config = SettingsConfigDict(
        env_prefix="RELEASE_HOOK_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("image_name", mode="before")
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환."""
    return Settings()
