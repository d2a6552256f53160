"""Manifest Exceptions."""

from __future__ import annotations

from apps.release_hook.domain.exceptions.base import DomainError


class NotFoundError(DomainError):
    """대상 매니페스트 파일이 존재하지 않음."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Manifest not found: {path}")


class MalformedDocumentError(DomainError):
    """매니페스트를 파싱할 수 없거나 images 필드 경로가 없음."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed manifest ({path}): {reason}")


class ManifestIOError(DomainError):
    """매니페스트 읽기/쓰기 실패 (권한, 디스크 부족 등)."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Manifest I/O failed ({path}): {reason}")
