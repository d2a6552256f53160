"""입력 검증 예외."""

from apps.release_hook.domain.exceptions.base import DomainError


class InvalidInputError(DomainError):
    """비어 있거나 허용되지 않는 문자를 포함한 버전 문자열."""

    def __init__(self, reason: str = "Invalid input") -> None:
        super().__init__(reason)
