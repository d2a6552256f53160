"""ImageTag Value Object."""

from __future__ import annotations

import re
from dataclasses import dataclass

from apps.release_hook.domain.exceptions.validation import InvalidInputError

# OCI 이미지 태그 문법 (따옴표, 공백, 셸 메타문자 불가)
TAG_PATTERN = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.-]{0,127}")


@dataclass(frozen=True, slots=True)
class ImageTag:
    """이미지 태그 Value Object.

    릴리스 버전(예: "1.2.3", "v2.0.0-rc.1")을 newTag 값으로 표현합니다.
    자기 검증을 수행하여 항상 안전한 태그만 존재합니다.
    """

    value: str

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidInputError(f"Version must be a string, got {type(self.value).__name__}")
        if not self.value.strip():
            raise InvalidInputError("Version cannot be empty")
        if not TAG_PATTERN.fullmatch(self.value):
            raise InvalidInputError(f"Invalid version format: {self.value!r}")

    def __str__(self) -> str:
        return self.value
