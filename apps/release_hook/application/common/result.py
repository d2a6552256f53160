"""Patch Result.

태그 패치 실행 결과를 Application 계층의 언어로 표현합니다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PatchResult:
    """태그 패치 결과.

    핵심 원칙:
    - 실패는 예외로 전파되며 이 객체로 삼키지 않음
    - error_detail은 호출자가 실패를 결과로 기록할 때만 사용
    """

    success: bool
    error_detail: str | None = None
    path: str | None = None
    previous_tag: str | None = None
    changed: bool = False

    @classmethod
    def patched(
        cls,
        path: str,
        previous_tag: str | None,
        changed: bool,
    ) -> PatchResult:
        """성공 결과 생성."""
        return cls(
            success=True,
            path=path,
            previous_tag=previous_tag,
            changed=changed,
        )
