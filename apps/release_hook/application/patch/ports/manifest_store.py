"""ManifestStore Port.

매니페스트 문서 로드/저장을 위한 Gateway 인터페이스입니다.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol


class ManifestStore(Protocol):
    """매니페스트 저장소 인터페이스.

    구현체:
        - YamlManifestStore (infrastructure/persistence_yaml/)
    """

    def load(self, path: Path) -> Any:
        """문서를 읽어 파싱합니다.

        Args:
            path: 매니페스트 경로

        Returns:
            파싱된 문서

        Raises:
            NotFoundError: 파일 없음
            MalformedDocumentError: 파싱 실패
            ManifestIOError: 읽기 실패
        """
        ...

    def save(self, path: Path, document: Any) -> None:
        """문서를 같은 경로에 다시 씁니다.

        Args:
            path: 매니페스트 경로
            document: 저장할 문서

        Raises:
            ManifestIOError: 쓰기 실패
        """
        ...
