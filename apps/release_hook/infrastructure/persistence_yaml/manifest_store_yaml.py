"""YAML Manifest Store.

PyYAML 기반 매니페스트 저장소 구현체입니다.
키 순서를 유지하며, 심볼릭 링크가 가리키는 실제 파일을
임시 파일 + rename으로 원자적으로 덮어씁니다.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Any

import yaml

from apps.release_hook.domain.exceptions.manifest import (
    MalformedDocumentError,
    ManifestIOError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class YamlManifestStore:
    """YAML 매니페스트 저장소.

    ManifestStore 인터페이스 구현체입니다.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def load(self, path: Path) -> Any:
        """매니페스트를 읽어 파싱합니다."""
        try:
            if not path.is_file():
                raise NotFoundError(str(path))
            with path.open("r", encoding=self._encoding) as fp:
                data = yaml.safe_load(fp)
        except yaml.YAMLError as e:
            raise MalformedDocumentError(str(path), f"invalid YAML: {e}") from e
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(str(path), f"not {self._encoding} text") from e
        except OSError as e:
            raise ManifestIOError(str(path), e.strerror or str(e)) from e

        # 빈 문서만 빈 mapping으로 취급
        return {} if data is None else data

    def save(self, path: Path, document: Any) -> None:
        """심볼릭 링크를 따라간 실제 파일을 임시 파일 + rename으로 교체합니다."""
        tmp_name: str | None = None
        try:
            target = path.resolve()
            if not os.access(target, os.W_OK):
                raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), str(target))
            with tempfile.NamedTemporaryFile(
                "w",
                encoding=self._encoding,
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as fp:
                tmp_name = fp.name
                yaml.safe_dump(document, fp, sort_keys=False, allow_unicode=True)
            shutil.copymode(target, tmp_name)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise ManifestIOError(str(path), e.strerror or str(e)) from e

        logger.debug("Manifest written", extra={"path": str(path), "target": str(target)})
