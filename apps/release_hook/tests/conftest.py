"""release_hook 테스트 공통 Fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from typing import Callable, Generator

import pytest

from apps.release_hook.setup.config import Settings, get_settings

SAMPLE_KUSTOMIZATION = """\
resources:
- ../default
images:
- name: controller
  newName: registry.example.com/keyhub-vault-operator
  newTag: 0.0.1
- name: sidecar
  newTag: 2.4.0
"""


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None, None, None]:
    """get_settings lru_cache 초기화."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def write_manifest(tmp_path: Path) -> Callable[[str], Path]:
    """tmp_path에 kustomization.yaml을 작성하는 팩토리."""

    def _write(content: str, name: str = "kustomization.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def manifest_path(write_manifest: Callable[[str], Path]) -> Path:
    """샘플 kustomization.yaml 경로."""
    return write_manifest(SAMPLE_KUSTOMIZATION)


@pytest.fixture
def settings(manifest_path: Path) -> Settings:
    """샘플 매니페스트를 가리키는 Settings."""
    return Settings(manifest_path=str(manifest_path))
