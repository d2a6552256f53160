"""YamlManifestStore 테스트."""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import Callable

import pytest
import yaml

from apps.release_hook.application.commands.patch_image_tag import PatchImageTagCommand
from apps.release_hook.application.patch.dto import PatchRequest
from apps.release_hook.domain.exceptions import (
    MalformedDocumentError,
    ManifestIOError,
)
from apps.release_hook.infrastructure.persistence_yaml import YamlManifestStore


def _permission_denied(*args: object, **kwargs: object) -> None:
    raise PermissionError(errno.EACCES, "Permission denied")


class TestLoad:
    """load 테스트."""

    @pytest.fixture
    def store(self) -> YamlManifestStore:
        return YamlManifestStore()

    def test_invalid_utf8_raises_malformed(self, store: YamlManifestStore, tmp_path: Path) -> None:
        """UTF-8이 아닌 바이트는 MalformedDocumentError."""
        path = tmp_path / "kustomization.yaml"
        path.write_bytes(b"images:\n- newTag: \xff\xfe\n")

        with pytest.raises(MalformedDocumentError, match="not utf-8 text"):
            store.load(path)

    def test_open_failure_raises_io_error(
        self,
        store: YamlManifestStore,
        manifest_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """읽기 실패는 ManifestIOError."""
        monkeypatch.setattr(Path, "open", _permission_denied)

        with pytest.raises(ManifestIOError, match="Permission denied") as exc_info:
            store.load(manifest_path)

        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_stat_failure_raises_io_error(
        self,
        store: YamlManifestStore,
        manifest_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """상위 디렉터리 접근 불가(EACCES)도 ManifestIOError."""
        monkeypatch.setattr(Path, "is_file", _permission_denied)

        with pytest.raises(ManifestIOError, match="Permission denied"):
            store.load(manifest_path)

    @pytest.mark.parametrize("content", ["[]\n", "0\n", "''\n"])
    def test_falsy_non_mapping_is_not_empty_document(
        self,
        store: YamlManifestStore,
        write_manifest: Callable[[str], Path],
        content: str,
    ) -> None:
        """빈 리스트/0 등은 빈 mapping으로 바꾸지 않음."""
        path = write_manifest(content)

        assert store.load(path) == yaml.safe_load(content)

    def test_empty_file_is_empty_mapping(
        self,
        store: YamlManifestStore,
        write_manifest: Callable[[str], Path],
    ) -> None:
        path = write_manifest("")

        assert store.load(path) == {}


class TestSave:
    """save 테스트."""

    @pytest.fixture
    def command(self) -> PatchImageTagCommand:
        return PatchImageTagCommand(YamlManifestStore())

    def test_symlink_target_is_patched(
        self,
        command: PatchImageTagCommand,
        write_manifest: Callable[[str], Path],
        tmp_path: Path,
    ) -> None:
        """심볼릭 링크는 유지되고 실제 파일이 갱신됨."""
        # Arrange
        real = write_manifest("images:\n- newTag: 0.0.1\n", name="real.yaml")
        link = tmp_path / "kustomization.yaml"
        link.symlink_to(real)

        # Act
        result = command.execute(PatchRequest(version="1.2.3", target_path=link))

        # Assert
        assert result.changed is True
        assert link.is_symlink()
        assert link.resolve() == real.resolve()
        assert yaml.safe_load(real.read_text()) == {"images": [{"newTag": "1.2.3"}]}
        assert sorted(p.name for p in tmp_path.iterdir()) == ["kustomization.yaml", "real.yaml"]

    def test_unwritable_target_raises_io_error(
        self,
        command: PatchImageTagCommand,
        manifest_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        """쓰기 권한이 없으면 ManifestIOError, 파일은 그대로."""
        # Arrange
        original = manifest_path.read_bytes()
        monkeypatch.setattr(os, "access", lambda *args, **kwargs: False)

        # Act & Assert
        with pytest.raises(ManifestIOError, match="Permission denied"):
            command.execute(PatchRequest(version="1.2.3", target_path=manifest_path))

        assert manifest_path.read_bytes() == original
        assert list(manifest_path.parent.iterdir()) == [manifest_path]

    @pytest.mark.skipif(os.geteuid() == 0, reason="root bypasses file permission checks")
    def test_read_only_file_raises_io_error(
        self,
        command: PatchImageTagCommand,
        manifest_path: Path,
    ) -> None:
        """읽기 전용 파일은 교체하지 않고 실패."""
        original = manifest_path.read_bytes()
        manifest_path.chmod(0o444)

        try:
            with pytest.raises(ManifestIOError):
                command.execute(PatchRequest(version="1.2.3", target_path=manifest_path))
            assert manifest_path.read_bytes() == original
        finally:
            manifest_path.chmod(0o644)
