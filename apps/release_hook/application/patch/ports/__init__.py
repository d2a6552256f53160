"""Patch Ports."""

from apps.release_hook.application.patch.ports.manifest_store import ManifestStore

__all__ = ["ManifestStore"]
