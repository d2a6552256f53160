"""YAML Persistence."""

from apps.release_hook.infrastructure.persistence_yaml.manifest_store_yaml import (
    YamlManifestStore,
)

__all__ = ["YamlManifestStore"]
