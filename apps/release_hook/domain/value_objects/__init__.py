"""Domain Value Objects."""

from apps.release_hook.domain.value_objects.image_tag import ImageTag

__all__ = ["ImageTag"]
