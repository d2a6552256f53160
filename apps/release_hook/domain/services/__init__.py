"""Domain Services."""

from apps.release_hook.domain.services.image_entry_locator import (
    IMAGES_KEY,
    NEW_TAG_KEY,
    locate_image_entry,
)

__all__ = ["IMAGES_KEY", "NEW_TAG_KEY", "locate_image_entry"]
