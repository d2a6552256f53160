"""Application Commands."""

from apps.release_hook.application.commands.patch_image_tag import PatchImageTagCommand

__all__ = ["PatchImageTagCommand"]
