"""Patch DTOs."""

from apps.release_hook.application.patch.dto.patch import PatchRequest

__all__ = ["PatchRequest"]
