"""Application Queries."""

from apps.release_hook.application.queries.read_image_tag import ReadImageTagQuery

__all__ = ["ReadImageTagQuery"]
