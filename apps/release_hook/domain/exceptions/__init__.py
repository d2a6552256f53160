"""Domain Exceptions."""

from apps.release_hook.domain.exceptions.base import DomainError
from apps.release_hook.domain.exceptions.manifest import (
    MalformedDocumentError,
    ManifestIOError,
    NotFoundError,
)
from apps.release_hook.domain.exceptions.validation import InvalidInputError

__all__ = [
    "DomainError",
    "InvalidInputError",
    "NotFoundError",
    "MalformedDocumentError",
    "ManifestIOError",
]
