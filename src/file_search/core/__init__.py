"""Core engine components for file search."""

from .engine import FileSearcher, RECOGNIZED_EXTENSIONS
from .exceptions import (
    FileSearchError,
    FileInaccessibleError,
    ValidationError
)

__all__ = [
    "FileSearcher",
    "RECOGNIZED_EXTENSIONS",
    "FileSearchError",
    "FileInaccessibleError",
    "ValidationError"
]
