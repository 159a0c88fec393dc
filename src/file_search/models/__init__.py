"""Data models for the file search utility."""

from .document import Document, FileStats, FormatAdvisory
from .query import SearchQuery, SearchRequestModel
from .result import MatchResult, SearchReport

__all__ = [
    "Document",
    "FileStats",
    "FormatAdvisory",
    "SearchQuery",
    "SearchRequestModel",
    "MatchResult",
    "SearchReport",
]
