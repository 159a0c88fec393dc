"""
Universal File Search Utility

Interactive command-line tool that searches a single text file for a
case-insensitive substring and reports matching lines, optional context
lines and basic file statistics.
"""

from .api.service import FileSearchService
from .core.engine import FileSearcher
from .models.document import Document, FileStats, FormatAdvisory
from .models.query import SearchQuery, SearchRequestModel
from .models.result import MatchResult, SearchReport

__version__ = "1.0.0"

__all__ = [
    "FileSearchService",
    "FileSearcher",
    "Document",
    "FileStats",
    "FormatAdvisory",
    "SearchQuery",
    "SearchRequestModel",
    "MatchResult",
    "SearchReport",
]
