"""Utility modules for the file search utility."""

from .text_processing import ascii_lower, is_blank, count_words, extract_extension
from .validators import validate_query, validate_file_path, parse_yes_no
from .logging_config import setup_logging

__all__ = [
    "ascii_lower",
    "is_blank",
    "count_words",
    "extract_extension",
    "validate_query",
    "validate_file_path",
    "parse_yes_no",
    "setup_logging",
]
