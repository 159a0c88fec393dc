"""Text processing helpers for line scanning and statistics."""

import re
import string
from pathlib import PurePath
from typing import List, Optional

# Only A-Z are folded; everything else compares exactly.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# C-locale isspace set; Unicode separators such as \xa0 or \x1c are word characters.
ASCII_WHITESPACE = " \t\n\v\f\r"
_WORD_SEPARATOR = re.compile(r"[ \t\n\v\f\r]+")


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving other characters untouched."""
    return text.translate(_ASCII_LOWER)


def is_blank(text: str) -> bool:
    """True if the text is empty or made only of ASCII whitespace."""
    return not text.strip(ASCII_WHITESPACE)


def split_words(line: str) -> List[str]:
    """Split a line on runs of ASCII whitespace."""
    return [token for token in _WORD_SEPARATOR.split(line) if token]


def count_words(line: str) -> int:
    """Count whitespace-delimited tokens in a line."""
    return len(split_words(line))


def extract_extension(file_path: str) -> Optional[str]:
    """
    Extract the lower-cased extension of a file name.

    Only the final path component is considered, so a dot inside a
    directory name is not mistaken for an extension.

    Args:
        file_path: Path as entered by the user

    Returns:
        Extension without the leading dot, or None if the name has none
    """
    name = PurePath(file_path).name
    position = name.rfind(".")
    if position == -1 or position == len(name) - 1:
        return None
    return ascii_lower(name[position + 1:])


def split_lines(content: str) -> List[str]:
    """
    Split file content into lines on "\\n" only.

    A trailing newline does not start an extra empty line, and a "\\r"
    directly before "\\n" is removed so CRLF files read cleanly.
    """
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
