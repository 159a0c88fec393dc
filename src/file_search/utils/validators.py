"""Input validation utilities."""

from ..models.query import SearchQuery
from ..core.exceptions import ValidationError
from .text_processing import is_blank


def validate_query(text: str) -> SearchQuery:
    """
    Validate raw query text entered by the user.

    Args:
        text: Query text, accepted verbatim when valid

    Returns:
        Validated search query

    Raises:
        ValidationError: If the text is empty or whitespace only
    """
    if not text:
        raise ValidationError("Search term cannot be empty. Please try again.")

    if is_blank(text):
        raise ValidationError("Search term contains only whitespace. Please try again.")

    return SearchQuery(text=text)


def validate_file_path(file_path: str) -> str:
    """
    Validate a file path entered by the user.

    Raises:
        ValidationError: If the path is empty
    """
    if not file_path:
        raise ValidationError("File path cannot be empty.")
    return file_path


def parse_yes_no(answer: str) -> bool:
    """Interpret a y/n answer; only 'y' or 'yes' in any case count as yes."""
    return answer.lower() in ("y", "yes")
