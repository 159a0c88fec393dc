"""Search query data model."""

from dataclasses import dataclass
from pydantic import BaseModel, Field, field_validator

from ..utils.text_processing import is_blank


@dataclass
class SearchQuery:
    """
    Case-insensitive substring query.

    Attributes:
        text: Query text, kept verbatim
    """
    text: str

    def __post_init__(self) -> None:
        """Validate query text."""
        if not self.text:
            raise ValueError("Search term cannot be empty")
        if is_blank(self.text):
            raise ValueError("Search term contains only whitespace")

    def __str__(self) -> str:
        return self.text


class SearchRequestModel(BaseModel):
    """Pydantic model for validating a one-shot search request."""

    file_path: str = Field(..., min_length=1, description="Path of the file to search")
    query: str = Field(..., description="Search term")
    include_context: bool = Field(False, description="Attach surrounding lines to matches")

    @field_validator("file_path")
    @classmethod
    def validate_file_path(cls, v: str) -> str:
        """Ensure the path is not just whitespace."""
        if is_blank(v):
            raise ValueError("File path cannot be empty")
        return v

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Ensure query text is not empty or whitespace only."""
        if not v:
            raise ValueError("Search term cannot be empty")
        if is_blank(v):
            raise ValueError("Search term contains only whitespace")
        return v

    def to_query(self) -> SearchQuery:
        """Convert to SearchQuery dataclass."""
        return SearchQuery(text=self.query)
