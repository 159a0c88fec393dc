"""Search result data models."""

from typing import List, Dict, Any, Optional
from dataclasses import dataclass, field

from .document import FileStats, FormatAdvisory


@dataclass
class MatchResult:
    """
    A single matching line.

    Attributes:
        sequence_number: Position in discovery order (1-based)
        line_number: Position in the document (1-based)
        line_text: The matching line
        context_before: Preceding line, None at the start of the document
            or when context was not requested
        context_after: Following line, None at the end of the document
            or when context was not requested
    """
    sequence_number: int
    line_number: int
    line_text: str
    context_before: Optional[str] = None
    context_after: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate match result."""
        if self.sequence_number <= 0:
            raise ValueError("Sequence number must be positive")
        if self.line_number <= 0:
            raise ValueError("Line number must be positive")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "sequence_number": self.sequence_number,
            "line_number": self.line_number,
            "line_text": self.line_text,
            "context_before": self.context_before,
            "context_after": self.context_after,
        }


@dataclass
class SearchReport:
    """Outcome of searching one file."""
    file_path: str
    query: str
    stats: FileStats
    advisory: FormatAdvisory
    extension: Optional[str] = None
    include_context: bool = False
    matches: List[MatchResult] = field(default_factory=list)

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file_path": self.file_path,
            "query": self.query,
            "include_context": self.include_context,
            "format": {
                "extension": self.extension,
                "advisory": self.advisory.value,
            },
            "stats": self.stats.to_dict(),
            "match_count": self.match_count,
            "matches": [match.to_dict() for match in self.matches],
        }
