"""Document and file statistics data models."""

from enum import Enum
from typing import List, Dict
from dataclasses import dataclass, field

from ..utils.text_processing import count_words


class FormatAdvisory(str, Enum):
    """Advisory classification of a file's extension."""
    RECOGNIZED = "recognized"
    UNRECOGNIZED = "unrecognized"


@dataclass
class FileStats:
    """
    Aggregate statistics for a loaded file.

    Attributes:
        line_count: Number of lines read
        word_count: Whitespace-delimited tokens summed over all lines
        char_count: Summed line lengths, newlines excluded
    """
    line_count: int = 0
    word_count: int = 0
    char_count: int = 0

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {
            "line_count": self.line_count,
            "word_count": self.word_count,
            "char_count": self.char_count,
        }


@dataclass
class Document:
    """
    Text file loaded fully into memory.

    Attributes:
        path: Path the document was read from
        lines: Lines in physical order, without trailing newlines
    """
    path: str
    lines: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def compute_stats(self) -> FileStats:
        """Compute line, word and character counts for the document."""
        stats = FileStats()
        for line in self.lines:
            stats.line_count += 1
            stats.char_count += len(line)
            stats.word_count += count_words(line)
        return stats
