"""Line scanning engine for single-file text search."""

import logging
from pathlib import Path
from typing import List, Optional, FrozenSet, Iterable, Union

from ..models.document import Document, FileStats, FormatAdvisory
from ..models.query import SearchQuery
from ..models.result import MatchResult
from ..utils.text_processing import ascii_lower, extract_extension, split_lines
from .exceptions import FileInaccessibleError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

RECOGNIZED_EXTENSIONS: FrozenSet[str] = frozenset({
    "txt", "cpp", "c", "h", "hpp", "py", "js", "html",
    "htm", "css", "xml", "json", "md", "log", "cfg",
    "ini", "yaml", "yml", "sql", "sh", "bat", "cs",
    "java", "php", "rb", "go", "rs", "swift",
})


class FileSearcher:
    """
    Case-insensitive substring search over the lines of one text file.

    Each call to :meth:`load_document` reads a fresh copy of the file;
    nothing is cached between searches.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        recognized_extensions: Optional[Iterable[str]] = None
    ):
        """
        Initialize the searcher.

        Args:
            encoding: Text encoding used to read files; undecodable bytes
                are replaced rather than raising
            recognized_extensions: Extensions (without dot) treated as text
                formats, defaults to RECOGNIZED_EXTENSIONS
        """
        self.encoding = encoding
        if recognized_extensions is None:
            self.recognized_extensions = RECOGNIZED_EXTENSIONS
        else:
            self.recognized_extensions = frozenset(
                ascii_lower(ext.lstrip(".")) for ext in recognized_extensions
            )

    def check_accessible(self, file_path: PathLike) -> bool:
        """Return True if the file can be opened for reading."""
        try:
            with open(file_path, "r", encoding=self.encoding, errors="replace"):
                pass
        except (OSError, ValueError) as e:
            logger.debug(f"File not accessible: {file_path} ({e})")
            return False
        return True

    def classify_format(self, file_path: PathLike) -> FormatAdvisory:
        """Classify the file extension; never blocks the search."""
        extension = extract_extension(str(file_path))
        if extension is not None and extension in self.recognized_extensions:
            return FormatAdvisory.RECOGNIZED
        return FormatAdvisory.UNRECOGNIZED

    def load_document(self, file_path: PathLike) -> Document:
        """
        Read the whole file into memory.

        Args:
            file_path: File to read

        Returns:
            Document with lines in physical order, newlines stripped.
            Only a newline ends a line; a carriage return before it is
            dropped, a lone carriage return stays part of the line.

        Raises:
            FileInaccessibleError: If the file cannot be opened or read
        """
        try:
            with open(file_path, "r", encoding=self.encoding, errors="replace", newline="") as f:
                content = f.read()
        except OSError as e:
            raise FileInaccessibleError(str(file_path), e.strerror or str(e)) from e
        except ValueError as e:
            # e.g. a path with an embedded NUL byte
            raise FileInaccessibleError(str(file_path), str(e)) from e

        lines = split_lines(content)

        logger.debug(f"Loaded {len(lines)} lines from {file_path}")
        return Document(path=str(file_path), lines=lines)

    def compute_stats(self, document: Document) -> FileStats:
        """Compute line, word and character counts."""
        return document.compute_stats()

    def scan(
        self,
        document: Document,
        query: SearchQuery,
        include_context: bool = False
    ) -> List[MatchResult]:
        """
        Find every line containing the query, ignoring ASCII case.

        A line matches at most once no matter how many times the query
        occurs in it. Results are in line order.

        Args:
            document: Loaded document
            query: Validated query
            include_context: Attach the neighbouring lines to each match

        Returns:
            Matches in discovery order
        """
        needle = ascii_lower(query.text)
        lines = document.lines
        last_index = len(lines) - 1
        matches: List[MatchResult] = []

        for index, line in enumerate(lines):
            if needle not in ascii_lower(line):
                continue

            context_before = None
            context_after = None
            if include_context:
                if index > 0:
                    context_before = lines[index - 1]
                if index < last_index:
                    context_after = lines[index + 1]

            matches.append(MatchResult(
                sequence_number=len(matches) + 1,
                line_number=index + 1,
                line_text=line,
                context_before=context_before,
                context_after=context_after
            ))

        logger.debug(f"Scan for '{query.text}' found {len(matches)} matches in {document.path}")
        return matches

    def search(
        self,
        file_path: PathLike,
        query: SearchQuery,
        include_context: bool = False
    ) -> List[MatchResult]:
        """
        Load a file and scan it in one step.

        Raises:
            FileInaccessibleError: If the file cannot be opened or read
        """
        document = self.load_document(file_path)
        return self.scan(document, query, include_context)
