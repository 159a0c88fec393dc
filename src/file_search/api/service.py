"""High-level search-and-report service."""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..core.engine import FileSearcher
from ..core.exceptions import FileSearchError, FileInaccessibleError, ValidationError
from ..models.document import FormatAdvisory
from ..models.query import SearchQuery
from ..models.result import SearchReport
from ..utils.formatting import (
    format_advisory,
    format_inaccessible,
    format_report,
)
from ..utils.logging_config import setup_logging, StructuredLogger
from ..utils.text_processing import extract_extension
from ..utils.validators import validate_query

logger = logging.getLogger(__name__)


class FileSearchService:
    """
    Runs the full pipeline for one file: accessibility check, format
    advisory, statistics, scan and report.

    Failures are reported to the user where they are detected and never
    propagate out of :meth:`execute`, so an interactive session can keep
    going after a bad path or query.
    """

    def __init__(
        self,
        searcher: Optional[FileSearcher] = None,
        echo: Callable[[str], None] = print,
        log_level: str = "INFO",
        configure_logging: bool = False
    ):
        """
        Initialize the search service.

        Args:
            searcher: Engine to use, a default FileSearcher if not given
            echo: Callable receiving each block of user-facing output
            log_level: Logging level used when configure_logging is set
            configure_logging: Whether to call setup_logging
        """
        if configure_logging:
            setup_logging(level=log_level)

        self.searcher = searcher or FileSearcher()
        self.echo = echo

    def build_report(
        self,
        file_path: Union[str, Path],
        query: Union[str, SearchQuery],
        include_context: bool = False
    ) -> SearchReport:
        """
        Search a file and return the report without printing it.

        Raises:
            ValidationError: If the query is empty or whitespace only
            FileInaccessibleError: If the file cannot be read
        """
        if not isinstance(query, SearchQuery):
            query = validate_query(query)

        path = str(file_path)
        log = StructuredLogger(__name__).with_context(path=path)

        advisory = self.searcher.classify_format(path)
        extension = extract_extension(path)
        if advisory is FormatAdvisory.UNRECOGNIZED:
            log.warning(f"Unrecognized file format '{extension}', searching anyway")

        document = self.searcher.load_document(path)
        stats = self.searcher.compute_stats(document)
        matches = self.searcher.scan(document, query, include_context)

        log.info(f"Search for '{query.text}' found {len(matches)} matches")
        return SearchReport(
            file_path=path,
            query=query.text,
            stats=stats,
            advisory=advisory,
            extension=extension,
            include_context=include_context,
            matches=matches
        )

    def execute(
        self,
        file_path: Union[str, Path],
        query: Union[str, SearchQuery],
        include_context: bool = False
    ) -> Optional[SearchReport]:
        """
        Search a file and print the formatted report.

        Args:
            file_path: File to search
            query: Query text or validated query
            include_context: Show the lines around each match

        Returns:
            The report, or None if the search was aborted
        """
        path = str(file_path)

        try:
            if not isinstance(query, SearchQuery):
                query = validate_query(query)
        except ValidationError as e:
            logger.warning(f"Rejected query: {e}")
            self.echo(f"Error: {e}\n")
            return None

        if not self.searcher.check_accessible(path):
            logger.error(f"Cannot access file '{path}'")
            self.echo(format_inaccessible(path))
            return None

        advisory = self.searcher.classify_format(path)
        if advisory is FormatAdvisory.UNRECOGNIZED:
            self.echo(format_advisory(path, extract_extension(path)))

        try:
            report = self.build_report(path, query, include_context)
        except FileInaccessibleError as e:
            # File vanished or became unreadable after the check
            logger.error(str(e))
            self.echo(format_inaccessible(path))
            return None
        except FileSearchError as e:
            logger.error(f"Search failed: {e}")
            self.echo(f"Error: {e}\n")
            return None

        self.echo(format_report(report))
        return report
