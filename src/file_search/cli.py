"""
Command-line interface for the file search utility.

Usage:
  file-search                                  # Interactive session
  file-search notes.txt "todo"                 # Search once and exit
  file-search notes.txt "todo" --context       # Include surrounding lines
  file-search notes.txt "todo" --json          # Print the report as JSON
  file-search --log-level DEBUG                # Show diagnostic logging on stderr
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from .api.service import FileSearchService
from .core.exceptions import FileSearchError, ValidationError
from .models.query import SearchRequestModel
from .utils.formatting import (
    format_closing_banner,
    format_header,
    format_instructions,
    format_session_summary,
)
from .utils.logging_config import setup_logging
from .utils.validators import parse_yes_no, validate_file_path, validate_query

logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "EXIT")
HELP_COMMANDS = ("help", "HELP")


class SearchSession:
    """
    Interactive read-command loop.

    Each round reads a file path, a search term and a y/n context toggle,
    then runs one search. The number of completed searches is owned by
    the session and returned from :meth:`run`.
    """

    def __init__(
        self,
        service: Optional[FileSearchService] = None,
        input_func: Optional[Callable[[str], str]] = None,
        echo: Callable[[str], None] = print
    ):
        self.echo = echo
        self.service = service or FileSearchService(echo=echo)
        self.input_func = input_func or input

    def _prompt(self, message: str) -> Optional[str]:
        """Read one line of input, None once input is exhausted."""
        try:
            return self.input_func(message)
        except (EOFError, KeyboardInterrupt):
            return None

    def _read_query(self) -> Optional[str]:
        """Prompt until a valid search term is entered."""
        while True:
            text = self._prompt("Enter search term: ")
            if text is None:
                return None
            try:
                return validate_query(text).text
            except ValidationError as e:
                self.echo(f"Error: {e}\n")

    def run(self) -> int:
        """
        Run the session until 'exit', end of input or Ctrl-C.

        Returns:
            Number of searches completed
        """
        searches_completed = 0
        self.echo(format_instructions())

        while True:
            file_path = self._prompt("Enter file path (or 'help'/'exit'): ")

            if file_path is None or file_path in EXIT_COMMANDS:
                break

            if file_path in HELP_COMMANDS:
                self.echo(format_instructions())
                continue

            try:
                validate_file_path(file_path)
            except ValidationError as e:
                self.echo(f"Error: {e}\n")
                continue

            query = self._read_query()
            if query is None:
                break

            answer = self._prompt("Include context lines? (y/n): ")
            if answer is None:
                break

            try:
                report = self.service.execute(file_path, query, parse_yes_no(answer))
            except KeyboardInterrupt:
                self.echo("\nSearch interrupted.")
                break
            if report is not None:
                searches_completed += 1

            self.echo("Search another file or type 'exit' to quit.\n")

        self.echo(format_session_summary(searches_completed))
        logger.info(f"Session ended after {searches_completed} searches")
        return searches_completed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="file-search",
        description="Case-insensitive search of a single text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("file_path", nargs="?", help="File to search (omit for interactive mode)")
    parser.add_argument("query", nargs="?", help="Search term")
    parser.add_argument("-c", "--context", action="store_true", help="Include surrounding lines")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    return parser


def run_once(args: argparse.Namespace) -> int:
    """Run a single non-interactive search, returning the exit status."""
    try:
        request = SearchRequestModel(
            file_path=args.file_path,
            query=args.query if args.query is not None else "",
            include_context=args.context,
        )
    except PydanticValidationError as e:
        for error in e.errors():
            print(f"Error: {error['msg']}", file=sys.stderr)
        return 1

    service = FileSearchService()

    if args.json:
        try:
            report = service.build_report(
                request.file_path, request.to_query(), request.include_context
            )
        except FileSearchError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    report = service.execute(request.file_path, request.to_query(), request.include_context)
    return 0 if report is not None else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the file-search command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, include_timestamp=False, stream=sys.stderr)

    if args.file_path is not None:
        return run_once(args)

    print(format_header())
    SearchSession().run()
    print(format_closing_banner())
    return 0


if __name__ == "__main__":
    sys.exit(main())
