"""
Text formatters for search reports and session messages.

Every function returns a string; printing is left to the caller so the
same output can be shown interactively or captured in tests.

Example report:
    File Information:
      Path: notes.txt
      Lines: 2
      Words: 4
      Characters: 22

    Searching for: "hello"
    ==========================================
    Found 2 match(es):

    Match 1 - Line 1: Hello World
    ------------------------------------------
    Match 2 - Line 2: hello again
    ------------------------------------------
    ==========================================
"""

from typing import Iterable, List, Optional

from ..models.document import FileStats
from ..models.result import MatchResult, SearchReport

SEPARATOR = "=" * 42
DIVIDER = "-" * 42

SUPPORTED_TYPES_SUMMARY = ".txt, .cpp, .h, .py, .js, .html, .css, .xml, .json, .md, .log"


def format_header() -> str:
    """Format the application banner shown at startup."""
    lines = [
        SEPARATOR,
        "    UNIVERSAL FILE SEARCH UTILITY",
        SEPARATOR,
        "Search any text file for specific content",
        f"Supports: {SUPPORTED_TYPES_SUMMARY}",
        "Type 'exit' to quit the application",
        "",
    ]
    return "\n".join(lines)


def format_instructions() -> str:
    """Format the usage instructions shown at startup and on 'help'."""
    lines = [
        "Universal File Search Instructions:",
        SEPARATOR,
        "1. Enter the complete file path (e.g., 'document.txt' or '/home/user/notes.md')",
        "2. Enter your search term when prompted",
        "3. Choose whether to include context lines (y/n)",
        "",
        "Supported File Types:",
        "  Text: .txt, .log, .md, .cfg, .ini",
        "  Programming: .cpp, .c, .h, .py, .js, .java, .cs, .php",
        "  Web: .html, .css, .xml, .json, .yaml",
        "  Scripts: .sh, .bat, .sql",
        "",
        "Search Features:",
        "  - Case-insensitive matching",
        "  - Partial word matching",
        "  - Line context display option",
        "  - Match counting and statistics",
        "",
        "Commands:",
        "  'help' - Show these instructions",
        "  'exit' - Quit the application",
        "",
    ]
    return "\n".join(lines)


def format_inaccessible(file_path: str) -> str:
    """Format the diagnostic for a file that could not be opened."""
    lines = [
        f"Error: Cannot access file '{file_path}'",
        "Please check:",
        "  - File path is correct",
        "  - File exists in the specified location",
        "  - You have read permissions",
        "",
    ]
    return "\n".join(lines)


def format_advisory(file_path: str, extension: Optional[str]) -> str:
    """Format the non-fatal warning for an unrecognized file format."""
    if extension is None:
        warning = f"Warning: '{file_path}' has no file extension and may not be a text file."
    else:
        warning = f"Warning: '.{extension}' may not be a text file format."
    return f"{warning}\nAttempting to search anyway...\n"


def format_file_info(file_path: str, stats: FileStats) -> str:
    """Format the file statistics block."""
    lines = [
        "File Information:",
        f"  Path: {file_path}",
        f"  Lines: {stats.line_count}",
        f"  Words: {stats.word_count}",
        f"  Characters: {stats.char_count}",
        "",
    ]
    return "\n".join(lines)


def format_match(match: MatchResult, include_context: bool = False) -> str:
    """Format one match, with its context lines when requested."""
    lines = [f"Match {match.sequence_number} - Line {match.line_number}: {match.line_text}"]

    if include_context:
        if match.context_before is not None:
            lines.append(f"    Context Before: {match.context_before}")
        if match.context_after is not None:
            lines.append(f"    Context After:  {match.context_after}")
        lines.append("")

    return "\n".join(lines)


def format_matches(
    query: str,
    matches: Iterable[MatchResult],
    include_context: bool = False
) -> str:
    """Format the match listing for a query."""
    matches = list(matches)
    lines: List[str] = [f'Searching for: "{query}"', SEPARATOR]

    if not matches:
        lines.append(f'No matches found for "{query}" in the specified file.')
    else:
        lines.append(f"Found {len(matches)} match(es):")
        lines.append("")
        for match in matches:
            lines.append(format_match(match, include_context))
            lines.append(DIVIDER)

    lines.append(SEPARATOR)
    lines.append("")
    return "\n".join(lines)


def format_report(report: SearchReport) -> str:
    """Format a complete search report: statistics followed by matches."""
    return "\n".join([
        format_file_info(report.file_path, report.stats),
        format_matches(report.query, report.matches, report.include_context),
    ])


def format_session_summary(searches_completed: int) -> str:
    """Format the message printed when the session ends."""
    return (
        "\nUniversal search session terminated successfully.\n"
        f"Total files searched: {searches_completed}"
    )


def format_closing_banner() -> str:
    """Format the banner printed when the program exits."""
    lines = [
        "",
        SEPARATOR,
        "Universal file search utility closed successfully.",
        "All operations completed without errors.",
        "Program termination: SUCCESS",
        SEPARATOR,
    ]
    return "\n".join(lines)
