"""Basic usage example for the file search utility."""

import json
import tempfile
from pathlib import Path

from file_search import FileSearcher, FileSearchService, SearchQuery


SAMPLE_LINES = [
    "Meeting notes, 2024-03-04",
    "TODO: send the invoice to ACME",
    "Budget review moved to Friday",
    "todo: book travel for the offsite",
    "Nothing else to report",
]


def write_sample_file(directory: Path) -> Path:
    """Write a small notes file to search."""
    path = directory / "notes.txt"
    path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")
    return path


def engine_demo(path: Path) -> None:
    """Use the engine directly and work with the match objects."""
    print("1. Searching with FileSearcher...")
    searcher = FileSearcher()

    document = searcher.load_document(path)
    stats = searcher.compute_stats(document)
    print(f"   {stats.line_count} lines, {stats.word_count} words, {stats.char_count} characters")

    for match in searcher.scan(document, SearchQuery("todo"), include_context=True):
        print(f"   #{match.sequence_number} line {match.line_number}: {match.line_text}")
        print(f"      before: {match.context_before!r}")
        print(f"      after:  {match.context_after!r}")


def service_demo(path: Path) -> None:
    """Run the full pipeline with formatted output."""
    print("\n2. Formatted report from FileSearchService...\n")
    service = FileSearchService()
    service.execute(path, "TODO", include_context=False)

    print("3. Report as JSON...")
    report = service.build_report(path, "budget")
    print(json.dumps(report.to_dict(), indent=2))


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as temp_dir:
        sample_path = write_sample_file(Path(temp_dir))
        engine_demo(sample_path)
        service_demo(sample_path)
