"""Pytest configuration and shared fixtures."""

import logging

import pytest
from pathlib import Path
from typing import Callable, List

from file_search.core.engine import FileSearcher
from file_search.api.service import FileSearchService


def write_lines(path: Path, lines: List[str]) -> Path:
    """Write lines to a file, one per line with a trailing newline."""
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    return path


@pytest.fixture
def searcher() -> FileSearcher:
    """Create a default file searcher."""
    return FileSearcher()


@pytest.fixture
def hello_file(tmp_path) -> Path:
    """Two-line file used by the basic examples."""
    return write_lines(tmp_path / "hello.txt", ["Hello World", "hello again"])


@pytest.fixture
def single_line_file(tmp_path) -> Path:
    """File with exactly one line."""
    return write_lines(tmp_path / "single.txt", ["only line"])


@pytest.fixture
def log_file(tmp_path) -> Path:
    """Multi-line log with matches at the start, middle and end."""
    return write_lines(tmp_path / "server.log", [
        "ERROR disk full",
        "info: started worker",
        "warning: slow request",
        "Error while closing socket, error code 9",
        "info: shutting down",
        "last line has an error",
    ])


@pytest.fixture
def output() -> List[str]:
    """Collect blocks passed to an echo callable."""
    return []


@pytest.fixture
def service(output) -> FileSearchService:
    """Search service whose printed output is captured in ``output``."""
    return FileSearchService(echo=output.append)


@pytest.fixture
def scripted_input() -> Callable[[List[str]], Callable[[str], str]]:
    """Build an input function that replays answers then raises EOFError."""
    def factory(answers: List[str]) -> Callable[[str], str]:
        remaining = list(answers)

        def fake_input(prompt: str = "") -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return fake_input

    return factory


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so they don't outlive captured streams."""
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    logging.getLogger("file_search").setLevel(logging.NOTSET)
