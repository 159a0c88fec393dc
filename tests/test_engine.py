"""Test core search engine functionality."""

import os
import pytest

from file_search.core.engine import FileSearcher, RECOGNIZED_EXTENSIONS
from file_search.core.exceptions import FileInaccessibleError, ValidationError
from file_search.models.document import Document, FormatAdvisory
from file_search.models.query import SearchQuery
from file_search.utils.text_processing import (
    ascii_lower,
    count_words,
    extract_extension,
    is_blank,
    split_lines,
)
from file_search.utils.validators import validate_query, validate_file_path, parse_yes_no

from conftest import write_lines


class TestTextProcessing:
    """Test text helpers."""

    def test_ascii_lower_only_folds_ascii(self):
        assert ascii_lower("HeLLo") == "hello"
        assert ascii_lower("ÄBC") == "Äbc"

    def test_is_blank_uses_ascii_whitespace(self):
        assert is_blank("")
        assert is_blank(" \t\n\v\f\r")
        assert not is_blank("\xa0")
        assert not is_blank("\u3000")

    def test_count_words(self):
        assert count_words("one  two\tthree") == 3
        assert count_words("") == 0

    def test_count_words_ignores_unicode_separators(self):
        assert count_words("a b c\x1cd") == 3
        assert count_words("x\xa0y\u3000z") == 1
        assert count_words(" a\vb\fc ") == 3

    @pytest.mark.parametrize("content,expected", [
        ("", []),
        ("one\n", ["one"]),
        ("one\ntwo", ["one", "two"]),
        ("one\r\ntwo\r\n", ["one", "two"]),
        ("progress 10%\rprogress 100%\nnext\n", ["progress 10%\rprogress 100%", "next"]),
        ("\n\n", ["", ""]),
    ])
    def test_split_lines(self, content, expected):
        assert split_lines(content) == expected

    @pytest.mark.parametrize("path,expected", [
        ("notes.TXT", "txt"),
        ("archive.tar.gz", "gz"),
        ("README", None),
        ("trailing.", None),
        ("some.dir/file", None),
        ("dir/script.Py", "py"),
    ])
    def test_extract_extension(self, path, expected):
        assert extract_extension(path) == expected


class TestValidators:
    """Test input validation."""

    def test_valid_query_returned_verbatim(self):
        assert validate_query(" a ").text == " a "

    def test_empty_query(self):
        with pytest.raises(ValidationError, match="cannot be empty"):
            validate_query("")

    def test_whitespace_query(self):
        with pytest.raises(ValidationError, match="only whitespace"):
            validate_query(" \t ")

    def test_unicode_space_query_accepted(self):
        assert validate_query("\xa0").text == "\xa0"

    def test_empty_file_path(self):
        with pytest.raises(ValidationError, match="File path cannot be empty"):
            validate_file_path("")

    @pytest.mark.parametrize("answer,expected", [
        ("y", True), ("Y", True), ("yes", True), ("YES", True), ("Yes", True),
        ("n", False), ("", False), ("yep", False), ("no", False),
    ])
    def test_parse_yes_no(self, answer, expected):
        assert parse_yes_no(answer) is expected


class TestFileSearcher:
    """Test FileSearcher functionality."""

    def test_check_accessible(self, searcher, hello_file, tmp_path):
        assert searcher.check_accessible(hello_file)
        assert not searcher.check_accessible(tmp_path / "missing.txt")

    def test_directory_is_not_accessible(self, searcher, tmp_path):
        assert not searcher.check_accessible(tmp_path)

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read files without permission bits"
    )
    def test_unreadable_file(self, searcher, hello_file):
        hello_file.chmod(0)
        try:
            assert not searcher.check_accessible(hello_file)
            with pytest.raises(FileInaccessibleError):
                searcher.load_document(hello_file)
        finally:
            hello_file.chmod(0o644)

    def test_load_missing_file_raises(self, searcher, tmp_path):
        missing = tmp_path / "missing.txt"

        with pytest.raises(FileInaccessibleError) as exc_info:
            searcher.load_document(missing)

        assert exc_info.value.file_path == str(missing)

    def test_load_document_strips_newlines(self, searcher, tmp_path):
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"first\r\nsecond\n\nlast")

        document = searcher.load_document(path)

        assert document.lines == ["first", "second", "", "last"]

    def test_load_replaces_undecodable_bytes(self, searcher, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"abc\xff\nxyz\n")

        document = searcher.load_document(path)

        assert len(document) == 2
        assert document.lines[1] == "xyz"

    def test_lone_carriage_return_does_not_split(self, searcher, tmp_path):
        path = tmp_path / "progress.log"
        path.write_bytes(b"progress 10%\rprogress 100%\nnext\n")

        document = searcher.load_document(path)

        assert len(document) == 2
        assert document.compute_stats().line_count == 2
        assert searcher.scan(document, SearchQuery("next"))[0].line_number == 2

    def test_path_with_nul_byte(self, searcher, tmp_path):
        bad_path = str(tmp_path / "bad\x00path.txt")

        assert not searcher.check_accessible(bad_path)
        with pytest.raises(FileInaccessibleError) as exc_info:
            searcher.load_document(bad_path)
        assert exc_info.value.file_path == bad_path

    def test_classify_format(self, searcher):
        assert searcher.classify_format("notes.txt") is FormatAdvisory.RECOGNIZED
        assert searcher.classify_format("Main.JAVA") is FormatAdvisory.RECOGNIZED
        assert searcher.classify_format("image.png") is FormatAdvisory.UNRECOGNIZED
        assert searcher.classify_format("Makefile") is FormatAdvisory.UNRECOGNIZED

    def test_custom_recognized_extensions(self):
        searcher = FileSearcher(recognized_extensions=[".CSV", "tsv"])

        assert searcher.classify_format("data.csv") is FormatAdvisory.RECOGNIZED
        assert searcher.classify_format("data.tsv") is FormatAdvisory.RECOGNIZED
        assert searcher.classify_format("notes.txt") is FormatAdvisory.UNRECOGNIZED

    def test_default_extensions(self):
        assert {"txt", "md", "log", "py", "swift"} <= RECOGNIZED_EXTENSIONS

    def test_compute_stats(self, searcher, hello_file):
        stats = searcher.compute_stats(searcher.load_document(hello_file))

        assert stats.line_count == 2
        assert stats.word_count == 4
        assert stats.char_count == len("Hello World") + len("hello again")


class TestScan:
    """Test the line scan."""

    def test_basic_matches(self, searcher, hello_file):
        matches = searcher.search(hello_file, SearchQuery("hello"))

        assert [(m.sequence_number, m.line_number, m.line_text) for m in matches] == [
            (1, 1, "Hello World"),
            (2, 2, "hello again"),
        ]
        assert all(m.context_before is None and m.context_after is None for m in matches)

    def test_no_matches(self, searcher, hello_file):
        assert searcher.search(hello_file, SearchQuery("xyz")) == []

    def test_single_line_has_no_context(self, searcher, single_line_file):
        matches = searcher.search(single_line_file, SearchQuery("only"), include_context=True)

        assert len(matches) == 1
        assert matches[0].line_number == 1
        assert matches[0].context_before is None
        assert matches[0].context_after is None

    def test_context_at_boundaries(self, searcher, log_file):
        matches = searcher.search(log_file, SearchQuery("error"), include_context=True)

        assert [m.line_number for m in matches] == [1, 4, 6]

        first, middle, last = matches
        assert first.context_before is None
        assert first.context_after == "info: started worker"
        assert middle.context_before == "warning: slow request"
        assert middle.context_after == "info: shutting down"
        assert last.context_before == "info: shutting down"
        assert last.context_after is None

    def test_multiple_occurrences_count_once(self, searcher, log_file):
        matches = searcher.search(log_file, SearchQuery("ERROR"))

        assert sum(1 for m in matches if m.line_number == 4) == 1

    def test_sequence_numbers_increase(self, searcher, log_file):
        matches = searcher.search(log_file, SearchQuery("o"))

        assert [m.sequence_number for m in matches] == list(range(1, len(matches) + 1))
        line_numbers = [m.line_number for m in matches]
        assert line_numbers == sorted(set(line_numbers))

    def test_matches_equal_brute_force(self, searcher, log_file):
        document = searcher.load_document(log_file)

        for text in ["info", "ERR", "g ", ":", "socket, error", "zzz"]:
            expected = [
                i + 1 for i, line in enumerate(document.lines)
                if text.lower() in line.lower()
            ]
            matches = searcher.scan(document, SearchQuery(text))
            assert [m.line_number for m in matches] == expected

    def test_case_folding_is_ascii_only(self, searcher):
        document = Document(path="x.txt", lines=["STRASSE", "Ärger", "ärger"])

        matches = searcher.scan(document, SearchQuery("ärger"))

        assert [m.line_number for m in matches] == [3]

    def test_query_whitespace_is_significant(self, searcher):
        document = Document(path="x.txt", lines=["a b", "ab"])

        matches = searcher.scan(document, SearchQuery(" b"))

        assert [m.line_number for m in matches] == [1]

    def test_empty_document(self, searcher, tmp_path):
        path = write_lines(tmp_path / "empty.txt", [])

        assert searcher.search(path, SearchQuery("anything"), include_context=True) == []
