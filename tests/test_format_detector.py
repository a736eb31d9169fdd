"""Unit tests for format detection."""

from __future__ import annotations

import pytest

from output_enhancer.domain.format_detector import detect
from output_enhancer.domain.value_objects import FormatTag


class TestJsonDetection:
    @pytest.mark.parametrize("text", [
        '{"a":1,"b":[1,2]}',
        "[1, 2, 3]",
        '  {"nested": {"x": null}}\n',
        '[\n  {"name": "web", "state": "running"},\n  {"name": "db", "state": "exited"}\n]',
        "{}",
    ])
    def test_objects_and_arrays(self, text):
        assert detect(text) is FormatTag.JSON

    @pytest.mark.parametrize("text", ["42", '"hello"', "true", "null", "3.14"])
    def test_scalars_are_not_json(self, text):
        assert detect(text) is not FormatTag.JSON

    def test_broken_json_is_not_an_error(self):
        assert detect('{"a": 1,') is FormatTag.PLAIN_TEXT


class TestTableDetection:
    def test_process_listing(self):
        assert detect("PID USER CPU\n1 root 0.1\n2 root 0.2\n") is FormatTag.TABLE

    def test_two_by_two(self):
        assert detect("a b\nc d") is FormatTag.TABLE

    def test_runs_of_whitespace_are_one_separator(self):
        text = "NAME      READY   STATUS\nweb-1     1/1     Running\ndb-0      0/1     Pending\n"
        assert detect(text) is FormatTag.TABLE

    def test_numbers_grid_is_table_not_json(self):
        assert detect("1 2\n3 4\n") is FormatTag.TABLE

    def test_single_line_is_never_table(self):
        assert detect("hello world\n") is FormatTag.PLAIN_TEXT

    def test_single_column_is_never_table(self):
        assert detect("alpha\nbeta\ngamma\n") is FormatTag.PLAIN_TEXT

    def test_ragged_rows(self):
        assert detect("a b\nc d e\n") is FormatTag.PLAIN_TEXT

    def test_blank_line_in_the_middle_breaks_table(self):
        assert detect("a b\n\nc d\n") is FormatTag.PLAIN_TEXT

    def test_metric_value_header_accepts_ragged_rows(self):
        text = (
            "Metric                     Value\n"
            "critical_warning           : 0\n"
            "temperature                : 35 C\n"
            "available_spare            : 100%\n"
        )
        assert detect(text) is FormatTag.TABLE

    def test_metric_value_header_alone_is_not_table(self):
        assert detect("Metric Value\n") is FormatTag.PLAIN_TEXT


class TestPlainText:
    @pytest.mark.parametrize("text", ["", "   \n\t\n"])
    def test_empty(self, text):
        assert detect(text) is FormatTag.PLAIN_TEXT

    def test_log_lines(self):
        text = (
            "Starting service...\n"
            "Listening on port 8080\n"
            "warning: cache directory missing, creating it\n"
        )
        assert detect(text) is FormatTag.PLAIN_TEXT

    def test_too_deeply_nested_json_is_plain_text(self):
        assert detect("[" * 100_000 + "]" * 100_000) is FormatTag.PLAIN_TEXT


def test_format_tag_structured_flag():
    assert FormatTag.JSON.is_structured
    assert FormatTag.TABLE.is_structured
    assert not FormatTag.PLAIN_TEXT.is_structured
