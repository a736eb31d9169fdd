"""Unit tests for local JSON / table rendering."""

from __future__ import annotations

import json
from unittest.mock import patch

from output_enhancer.domain.structured_formatter import (
    MIN_COLUMN_WIDTH,
    render_json,
    render_table,
)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------
class TestRenderJson:
    def test_four_space_indent(self):
        assert render_json('{"a":1,"b":[1,2]}') == (
            '{\n'
            '    "a": 1,\n'
            '    "b": [\n'
            '        1,\n'
            '        2\n'
            '    ]\n'
            '}'
        )

    def test_source_key_order_is_kept(self):
        out = render_json('{"zeta": 1, "alpha": 2, "mid": 3}')
        assert out.index('"zeta"') < out.index('"alpha"') < out.index('"mid"')

    def test_non_ascii_is_kept(self):
        assert '"名前"' in render_json('{"名前": "ü"}')
        assert '"ü"' in render_json('{"名前": "ü"}')

    def test_stable_under_repeated_formatting(self):
        source = '{"b": {"c": [true, null, 1.5]}, "a": "x"}'
        once = render_json(source)
        assert render_json(once) == once

    def test_narrow_terminal_uses_smaller_indent(self):
        assert render_json('{"a": 1}', width=40) == '{\n  "a": 1\n}'
        assert render_json('{"a": 1}', width=120) == '{\n    "a": 1\n}'

    def test_invalid_json_diagnostic(self):
        out = render_json('{"a": ')
        assert out.startswith("Error: Invalid JSON")

    def test_structure_survives(self):
        source = '[{"id": 1, "tags": ["x", "y"]}, {"id": 2, "tags": []}]'
        assert json.loads(render_json(source)) == json.loads(source)


    def test_too_deeply_nested_is_a_diagnostic(self):
        out = render_json("[" * 100_000 + "]" * 100_000)
        assert out.startswith("Error: Invalid JSON")

    def test_encoder_recursion_is_a_diagnostic(self):
        with patch.object(json, "dumps", side_effect=RecursionError("maximum recursion depth exceeded")):
            out = render_json('{"a": 1}')
        assert out == "Error: Invalid JSON ─ maximum recursion depth exceeded"

# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------
def _field_offsets(line: str) -> list[int]:
    offsets = []
    prev = " "
    for i, ch in enumerate(line):
        if ch != " " and prev == " ":
            offsets.append(i)
        prev = ch
    return offsets


class TestRenderTable:
    SAMPLE = "PID USER CPU\n1 root 0.1\n2 root 0.2\n"

    def test_process_listing(self):
        assert render_table(self.SAMPLE) == (
            "PID  USER  CPU  \n"
            "1    root  0.1  \n"
            "2    root  0.2  "
        )

    def test_columns_start_at_same_offsets(self):
        text = "NAME STATUS AGE\nweb-frontend Running 3d\ndb Pending 12m\n"
        lines = render_table(text).splitlines()
        offsets = {tuple(_field_offsets(line)) for line in lines}
        assert len(offsets) == 1

    def test_rows_at_least_sum_of_widths(self):
        text = "NAME STATUS AGE\nweb-frontend Running 3d\ndb Pending 12m\n"
        widths = [len("web-frontend"), len("Running"), len("AGE")]
        for line in render_table(text).splitlines():
            assert len(line) >= sum(widths)

    def test_header_is_plain_data(self):
        first = render_table(self.SAMPLE).splitlines()[0]
        assert first.split() == ["PID", "USER", "CPU"]

    def test_ragged_rows_are_rendered(self):
        out = render_table("Metric Value\ntemperature : 35 C\n")
        assert out.splitlines()[1].split() == ["temperature", ":", "35", "C"]

    def test_empty_input(self):
        assert render_table("") == ""
        assert render_table("\n\n") == ""

    def test_fits_terminal_width(self):
        text = "name description\nalpha " + "x" * 40 + "\nbeta short\n"
        out = render_table(text, width=30)
        for line in out.splitlines():
            assert len(line.rstrip()) <= 30
        assert "…" in out

    def test_width_floor_per_column(self):
        out = render_table("aaaaaaaaaa bbbbbbbbbb\ncc dd\n", width=8)
        first, second = out.splitlines()
        assert first == "aaaa…  bbbb…  "
        assert second.index("dd") == MIN_COLUMN_WIDTH + 2

    def test_wide_terminal_changes_nothing(self):
        assert render_table(self.SAMPLE, width=200) == render_table(self.SAMPLE)

    def test_narrow_column_is_not_widened_to_the_floor(self):
        text = "a " + "b" * 100 + "\nc " + "d" * 100
        lines = render_table(text, width=40).splitlines()
        for line in lines:
            assert len(line.rstrip()) <= 40
        assert lines[0].startswith("a  b")
        assert lines[1].startswith("c  d")
