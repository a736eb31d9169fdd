"""Format detection – decide whether piped input is JSON, a table or plain text."""

from __future__ import annotations

import json
from typing import Any

from output_enhancer.domain.entities import ParsedTable
from output_enhancer.domain.value_objects import FormatTag


def _try_parse_json(text: str) -> Any | None:
    """Return the decoded document, or None when *text* is not valid JSON."""
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return None


def _is_metric_listing(table: ParsedTable) -> bool:
    # e.g. `nvme smart-log`: a "Metric  Value" header over ragged rows
    header = table.rows[0]
    return len(table.rows) > 1 and "Metric" in header and "Value" in header


def detect(text: str) -> FormatTag:
    """Classify *text* as JSON, TABLE or PLAIN_TEXT."""
    if not text.strip():
        return FormatTag.PLAIN_TEXT

    # Scalars fall through: only objects and arrays count as JSON.
    if isinstance(_try_parse_json(text), (dict, list)):
        return FormatTag.JSON

    lines = text.strip().splitlines()
    table = ParsedTable(rows=[line.split() for line in lines])

    if _is_metric_listing(table):
        return FormatTag.TABLE

    if table.is_rectangular and len(table.rows) > 1 and len(table.rows[0]) > 1:
        return FormatTag.TABLE

    return FormatTag.PLAIN_TEXT
