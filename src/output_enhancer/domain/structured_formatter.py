"""Local pretty-printing of structured input (JSON documents, column tables)."""

from __future__ import annotations

import json

from output_enhancer.domain.entities import ParsedTable

JSON_INDENT = 4
NARROW_JSON_INDENT = 2
NARROW_WIDTH = 60

COLUMN_GUTTER = 2
MIN_COLUMN_WIDTH = 5
ELLIPSIS = "…"


def render_json(text: str, width: int | None = None) -> str:
    """Re-serialize *text* with a fixed indent, keeping the source key order.

    Returns an ``Error: Invalid JSON`` diagnostic instead of raising, also
    for documents nested too deeply for the parser or the encoder.
    """
    indent = NARROW_JSON_INDENT if width is not None and width < NARROW_WIDTH else JSON_INDENT
    try:
        return json.dumps(json.loads(text), indent=indent, ensure_ascii=False)
    except (ValueError, RecursionError) as exc:
        return f"Error: Invalid JSON ─ {exc}"


def _fit_widths(widths: list[int], width: int) -> list[int]:
    """Shrink column widths proportionally so a row fits in *width* columns."""
    natural = sum(widths) + COLUMN_GUTTER * len(widths)
    if natural <= width:
        return widths
    available = max(width - COLUMN_GUTTER * len(widths), 0)
    total = sum(widths) or 1
    # Columns already narrower than the floor keep their own width.
    return [max(min(w, MIN_COLUMN_WIDTH), min(w, w * available // total)) for w in widths]


def _truncate(cell: str, limit: int) -> str:
    if len(cell) <= limit:
        return cell
    return cell[: limit - 1] + ELLIPSIS


def render_table(text: str, width: int | None = None) -> str:
    """Align whitespace-separated columns of *text*.

    Every field is padded to its column's widest value plus a two-space
    gutter. With a terminal *width*, columns are shrunk (never below
    ``MIN_COLUMN_WIDTH``) and long fields truncated.
    """
    table = ParsedTable.parse(text)
    if not table.rows:
        return ""

    widths = table.column_widths()
    if width is not None:
        widths = _fit_widths(widths, width)

    lines = []
    for row in table.rows:
        lines.append("".join(
            _truncate(cell, widths[i]).ljust(widths[i] + COLUMN_GUTTER)
            for i, cell in enumerate(row)
        ))
    return "\n".join(lines)
