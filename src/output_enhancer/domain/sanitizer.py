"""Response sanitizer – turn a model reply into terminal-ready text.

The reply goes through an ordered tuple of rewrite passes. Each pass is a
pure find-and-replace over the whole string and sees the output of the
passes before it, so the order of ``REWRITE_PASSES`` matters: think blocks
go first because they may contain ``**`` markers, and escapes are decoded
before anything that looks for newlines.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from output_enhancer.domain.value_objects import ColorMode

ESC = "\x1b"
BOLD = f"{ESC}[1m"
RESET = f"{ESC}[0m"

COLOR_CODES: dict[str, str] = {
    "red": f"{ESC}[31m",
    "green": f"{ESC}[32m",
    "yellow": f"{ESC}[33m",
    "blue": f"{ESC}[34m",
}
_COLOR_NAMES = "|".join(COLOR_CODES)

_THINK_RE = re.compile(r"<think>.*?</think>", re.DOTALL)
_ESCAPE_RE = re.compile(r"\\(\\|n|t|r|033)")
_ESCAPES = {"\\": "\\", "n": "\n", "t": "\t", "r": "\r", "033": ESC}
_NOTE_RE = re.compile(r"\n*^[ \t]*(?:\*\*)?Note:[^\n]*\s*\Z", re.MULTILINE)
_FENCE_RE = re.compile(r"```[^\n`]*\n.*?```", re.DOTALL)
_STRAY_FENCE_RE = re.compile(r"^[ \t]*```[^\s`]*|```", re.MULTILINE)
_BOLD_RE = re.compile(rf"(?:({_COLOR_NAMES})\[)?\*\*([^*]+)\*\*(\])?")
_COLOR_BOLD_RE = re.compile(rf"({_COLOR_NAMES})\[\*\*([^*]+)\*\*\]")
_DIVIDER_ROW_RE = re.compile(r"^[ \t]*\|[-:| \t]*-[-:| \t]*\|[ \t]*(?:\n|$)", re.MULTILINE)
_BORDER_RE = re.compile(r"(?:\|_+)+\|")
_ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


@dataclass(frozen=True)
class RewritePass:
    name: str
    apply: Callable[[str, ColorMode], str]


def strip_think_blocks(text: str, colors: ColorMode) -> str:
    return _THINK_RE.sub("", text)


def unescape_sequences(text: str, colors: ColorMode) -> str:
    """Decode ``\\n``, ``\\t``, ``\\r``, ``\\\\`` and ``\\033`` written out as text."""
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(1)], text)


def strip_trailing_note(text: str, colors: ColorMode) -> str:
    return _NOTE_RE.sub("", text)


def strip_code_fences(text: str, colors: ColorMode) -> str:
    text = _FENCE_RE.sub("", text)
    return _STRAY_FENCE_RE.sub("", text)


def apply_bold(text: str, colors: ColorMode) -> str:
    def _bold(m: re.Match[str]) -> str:
        color, inner, closing = m.groups()
        if color and closing:
            # color[**text**] belongs to the color pass
            return m.group(0)
        prefix = f"{color}[" if color else ""
        styled = f"{BOLD}{inner}{RESET}" if colors else inner
        return f"{prefix}{styled}{closing or ''}"

    return _BOLD_RE.sub(_bold, text)


def apply_color_bold(text: str, colors: ColorMode) -> str:
    def _color(m: re.Match[str]) -> str:
        color, inner = m.groups()
        if not colors:
            return inner
        return f"{COLOR_CODES[color]}{BOLD}{inner}{RESET}"

    return _COLOR_BOLD_RE.sub(_color, text)


def strip_table_artifacts(text: str, colors: ColorMode) -> str:
    text = _DIVIDER_ROW_RE.sub("", text)
    text = _BORDER_RE.sub("", text)
    text = text.replace(" | ", "  ")
    text = text.replace("| ", "")
    return text.replace(" |", "")


def strip_ansi_when_plain(text: str, colors: ColorMode) -> str:
    if colors:
        return text
    return _ANSI_SGR_RE.sub("", text)


def trim(text: str, colors: ColorMode) -> str:
    return text.strip()


REWRITE_PASSES: tuple[RewritePass, ...] = (
    RewritePass("think_blocks", strip_think_blocks),
    RewritePass("unescape", unescape_sequences),
    RewritePass("trailing_note", strip_trailing_note),
    RewritePass("code_fences", strip_code_fences),
    RewritePass("bold", apply_bold),
    RewritePass("color_bold", apply_color_bold),
    RewritePass("table_artifacts", strip_table_artifacts),
    RewritePass("plain_ansi", strip_ansi_when_plain),
    RewritePass("trim", trim),
)


def sanitize(raw: str, colors: ColorMode = ColorMode(enabled=True)) -> str:
    """Run *raw* through every rewrite pass, in order."""
    text = raw
    for rewrite in REWRITE_PASSES:
        text = rewrite.apply(text, colors)
    return text
