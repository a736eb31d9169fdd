"""Presenters – write use-case results to stdout and diagnostics to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from rich.markup import escape

from output_enhancer.application.use_cases.enhance_output import EnhanceResponse
from output_enhancer.domain.value_objects import ColorMode
from output_enhancer.infrastructure.logger import stderr_console

NO_INPUT_NOTICE = "No input provided."


# ---------------------------------------------------------------------------
# Enhanced output
# ---------------------------------------------------------------------------
def present_enhanced(resp: EnhanceResponse, *, stream: TextIO | None = None) -> None:
    """Print the local rendering (if any), a blank line, then the model's narrative.

    Plain print is used on purpose: the narrative already carries ANSI
    codes and bracketed text that rich would try to interpret as markup.
    """
    out = stream or sys.stdout
    if resp.formatted is not None:
        print(resp.formatted, file=out)
        print(file=out)
    print(resp.narrative, file=out)


def present_no_input(*, stream: TextIO | None = None) -> None:
    print(NO_INPUT_NOTICE, file=stream or sys.stdout)


# ---------------------------------------------------------------------------
# Diagnostics
# ---------------------------------------------------------------------------
def present_fatal(message: str, colors: ColorMode) -> None:
    stderr_console(colors).print(f"[red]{escape(message)}[/red]")
