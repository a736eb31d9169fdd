"""Infrastructure: stderr diagnostics through rich, with secret redaction."""

from __future__ import annotations

from typing import Any, TextIO

from rich.console import Console
from rich.text import Text

from output_enhancer.application.ports import Logger as LoggerPort
from output_enhancer.domain.value_objects import ColorMode
from output_enhancer.infrastructure.config import redact_secrets

LEVEL_STYLES = {
    "ERROR": "red",
    "WARN": "yellow",
    "DEBUG": "dim",
}


def stderr_console(colors: ColorMode, stream: TextIO | None = None) -> Console:
    """Console for diagnostics; styled only when *colors* is enabled."""
    return Console(
        file=stream,
        stderr=stream is None,
        force_terminal=colors.enabled,
        color_system="standard" if colors.enabled else None,
        no_color=not colors.enabled,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class ConsoleLogger(LoggerPort):
    """Writes ``[LEVEL] message (key=value ...)`` lines to stderr.

    Messages and values are redacted before printing and are never read
    as rich markup, so brackets in model names or URLs come out as-is.
    """

    def __init__(
        self,
        verbose: bool = False,
        colors: ColorMode = ColorMode(enabled=False),
        stream: TextIO | None = None,
    ) -> None:
        self._verbose = verbose
        self._console = stderr_console(colors, stream)

    def _emit(self, level: str, msg: str, **kw: Any) -> None:
        line = Text(f"[{level}] {redact_secrets(msg)}", style=LEVEL_STYLES[level])
        if kw:
            extras = " ".join(f"{k}={redact_secrets(str(v))}" for k, v in kw.items())
            line.append(f" ({extras})", style="dim")
        self._console.print(line)

    def warn(self, msg: str, **kw: Any) -> None:
        self._emit("WARN", msg, **kw)

    def error(self, msg: str, **kw: Any) -> None:
        self._emit("ERROR", msg, **kw)

    def debug(self, msg: str, **kw: Any) -> None:
        if self._verbose:
            self._emit("DEBUG", msg, **kw)
