"""Domain value objects – small immutable types with validation."""

from __future__ import annotations

import enum
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO


class FormatTag(enum.Enum):
    """Shape of the piped input, as sniffed by the format detector."""

    JSON = "json"
    TABLE = "table"
    PLAIN_TEXT = "plain_text"

    @property
    def is_structured(self) -> bool:
        return self is not FormatTag.PLAIN_TEXT


@dataclass(frozen=True)
class ColorMode:
    """Whether ANSI styling should be emitted.

    Decided once at startup and passed explicitly to everything that
    styles text, so nothing reads a global switch.
    """

    enabled: bool

    @classmethod
    def detect(cls, stream: TextIO, environ: Mapping[str, str] | None = None) -> "ColorMode":
        """Enable color for a terminal *stream*, honouring FORCE_COLOR / NO_COLOR."""
        env = os.environ if environ is None else environ
        if env.get("FORCE_COLOR"):
            return cls(enabled=True)
        if env.get("NO_COLOR"):
            return cls(enabled=False)
        isatty = getattr(stream, "isatty", None)
        return cls(enabled=bool(isatty and isatty()))

    def __bool__(self) -> bool:
        return self.enabled


@dataclass(frozen=True)
class ServiceUrl:
    """Normalized base URL of the model-serving endpoint."""

    value: str

    def __post_init__(self) -> None:
        if not self.value.startswith(("http://", "https://")):
            raise ValueError(f"Invalid service URL: {self.value!r}")

    @classmethod
    def parse(cls, raw: str) -> "ServiceUrl":
        value = raw.strip().rstrip("/")
        if not value:
            raise ValueError("Service URL must not be empty")
        if "://" not in value:
            value = f"http://{value}"
        return cls(value=value)

    def endpoint(self, path: str) -> str:
        return f"{self.value}/{path.lstrip('/')}"

    def __str__(self) -> str:
        return self.value
