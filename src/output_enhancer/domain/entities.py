"""Domain entities – core business objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


DEFAULT_MODEL = "llama3:8b-instruct-q4_0"


@dataclass
class ParsedTable:
    """Whitespace-delimited rows of string fields."""

    rows: list[list[str]] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str) -> "ParsedTable":
        """Tokenize every non-blank line of *text* on runs of whitespace."""
        rows = [line.split() for line in text.splitlines()]
        return cls(rows=[r for r in rows if r])

    @property
    def column_count(self) -> int:
        return max((len(r) for r in self.rows), default=0)

    @property
    def is_rectangular(self) -> bool:
        """True when every row has the same field count as the first row."""
        if not self.rows:
            return False
        width = len(self.rows[0])
        return all(len(r) == width for r in self.rows)

    def column_widths(self) -> list[int]:
        widths = [0] * self.column_count
        for row in self.rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))
        return widths


@dataclass
class ModelInfo:
    """One model advertised by the model-serving endpoint."""

    name: str
    size: str = ""
    family: str = ""
    params: str = ""
    quant: str = ""

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "ModelInfo":
        name = d.get("name")
        if not isinstance(name, str):
            raise ValueError(f"Model entry without a name: {d!r}")
        details = d.get("details")
        if not isinstance(details, dict):
            details = {}
        size = d.get("size")
        return cls(
            name=name,
            size=f"{size / 1e9:.1f} GB" if isinstance(size, (int, float)) else "",
            family=details.get("family", ""),
            params=details.get("parameter_size", ""),
            quant=details.get("quantization_level", ""),
        )


@dataclass
class ModelCatalog:
    """Models listed by ``/api/tags``; the first one is used for generation."""

    models: list[ModelInfo] = field(default_factory=list)

    @property
    def active_model(self) -> str:
        return self.models[0].name if self.models else DEFAULT_MODEL

    @property
    def names(self) -> list[str]:
        return [m.name for m in self.models]

    @classmethod
    def from_payload(cls, payload: Any) -> "ModelCatalog":
        """Build a catalog from the decoded listing body.

        Raises ValueError when the payload does not carry a ``models`` list.
        """
        if not isinstance(payload, dict) or not isinstance(payload.get("models"), list):
            raise ValueError("listing has no 'models' array")
        models = []
        for entry in payload["models"]:
            if not isinstance(entry, dict):
                raise ValueError(f"Unexpected model entry: {entry!r}")
            models.append(ModelInfo.from_dict(entry))
        return cls(models=models)
