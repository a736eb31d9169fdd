"""Shared test fixtures and conftest for eo tests."""

from __future__ import annotations

import os
from typing import Any

import pytest

from output_enhancer.application.ports import Logger, ModelGateway
from output_enhancer.domain.entities import ModelCatalog, ModelInfo

# Variables the tool reads; each test starts without them.
_TOOL_ENV = ("OLLAMA_HOST", "EO_CONFIG_FILE", "FORCE_COLOR", "NO_COLOR", "EO_VERBOSE", "XDG_CONFIG_HOME")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Clear tool env vars, keep .env lookup and the saved URL inside tmp_path."""
    for name in _TOOL_ENV:
        # setenv first so monkeypatch also undoes values a test's .env file loads
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("EO_CONFIG_FILE", os.path.join(str(tmp_path), "eo", "config.txt"))
    return tmp_path


@pytest.fixture
def config_file(isolated_env):
    return isolated_env / "eo" / "config.txt"


# ---------------------------------------------------------------------------
# Test doubles
# ---------------------------------------------------------------------------
class RecordingLogger(Logger):
    """Logger that keeps every call for assertions."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def _record(self, level: str, msg: str, kw: dict[str, Any]) -> None:
        self.records.append((level, msg, kw))

    def warn(self, msg: str, **kw: Any) -> None:
        self._record("WARN", msg, kw)

    def error(self, msg: str, **kw: Any) -> None:
        self._record("ERROR", msg, kw)

    def debug(self, msg: str, **kw: Any) -> None:
        self._record("DEBUG", msg, kw)

    def messages(self, level: str) -> list[str]:
        return [m for lvl, m, _ in self.records if lvl == level]


class FakeGateway(ModelGateway):
    """Model gateway replaying a fixed listing and reply."""

    def __init__(self, reply: str = "", catalog: ModelCatalog | None = None, error: Exception | None = None):
        self._reply = reply
        self._catalog = catalog if catalog is not None else ModelCatalog([ModelInfo(name="qwen2.5:3b")])
        self._error = error
        self.prompts: list[tuple[str, str]] = []

    def list_models(self) -> ModelCatalog:
        if self._error is not None:
            raise self._error
        return self._catalog

    def generate(self, model: str, prompt: str) -> str:
        self.prompts.append((model, prompt))
        return self._reply


@pytest.fixture
def logger():
    return RecordingLogger()
