"""Application ports – abstract interfaces that infrastructure must implement.

These are the boundaries of the application layer. Domain and application code
depend only on these abstractions, never on concrete infrastructure.
"""

from __future__ import annotations

import abc
from typing import Any

from output_enhancer.domain.entities import ModelCatalog


# ---------------------------------------------------------------------------
# Model gateway
# ---------------------------------------------------------------------------
class GatewayError(RuntimeError):
    """The model-serving endpoint could not be used at all."""


class ServiceUnavailableError(GatewayError):
    """Endpoint unreachable or answered with a non-200 status."""


class ModelListingError(GatewayError):
    """Endpoint answered, but the model listing could not be understood."""


class ModelGateway(abc.ABC):
    """Port: model-serving endpoint (listing + one-shot generation)."""

    @abc.abstractmethod
    def list_models(self) -> ModelCatalog:
        """Return the available models. Raises GatewayError on failure."""
        ...

    @abc.abstractmethod
    def generate(self, model: str, prompt: str) -> str:
        """Return the completion text.

        Failures come back as in-band ``Error: ...`` strings, not exceptions.
        """
        ...


# ---------------------------------------------------------------------------
# Saved service URL
# ---------------------------------------------------------------------------
class UrlStore(abc.ABC):
    """Port: persisted base URL of the model-serving endpoint."""

    @abc.abstractmethod
    def load(self) -> str | None:
        ...

    @abc.abstractmethod
    def save(self, url: str) -> None:
        ...


# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
class Logger(abc.ABC):
    """Port: structured logging with secret redaction."""

    @abc.abstractmethod
    def warn(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def error(self, msg: str, **kw: Any) -> None:
        ...

    @abc.abstractmethod
    def debug(self, msg: str, **kw: Any) -> None:
        ...
