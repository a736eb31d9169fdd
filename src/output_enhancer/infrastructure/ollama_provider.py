"""Infrastructure: Ollama model gateway – model listing and one-shot generation over HTTP."""

from __future__ import annotations

import httpx

from output_enhancer.application.ports import (
    Logger,
    ModelGateway,
    ModelListingError,
    ServiceUnavailableError,
)
from output_enhancer.domain.entities import ModelCatalog
from output_enhancer.domain.value_objects import ServiceUrl

AI_SERVER_ISSUE = "Error: AI server issue"
INVALID_AI_RESPONSE = "Error: Invalid AI response"
NO_RESPONSE_FIELD = "Error: No 'response' in AI output"


class OllamaGateway(ModelGateway):
    """Model gateway backed by a local Ollama instance.

    Uses the native endpoints directly via httpx:

    * ``GET /api/tags`` lists the installed models;
    * ``POST /api/generate`` with ``stream: false`` returns the whole
      completion in the ``response`` field.

    Generation never raises for service problems. The caller gets one of
    the ``Error: ...`` sentinels and a diagnostic goes to the logger.
    """

    DEFAULT_HOST = "http://localhost:11434"
    LIST_TIMEOUT = 5
    GENERATE_TIMEOUT = 300

    def __init__(
        self,
        url: ServiceUrl,
        logger: Logger,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._log = logger
        self._transport = transport

    def _client(self, timeout: float) -> httpx.Client:
        return httpx.Client(timeout=timeout, transport=self._transport)

    # ------------------------------------------------------------------
    # Port implementation
    # ------------------------------------------------------------------
    def list_models(self) -> ModelCatalog:
        endpoint = self._url.endpoint("/api/tags")
        try:
            with self._client(self.LIST_TIMEOUT) as client:
                resp = client.get(endpoint)
        except httpx.HTTPError as exc:
            self._log.debug(f"Listing request failed: {exc}", url=endpoint)
            raise ServiceUnavailableError("Ollama service not started or invalid url") from exc

        if resp.status_code != 200:
            self._log.debug("Listing returned an error status", url=endpoint, status=resp.status_code)
            raise ServiceUnavailableError("Ollama service not started or invalid url")

        try:
            return ModelCatalog.from_payload(resp.json())
        except ValueError as exc:
            raise ModelListingError(f"Error parsing models data: {exc}") from exc

    def generate(self, model: str, prompt: str) -> str:
        endpoint = self._url.endpoint("/api/generate")
        payload = {
            "model": model,
            "prompt": prompt,
            "stream": False,
        }

        try:
            with self._client(self.GENERATE_TIMEOUT) as client:
                resp = client.post(endpoint, json=payload)
        except httpx.TimeoutException:
            self._log.error(
                f"Ollama timed out after {self.GENERATE_TIMEOUT}s. "
                "The model may be loading for the first time, or the input is very long."
            )
            return AI_SERVER_ISSUE
        except httpx.HTTPError as exc:
            self._log.error(f"HTTP request failed: {exc}", url=endpoint)
            return AI_SERVER_ISSUE

        if resp.status_code != 200:
            self._log.error("HTTP request failed", status=resp.status_code, body=resp.text[:500])
            return AI_SERVER_ISSUE

        try:
            data = resp.json()
        except ValueError as exc:
            self._log.error(f"JSON parsing error: {exc}", body=resp.text[:500])
            return INVALID_AI_RESPONSE

        if not isinstance(data, dict):
            self._log.error("AI response is not a JSON object", body=resp.text[:500])
            return INVALID_AI_RESPONSE
        if "response" not in data:
            self._log.error("AI response missing 'response' field", body=resp.text[:500])
            return NO_RESPONSE_FIELD

        reply = data["response"]
        if not isinstance(reply, str):
            self._log.error("AI 'response' field is not a string", body=resp.text[:500])
            return INVALID_AI_RESPONSE
        return reply
