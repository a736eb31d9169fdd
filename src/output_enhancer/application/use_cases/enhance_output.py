"""Use-case: EnhanceOutput – detect, pretty-print, ask the model, clean the reply."""

from __future__ import annotations

from dataclasses import dataclass

from output_enhancer.application.ports import Logger, ModelGateway
from output_enhancer.domain.format_detector import detect
from output_enhancer.domain.prompts import build_prompt
from output_enhancer.domain.sanitizer import sanitize
from output_enhancer.domain.structured_formatter import render_json, render_table
from output_enhancer.domain.value_objects import ColorMode, FormatTag


@dataclass
class EnhanceRequest:
    raw_input: str
    model: str


@dataclass
class EnhanceResponse:
    format: FormatTag
    formatted: str | None
    narrative: str


class EnhanceOutput:
    """Run one piece of command output through the whole pipeline."""

    def __init__(
        self,
        gateway: ModelGateway,
        logger: Logger,
        colors: ColorMode,
        width: int | None = None,
    ) -> None:
        self._gateway = gateway
        self._log = logger
        self._colors = colors
        self._width = width

    def execute(self, request: EnhanceRequest) -> EnhanceResponse:
        fmt = detect(request.raw_input)
        self._log.debug(f"Detected format: {fmt.value}", chars=len(request.raw_input))

        formatted = None
        if fmt.is_structured:
            render = render_json if fmt is FormatTag.JSON else render_table
            formatted = render(request.raw_input, self._width)

        # The model always sees the untouched input, even if formatting failed.
        prompt = build_prompt(fmt, request.raw_input)
        reply = self._gateway.generate(request.model, prompt)
        self._log.debug("Model replied", model=request.model, chars=len(reply))

        return EnhanceResponse(
            format=fmt,
            formatted=formatted,
            narrative=sanitize(reply, self._colors),
        )
