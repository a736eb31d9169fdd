"""Use-case: DiscoverModels – check the service is up and pick the active model."""

from __future__ import annotations

from dataclasses import dataclass

from output_enhancer.application.ports import Logger, ModelGateway


@dataclass
class DiscoverResponse:
    model: str


class DiscoverModels:
    """List models on the endpoint; the first listed one is used.

    GatewayError from the gateway is left to propagate: without a
    listing there is nothing useful to do.
    """

    def __init__(self, gateway: ModelGateway, logger: Logger) -> None:
        self._gateway = gateway
        self._log = logger

    def execute(self) -> DiscoverResponse:
        catalog = self._gateway.list_models()
        model = catalog.active_model
        if not catalog.models:
            self._log.warn(f"No models listed, falling back to {model}")
            return DiscoverResponse(model=model)

        active = catalog.models[0]
        self._log.debug(
            f"Using model {model}",
            family=active.family or "?",
            params=active.params or "?",
            quant=active.quant or "?",
            size=active.size or "?",
        )
        self._log.debug("Models listed", available=", ".join(catalog.names))
        return DiscoverResponse(model=model)
