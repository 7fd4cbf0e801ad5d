"""
Route binding for the Sensu Go service: adapts one inbound alert event to a delivery call, applying the binding's static overrides and resolving the entity name from the binding or from the event tags.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from models.sensugo.config import HandlerConfig
from models.sensugo.events import AlertEvent

from .diagnostics import Diagnostic

if TYPE_CHECKING:
    from .service import SensuGoService


def resolve_entity(cfg: HandlerConfig, event: AlertEvent) -> str:
    if cfg.entity:
        return cfg.entity
    if cfg.entity_tag:
        return event.data.tags.get(cfg.entity_tag, "")
    return ""


class SensuGoHandler:

    def __init__(self, service: "SensuGoService", cfg: HandlerConfig, diag: Diagnostic) -> None:
        self.service = service
        self.config = cfg
        self.diag = diag

    async def handle(self, event: AlertEvent) -> None:
        entity = resolve_entity(self.config, event)
        try:
            await self.service.alert(
                event.state.id,
                entity,
                event.state.message,
                self.config.namespace,
                self.config.handlers,
                self.config.labels,
                event.state.level,
            )
        except Exception as exc:
            # Delivery failures never propagate into the alert pipeline.
            self.diag.error("failed to send event to Sensu Go", exc)
