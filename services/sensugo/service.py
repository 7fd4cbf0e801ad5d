"""
Sensu Go delivery service. `SensuGoService.alert` maps one resolved alert onto a Sensu Go proxy-entity event, merging namespace and handler overrides with the current configuration snapshot, and POSTs it to the configured events API under a fixed deadline. Transport failures are reported to the diagnostics sink and raised to the caller; a non-2xx response from the backend is reported but not raised. The service also creates per-route bindings, runs the self-test and accepts configuration updates from the management channel.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx

from models.sensugo.config import HandlerConfig, SensuGoConfig
from models.sensugo.events import SelfTestOptions
from services.common.http_client import create_async_client

from . import payloads, transport
from .config_store import ConfigHolder
from .diagnostics import Diagnostic, LoggingDiagnostic
from .errors import DeliveryTimeoutError, InvalidBackendURLError, ServiceDisabledError
from .handler import SensuGoHandler

logger = logging.getLogger(__name__)

DEFAULT_DEADLINE_SECONDS = 60.0


class SensuGoService:

    def __init__(
        self,
        cfg: SensuGoConfig,
        diag: Optional[Diagnostic] = None,
        deadline: float = DEFAULT_DEADLINE_SECONDS,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = ConfigHolder(cfg)
        self.diag: Diagnostic = diag or LoggingDiagnostic(logger)
        self.deadline = deadline
        self._http_transport = http_transport
        self._client: Optional[httpx.AsyncClient] = None

    def open(self) -> None:
        if self._client is None:
            self._client = create_async_client(self.deadline, transport=self._http_transport)

    async def close(self) -> None:
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()

    def config(self) -> SensuGoConfig:
        return self._config.get()

    def update(self, new_configs: Sequence[Any]) -> None:
        self._config.update(new_configs)

    def handler(self, cfg: HandlerConfig, **context: Any) -> SensuGoHandler:
        return SensuGoHandler(self, cfg, self.diag.with_context(**context))

    def test_options(self) -> SelfTestOptions:
        return SelfTestOptions()

    async def test(self, options: SelfTestOptions) -> None:
        await self.alert(
            options.check,
            options.entity,
            options.message,
            options.namespace,
            options.handlers,
            options.labels,
            options.level,
        )

    async def alert(
        self,
        check: str,
        entity: str,
        message: str,
        namespace: str,
        handlers: List[str],
        labels: Dict[str, str],
        level: Any,
    ) -> None:
        c = self._config.get()

        if not c.enabled:
            raise ServiceDisabledError()

        event = payloads.build_event(
            check=check,
            entity=entity,
            message=message,
            namespace=namespace or c.namespace,
            handlers=list(handlers) if handlers else list(c.handlers),
            labels=dict(labels or {}),
            status=payloads.level_to_status(level),
        )
        data = payloads.serialize_event(event)

        headers = {
            "Authorization": c.token,
            "Content-Type": "application/json",
        }

        self.open()
        try:
            resp = await transport.post_with_deadline(self._client, c.url, data, headers, self.deadline)
        except (httpx.HTTPError, DeliveryTimeoutError, InvalidBackendURLError) as exc:
            self.diag.error("Failed to POST to Sensu Go", exc)
            raise

        if not transport.is_success(resp.status_code):
            self.diag.error(
                f"POST returned non 2xx status code ({resp.status_code})",
                code=str(resp.status_code),
            )
