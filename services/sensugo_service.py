"""
Process-wide wiring for the Sensu Go integration: builds the delivery service from the environment configuration and the registry of named route bindings, seeding routes from the configured YAML file when one is set.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging

from config import config
from models.sensugo.config import SensuGoConfig
from services.sensugo.config_store import validate_config
from services.sensugo.diagnostics import LoggingDiagnostic
from services.sensugo.routes import RouteRegistry
from services.sensugo.service import SensuGoService

logger = logging.getLogger(__name__)


def config_from_env() -> SensuGoConfig:
    cfg = SensuGoConfig(
        enabled=config.SENSUGO_ENABLED,
        url=config.SENSUGO_URL,
        token=config.SENSUGO_TOKEN,
        namespace=config.SENSUGO_NAMESPACE,
        handlers=list(config.SENSUGO_HANDLERS),
    )
    validate_config(cfg)
    return cfg


def build_service() -> SensuGoService:
    diag = LoggingDiagnostic(logging.getLogger("sensugo.diagnostic"), {"service": "sensugo"})
    return SensuGoService(config_from_env(), diag=diag, deadline=config.SENSUGO_TIMEOUT)


def build_route_registry(service: SensuGoService) -> RouteRegistry:
    registry = RouteRegistry(service)
    if config.SENSUGO_ROUTES_FILE:
        registry.load_file(config.SENSUGO_ROUTES_FILE)
    return registry
