"""
In-memory registry of named route bindings. Each route name maps to a `SensuGoHandler` created from a `HandlerConfig`; routes can be seeded from a YAML file at startup and managed through the internal API for the lifetime of the process.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import threading
from typing import Dict, List, Optional

import yaml
from pydantic import ValidationError

from models.sensugo.config import HandlerConfig

from .errors import SensuGoError
from .handler import SensuGoHandler
from .service import SensuGoService

logger = logging.getLogger(__name__)


class RouteFileError(SensuGoError, ValueError):
    pass


def parse_routes_yaml(content: str) -> Dict[str, HandlerConfig]:
    try:
        loaded = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise RouteFileError(f"Invalid routes YAML: {exc}") from exc

    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise RouteFileError("Routes YAML must be a mapping of route name to handler options")

    routes: Dict[str, HandlerConfig] = {}
    for name, options in loaded.items():
        try:
            routes[str(name)] = HandlerConfig.model_validate(options or {})
        except ValidationError as exc:
            raise RouteFileError(f"Invalid options for route '{name}': {exc}") from exc
    return routes


class RouteRegistry:

    def __init__(self, service: SensuGoService) -> None:
        self._service = service
        self._lock = threading.Lock()
        self._routes: Dict[str, SensuGoHandler] = {}

    def put(self, name: str, cfg: HandlerConfig) -> SensuGoHandler:
        handler = self._service.handler(cfg, route=name)
        with self._lock:
            self._routes[name] = handler
        logger.info("Registered Sensu Go route %s", name)
        return handler

    def get(self, name: str) -> Optional[SensuGoHandler]:
        with self._lock:
            return self._routes.get(name)

    def remove(self, name: str) -> bool:
        with self._lock:
            removed = self._routes.pop(name, None)
        if removed is not None:
            logger.info("Removed Sensu Go route %s", name)
        return removed is not None

    def list(self) -> Dict[str, HandlerConfig]:
        with self._lock:
            return {name: handler.config for name, handler in self._routes.items()}

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._routes)

    def load_file(self, path: str) -> int:
        with open(path, encoding="utf-8") as f:
            routes = parse_routes_yaml(f.read())
        for name, cfg in routes.items():
            self.put(name, cfg)
        logger.info("Loaded %d Sensu Go route(s) from %s", len(routes), path)
        return len(routes)
