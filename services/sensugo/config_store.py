"""
Hot-swappable holder for the service-wide Sensu Go configuration. The holder stores one frozen `SensuGoConfig` snapshot; writers publish a complete replacement in a single reference assignment under a lock, and readers take the current reference without locking, so a reader never observes a partially-updated configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Sequence

from models.sensugo.config import SensuGoConfig

from .errors import ConfigUpdateError, ConfigValidationError

logger = logging.getLogger(__name__)


def validate_config(cfg: SensuGoConfig) -> None:
    if cfg.enabled and not cfg.url:
        raise ConfigValidationError("must specify backend URL")


class ConfigHolder:

    def __init__(self, initial: SensuGoConfig | None = None) -> None:
        self._lock = threading.Lock()
        self._current: SensuGoConfig = initial if initial is not None else SensuGoConfig()

    def get(self) -> SensuGoConfig:
        return self._current

    def set(self, cfg: SensuGoConfig) -> None:
        with self._lock:
            self._current = cfg
        logger.info("Sensu Go configuration replaced (enabled=%s, namespace=%s)", cfg.enabled, cfg.namespace)

    def update(self, new_configs: Sequence[Any]) -> None:
        count = len(new_configs)
        if count != 1:
            raise ConfigUpdateError(f"expected only one new config object, got {count}")
        candidate = new_configs[0]
        if not isinstance(candidate, SensuGoConfig):
            raise ConfigUpdateError(
                f"expected config object to be of type {SensuGoConfig.__name__}, got {type(candidate).__name__}"
            )
        self.set(candidate)
