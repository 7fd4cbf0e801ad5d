"""
Configuration management for the Sensu Go notifier, loading settings from environment variables with support for defaults and type conversion. This module defines a `Config` class holding server settings, shared HTTP client tuning and the service-wide Sensu Go connection defaults (endpoint, token, namespace and handler list) that seed the hot-swappable configuration holder at startup. Secrets are resolved through a `SecretProvider` so that tokens can be supplied either directly in the environment or through mounted secret files.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
import os
from typing import List, Optional

from services.secrets.provider import SecretProvider, build_secret_provider

logger = logging.getLogger(__name__)


def _to_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _to_list(value: Optional[str], default: Optional[List[str]] = None) -> List[str]:
    if value is None:
        return default or []
    parsed = [item.strip() for item in value.split(",") if item.strip()]
    return parsed if parsed else (default or [])


def _env_name() -> str:
    return (os.getenv("APP_ENV") or os.getenv("ENVIRONMENT") or "development").strip().lower()


class Config:
    def __init__(self) -> None:
        self.APP_ENV: str = _env_name()
        self.IS_PRODUCTION: bool = self.APP_ENV in {"prod", "production"}

        # Server configuration
        self.HOST: str = os.getenv("HOST", "127.0.0.1")
        self.PORT: int = int(os.getenv("PORT", "4329"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "info")
        self.ENABLE_API_DOCS: bool = _to_bool(os.getenv("ENABLE_API_DOCS"), default=not self.IS_PRODUCTION)

        # Shared upstream HTTP client pool tuning
        self.HTTP_CLIENT_MAX_CONNECTIONS: int = int(os.getenv("HTTP_CLIENT_MAX_CONNECTIONS", "100"))
        self.HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS: int = int(os.getenv("HTTP_CLIENT_MAX_KEEPALIVE_CONNECTIONS", "40"))
        self.HTTP_CLIENT_KEEPALIVE_EXPIRY: float = float(os.getenv("HTTP_CLIENT_KEEPALIVE_EXPIRY", "30"))

        self._secret_provider: SecretProvider = build_secret_provider()

        # Sensu Go defaults; hot-swapped at runtime through the config holder
        self.SENSUGO_ENABLED: bool = _to_bool(os.getenv("SENSUGO_ENABLED"), default=False)
        self.SENSUGO_URL: str = os.getenv("SENSUGO_URL", "").strip()
        self.SENSUGO_TOKEN: str = self.get_secret("SENSUGO_TOKEN") or ""
        self.SENSUGO_NAMESPACE: str = os.getenv("SENSUGO_NAMESPACE", "default").strip()
        self.SENSUGO_HANDLERS: List[str] = _to_list(os.getenv("SENSUGO_HANDLERS"), default=[])
        # Absolute deadline for one delivery, measured from request creation
        self.SENSUGO_TIMEOUT: float = float(os.getenv("SENSUGO_TIMEOUT", "60"))
        self.SENSUGO_ROUTES_FILE: Optional[str] = os.getenv("SENSUGO_ROUTES_FILE") or None

        self.SENSUGO_EXPECTED_SERVICE_TOKEN: Optional[str] = self.get_secret("SENSUGO_EXPECTED_SERVICE_TOKEN")

        self.validate()

    def get_secret(self, key: str) -> Optional[str]:
        val = getattr(self, key, None)
        if val:
            return val

        try:
            return self._secret_provider.get(key)
        except OSError as exc:
            logger.warning("Secret %s could not be read: %s", key, exc)
            return None

    def validate(self) -> None:
        if self.SENSUGO_TIMEOUT <= 0:
            raise ValueError("SENSUGO_TIMEOUT must be a positive number of seconds")

        if self.SENSUGO_ENABLED and not self.SENSUGO_URL:
            raise ValueError("SENSUGO_URL must be set when SENSUGO_ENABLED=true")

        if self.IS_PRODUCTION and not self.SENSUGO_EXPECTED_SERVICE_TOKEN:
            raise ValueError("SENSUGO_EXPECTED_SERVICE_TOKEN must be configured in production")


config = Config()
