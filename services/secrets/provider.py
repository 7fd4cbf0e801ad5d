"""
Provider interfaces and implementations for secrets management, defining a protocol for secret providers and two implementations: one reading secrets from environment variables and one reading them from files referenced by a `<KEY>_FILE` environment variable (the convention used by container secret mounts). The Sensu Go token and the internal service token are resolved through this protocol so the rest of the service never touches the environment directly for credentials.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import os
from typing import Dict, List, Optional, Protocol


class SecretProvider(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def get_many(self, keys: List[str]) -> Dict[str, Optional[str]]: ...


class EnvSecretProvider:
    def get(self, key: str) -> Optional[str]:
        return os.environ.get(key) or None

    def get_many(self, keys: List[str]) -> Dict[str, Optional[str]]:
        return {k: self.get(k) for k in keys}


class FileSecretProvider:
    """Reads ``<KEY>_FILE`` paths, falling back to the plain environment value."""

    def __init__(self, fallback: Optional[SecretProvider] = None) -> None:
        self._fallback = fallback or EnvSecretProvider()

    def get(self, key: str) -> Optional[str]:
        path = os.environ.get(f"{key}_FILE", "").strip()
        if not path:
            return self._fallback.get(key)
        with open(path) as f:
            return f.read().strip() or None

    def get_many(self, keys: List[str]) -> Dict[str, Optional[str]]:
        return {k: self.get(k) for k in keys}


def build_secret_provider() -> SecretProvider:
    if os.getenv("SECRETS_FROM_FILES", "").strip().lower() in ("1", "true", "yes", "on"):
        return FileSecretProvider()
    return EnvSecretProvider()
