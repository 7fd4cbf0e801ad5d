"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

try:
    from ._env import ensure_test_env
except ImportError:
    from tests._env import ensure_test_env
ensure_test_env()

import threading

import pytest
from pydantic import ValidationError

from models.sensugo.config import SensuGoConfig
from services.sensugo.config_store import ConfigHolder, validate_config
from services.sensugo.errors import ConfigUpdateError, ConfigValidationError


def test_validate_requires_url_when_enabled():
    with pytest.raises(ConfigValidationError, match="must specify backend URL"):
        validate_config(SensuGoConfig(enabled=True))


def test_validate_allows_disabled_without_url():
    validate_config(SensuGoConfig(enabled=False))
    validate_config(SensuGoConfig(enabled=True, url="https://sensu.example.com"))


def test_config_is_immutable():
    cfg = SensuGoConfig(enabled=True, url="https://sensu.example.com")
    with pytest.raises(ValidationError):
        cfg.url = "https://other.example.com"


def test_redacted_hides_token():
    cfg = SensuGoConfig(token="Key secret")
    assert cfg.redacted()["token"] == "********"
    assert SensuGoConfig().redacted()["token"] == ""


@pytest.mark.parametrize("payload", [[], [SensuGoConfig(), SensuGoConfig()], [SensuGoConfig()] * 3])
def test_update_rejects_wrong_count(payload):
    holder = ConfigHolder(SensuGoConfig(namespace="before"))
    with pytest.raises(ConfigUpdateError, match=f"expected only one new config object, got {len(payload)}"):
        holder.update(payload)
    assert holder.get().namespace == "before"


def test_update_rejects_wrong_type():
    holder = ConfigHolder()
    with pytest.raises(ConfigUpdateError, match="expected config object to be of type SensuGoConfig, got dict"):
        holder.update([{"enabled": True}])


def test_update_replaces_whole_config():
    holder = ConfigHolder(SensuGoConfig(enabled=True, url="https://a.example.com", handlers=["x"]))
    holder.update([SensuGoConfig(namespace="new")])
    current = holder.get()
    assert current.enabled is False
    assert current.url == ""
    assert current.handlers == []
    assert current.namespace == "new"


def test_concurrent_readers_never_see_mixed_config():
    first = SensuGoConfig(enabled=True, url="https://a.example.com", token="a", namespace="a", handlers=["a"])
    second = SensuGoConfig(enabled=True, url="https://b.example.com", token="b", namespace="b", handlers=["b"])
    holder = ConfigHolder(first)
    stop = threading.Event()
    mismatches = []

    def reader():
        while not stop.is_set():
            cfg = holder.get()
            tags = {cfg.token, cfg.namespace, cfg.handlers[0], cfg.url[8]}
            if len(tags) != 1:
                mismatches.append(cfg)

    readers = [threading.Thread(target=reader) for _ in range(4)]
    for t in readers:
        t.start()
    for i in range(2000):
        holder.update([second if i % 2 else first])
    stop.set()
    for t in readers:
        t.join()

    assert mismatches == []
