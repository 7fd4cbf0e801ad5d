"""
Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

_TEST_ENV = {
    "APP_ENV": "test",
    "LOG_LEVEL": "debug",
    "SENSUGO_ENABLED": "true",
    "SENSUGO_URL": "https://sensu.example.com/api/core/v2/namespaces/default/events",
    "SENSUGO_TOKEN": "Key test-token",
    "SENSUGO_NAMESPACE": "default",
    "SENSUGO_HANDLERS": "slack,pagerduty",
    "SENSUGO_TIMEOUT": "60",
    "SENSUGO_EXPECTED_SERVICE_TOKEN": "test-service-token",
}


def ensure_test_env() -> None:
    for key, value in _TEST_ENV.items():
        os.environ.setdefault(key, value)
    os.environ.pop("SENSUGO_ROUTES_FILE", None)
