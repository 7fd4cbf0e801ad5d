"""
Exception types raised by the Sensu Go integration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


class SensuGoError(Exception):
    pass


class ConfigValidationError(SensuGoError, ValueError):
    pass


class ConfigUpdateError(SensuGoError, ValueError):
    pass


class ServiceDisabledError(SensuGoError):
    def __init__(self) -> None:
        super().__init__("service is not enabled")


class DeliveryTimeoutError(SensuGoError, TimeoutError):
    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(f"POST to {url} exceeded {timeout:g}s deadline")
        self.url = url
        self.timeout = timeout


class InvalidBackendURLError(ConfigValidationError):
    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"failed to create POST request: {reason}")
        self.url = url
