"""
Routers for the Sensu Go integration: configuration, self-test, route bindings and alert ingestion.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from .router import router as sensugo_router, route_registry, sensugo_service

__all__ = ["sensugo_router", "route_registry", "sensugo_service"]
