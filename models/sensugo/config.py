"""
Module defines Pydantic models for the Sensu Go connection configuration and per-route handler options.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Dict, List
from pydantic import BaseModel, ConfigDict, Field

DESC_ENABLED = "Whether the Sensu Go integration is enabled"
DESC_BACKEND_URL = "Sensu Go backend events API URL"
DESC_TOKEN = "Value sent verbatim in the Authorization header"
DESC_DEFAULT_NAMESPACE = "Default Sensu Go namespace"
DESC_DEFAULT_HANDLERS = "Default Sensu handler list"
DESC_ROUTE_URL = "Sensu Go backend URL override. If empty uses the address from the configuration"
DESC_ROUTE_NAMESPACE = "Namespace override. If empty uses the configured namespace"
DESC_ROUTE_LABELS = "Metadata labels to include on the Sensu API request"
DESC_ROUTE_HANDLERS = "Sensu handler list override. If empty uses the configured handler list"
DESC_ROUTE_CHECK = "Check name in metadata"
DESC_ROUTE_ENTITY = "Entity name in metadata"
DESC_ROUTE_ENTITY_TAG = "Alert tag containing the entity name"


class SensuGoConfig(BaseModel):
    enabled: bool = Field(False, description=DESC_ENABLED)
    url: str = Field("", description=DESC_BACKEND_URL)
    token: str = Field("", description=DESC_TOKEN)
    namespace: str = Field("", description=DESC_DEFAULT_NAMESPACE)
    handlers: List[str] = Field(default_factory=list, description=DESC_DEFAULT_HANDLERS)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def redacted(self) -> Dict[str, object]:
        data = self.model_dump()
        data["token"] = "********" if self.token else ""
        return data


class HandlerConfig(BaseModel):
    url: str = Field("", description=DESC_ROUTE_URL)
    namespace: str = Field("", description=DESC_ROUTE_NAMESPACE)
    labels: Dict[str, str] = Field(default_factory=dict, description=DESC_ROUTE_LABELS)
    handlers: List[str] = Field(default_factory=list, description=DESC_ROUTE_HANDLERS)
    check: str = Field("", description=DESC_ROUTE_CHECK)
    entity: str = Field("", description=DESC_ROUTE_ENTITY)
    entity_tag: str = Field("", alias="entity-tag", description=DESC_ROUTE_ENTITY_TAG)

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")
