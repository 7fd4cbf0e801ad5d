"""
Module defines Pydantic models for inbound alert events, the Sensu Go wire event and self-test options.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

ENTITY_CLASS_PROXY = "proxy"


class AlertLevel(str, Enum):
    OK = "OK"
    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"


class AlertState(BaseModel):
    id: str = Field(..., description="Alert identifier, used as the check name")
    message: str = Field("", description="Rendered alert message")
    level: str = Field(AlertLevel.OK.value, description="Alert severity level")
    details: Optional[str] = Field(None, description="Optional alert details")
    time: Optional[str] = Field(None, description="Time the alert state was computed")


class AlertData(BaseModel):
    name: Optional[str] = Field(None, description="Series name")
    tags: Dict[str, str] = Field(default_factory=dict, description="Series tags")


class AlertEvent(BaseModel):
    state: AlertState
    data: AlertData = Field(default_factory=AlertData)


class EntityMetadata(BaseModel):
    name: str
    namespace: str
    labels: Dict[str, str]


class Entity(BaseModel):
    entity_class: str = ENTITY_CLASS_PROXY
    metadata: EntityMetadata


class CheckMetadata(BaseModel):
    name: str
    labels: Dict[str, str]


class Check(BaseModel):
    output: str
    status: int
    metadata: CheckMetadata
    issued: int
    executed: int
    handlers: List[str]


class PostEvent(BaseModel):
    """Event sent over HTTP POST to the Sensu Go backend."""

    entity: Entity
    check: Check


class SelfTestOptions(BaseModel):
    check: str = "testName"
    entity: str = "testEntity"
    entity_tag: str = Field("testEntityTag", alias="entity-tag")
    message: str = "testMessage"
    namespace: str = "test"
    handlers: List[str] = Field(default_factory=list)
    labels: Dict[str, str] = Field(default_factory=dict)
    level: str = AlertLevel.CRITICAL.value

    model_config = ConfigDict(populate_by_name=True)
