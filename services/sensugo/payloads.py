"""
Payload construction for Sensu Go events: severity to check status mapping and assembly of the `PostEvent` wire object from resolved alert fields.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json
import time
from typing import Any, Dict, List, Optional

from models.sensugo.events import (
    AlertLevel,
    Check,
    CheckMetadata,
    Entity,
    EntityMetadata,
    PostEvent,
)

STATUS_UNKNOWN = 3

_STATUS_BY_LEVEL: Dict[AlertLevel, int] = {
    AlertLevel.OK: 0,
    AlertLevel.INFO: 0,
    AlertLevel.WARNING: 1,
    AlertLevel.CRITICAL: 2,
}


def level_to_status(level: Any) -> int:
    if isinstance(level, AlertLevel):
        return _STATUS_BY_LEVEL[level]
    try:
        return _STATUS_BY_LEVEL[AlertLevel(str(level).strip().upper())]
    except ValueError:
        return STATUS_UNKNOWN


def build_event(
    check: str,
    entity: str,
    message: str,
    namespace: str,
    handlers: List[str],
    labels: Dict[str, str],
    status: int,
    now: Optional[float] = None,
) -> PostEvent:
    issued = int(now if now is not None else time.time())
    return PostEvent(
        entity=Entity(
            metadata=EntityMetadata(name=entity, namespace=namespace, labels=labels),
        ),
        check=Check(
            output=message,
            status=status,
            metadata=CheckMetadata(name=check, labels=labels),
            issued=issued,
            executed=issued,
            handlers=handlers,
        ),
    )


def serialize_event(event: PostEvent) -> bytes:
    return json.dumps(event.model_dump(mode="json"), separators=(",", ":")).encode("utf-8")
