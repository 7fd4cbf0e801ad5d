"""
Internal Sensu Go API endpoints: configuration hot swap, self-test, route binding management and alert ingestion through a named route binding.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import logging
from typing import Dict, Optional

from fastapi import APIRouter, Body, HTTPException, status

from middleware.error_handlers import handle_route_errors
from models.sensugo.config import HandlerConfig, SensuGoConfig
from models.sensugo.events import AlertEvent, SelfTestOptions
from services.sensugo.config_store import validate_config
from services.sensugo_service import build_route_registry, build_service

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route not found"

router = APIRouter(prefix="/sensugo", tags=["sensugo"])

sensugo_service = build_service()
route_registry = build_route_registry(sensugo_service)


@router.get("/config")
async def get_config() -> dict:
    return sensugo_service.config().redacted()


@router.put("/config")
@handle_route_errors()
async def put_config(new_config: SensuGoConfig = Body(...)) -> dict:
    validate_config(new_config)
    sensugo_service.update([new_config])
    return sensugo_service.config().redacted()


@router.get("/test-options", response_model=SelfTestOptions)
async def get_test_options() -> SelfTestOptions:
    return sensugo_service.test_options()


@router.post("/test")
@handle_route_errors()
async def run_test(options: Optional[SelfTestOptions] = Body(None)) -> Dict[str, str]:
    await sensugo_service.test(options or sensugo_service.test_options())
    return {"status": "sent"}


@router.get("/routes")
async def list_routes() -> Dict[str, HandlerConfig]:
    return route_registry.list()


@router.put("/routes/{name}", response_model=HandlerConfig)
async def put_route(name: str, options: HandlerConfig = Body(...)) -> HandlerConfig:
    return route_registry.put(name, options).config


@router.delete("/routes/{name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_route(name: str) -> None:
    if not route_registry.remove(name):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROUTE_NOT_FOUND)


@router.post("/routes/{name}/alerts", status_code=status.HTTP_202_ACCEPTED)
async def post_route_alert(name: str, event: AlertEvent = Body(...)) -> Dict[str, str]:
    handler = route_registry.get(name)
    if handler is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ROUTE_NOT_FOUND)
    await handler.handle(event)
    return {"status": "accepted", "route": name}
