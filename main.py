"""
Entrypoint for the Sensu Go notifier service.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
import secrets
from contextlib import asynccontextmanager

import uvloop
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config import config
from middleware.audit import security_headers_middleware
from middleware.error_handlers import general_exception_handler, validation_exception_handler
from routers.sensugo import sensugo_router, sensugo_service

asyncio.set_event_loop_policy(uvloop.EventLoopPolicy())

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("sensugo_notifier")


@asynccontextmanager
async def lifespan(app: FastAPI):
    sensugo_service.open()
    logger.info("Sensu Go notifier started (enabled=%s)", sensugo_service.config().enabled)
    try:
        yield
    finally:
        await sensugo_service.close()


app = FastAPI(
    title="Sensu Go Notifier",
    description="Forwards alert events to a Sensu Go events API",
    version="1.0.0",
    docs_url="/docs" if config.ENABLE_API_DOCS else None,
    redoc_url="/redoc" if config.ENABLE_API_DOCS else None,
    openapi_url="/openapi.json" if config.ENABLE_API_DOCS else None,
    lifespan=lifespan,
)

app.middleware("http")(security_headers_middleware)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.middleware("http")
async def require_internal_service_token(request: Request, call_next):
    allowed_paths = {"/health"}
    if config.ENABLE_API_DOCS:
        allowed_paths.update({"/docs", "/redoc", "/openapi.json"})
    if request.url.path in allowed_paths:
        return await call_next(request)
    expected = config.get_secret("SENSUGO_EXPECTED_SERVICE_TOKEN")
    if not expected:
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Service token not configured"})
    provided = request.headers.get("X-Service-Token")
    if not provided or not secrets.compare_digest(provided, expected):
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": "Forbidden"})
    return await call_next(request)


app.include_router(sensugo_router, prefix="/internal/v1")


@app.get("/health")
async def health() -> dict:
    return {"status": "healthy", "service": "sensugo-notifier"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.HOST, port=config.PORT, loop="uvloop", log_level=config.LOG_LEVEL)
