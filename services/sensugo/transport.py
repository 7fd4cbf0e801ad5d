"""
Transport utilities for delivering Sensu Go events: a single HTTP POST bounded by an absolute deadline measured from request creation. The response body is always read and the response released before returning so pooled connections are never leaked, whatever the status code. Failed deliveries are not retried.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
import logging
from typing import Dict

import httpx

from .errors import DeliveryTimeoutError, InvalidBackendURLError

logger = logging.getLogger(__name__)


def is_success(status_code: int) -> bool:
    return status_code // 100 == 2


async def _send_and_drain(client: httpx.AsyncClient, request: httpx.Request) -> httpx.Response:
    response = await client.send(request, stream=True)
    try:
        await response.aread()
    finally:
        await response.aclose()
    return response


async def post_with_deadline(
    client: httpx.AsyncClient,
    url: str,
    content: bytes,
    headers: Dict[str, str],
    deadline: float,
) -> httpx.Response:
    try:
        request = client.build_request("POST", url, content=content, headers=headers)
    except (httpx.InvalidURL, ValueError) as exc:
        raise InvalidBackendURLError(url, exc) from exc

    try:
        return await asyncio.wait_for(_send_and_drain(client, request), timeout=deadline)
    except asyncio.TimeoutError as exc:
        logger.debug("POST to %s cancelled after %.3fs", url, deadline)
        raise DeliveryTimeoutError(url, deadline) from exc
