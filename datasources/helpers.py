"""
Shared helper functions for external service connectors.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import time
from typing import Any, Dict, Mapping, Optional

import httpx

from datasources.exceptions import (
    DataSourceUnavailable,
    InvalidQuery,
    NotFound,
    QueryTimeout,
    RateLimited,
)


def retry_after_seconds(headers: Mapping[str, str]) -> Optional[float]:
    """Seconds to wait before retrying, from ``Retry-After`` or ``X-RateLimit-Reset``."""
    retry_after = headers.get("Retry-After")
    if retry_after:
        try:
            return max(0.0, float(retry_after))
        except ValueError:
            pass
    reset = headers.get("X-RateLimit-Reset")
    if reset:
        try:
            return max(0.0, float(reset) - time.time() + 1.0)
        except ValueError:
            pass
    return None


def _is_rate_limited(resp: Any) -> bool:
    if resp.status_code == 429:
        return True
    headers = getattr(resp, "headers", None) or {}
    return resp.status_code == 403 and headers.get("X-RateLimit-Remaining") == "0"


def _check(resp: Any, invalid_msg: str) -> None:
    if _is_rate_limited(resp):
        headers = getattr(resp, "headers", None) or {}
        raise RateLimited(
            f"{invalid_msg} [{resp.status_code}]: rate limit exceeded",
            retry_after=retry_after_seconds(headers),
        )
    try:
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        if resp.status_code == 404:
            raise NotFound(f"{invalid_msg} [404]: {resp.text}") from e
        raise InvalidQuery(f"{invalid_msg} [{resp.status_code}]: {resp.text}") from e


async def fetch_json(
    url: str,
    params: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    invalid_msg: str = "request failed",
    timeout_msg: str = "request timed out",
    unavailable_msg: str = "Cannot reach service at",
) -> Dict[str, Any]:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
            _check(resp, invalid_msg)
            return resp.json()
    except httpx.TimeoutException as e:
        raise QueryTimeout(timeout_msg) from e
    except httpx.RequestError as e:
        raise DataSourceUnavailable(f"{unavailable_msg} {url}") from e


async def post_json(
    url: str,
    payload: Dict[str, Any],
    headers: Optional[Dict[str, str]] = None,
    timeout: int = 30,
    invalid_msg: str = "request failed",
    timeout_msg: str = "request timed out",
    unavailable_msg: str = "Cannot reach service at",
) -> Dict[str, Any]:
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.post(url, json=payload, headers=headers)
            _check(resp, invalid_msg)
            return resp.json()
    except httpx.TimeoutException as e:
        raise QueryTimeout(timeout_msg) from e
    except httpx.RequestError as e:
        raise DataSourceUnavailable(f"{unavailable_msg} {url}") from e
