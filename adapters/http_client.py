"""Shared httpx plumbing for the upstream adapters.

Centralizes headers, timeouts and error translation so every upstream
behaves the same way and can be swapped for an ``httpx.MockTransport`` in tests.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import settings
from app.exceptions import UpstreamConnectionError, UpstreamStatusError

logger = logging.getLogger("gardenboard.http")


def build_client(
    base_url: str,
    *,
    timeout: float = 30.0,
    verify: bool = True,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` bound to one upstream base URL."""
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    return httpx.Client(
        base_url=base_url,
        timeout=httpx.Timeout(timeout),
        follow_redirects=True,
        headers=headers,
        verify=verify,
        transport=transport,
    )


def make_timeout(total: float, connect: float | None = None) -> httpx.Timeout:
    if connect is None:
        return httpx.Timeout(total)
    return httpx.Timeout(total, connect=connect)


def _decode_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def get_json(client: httpx.Client, path: str, *, timeout: httpx.Timeout | float | None = None) -> Any:
    """GET ``path`` and return the decoded JSON body.

    Raises:
        UpstreamStatusError: the upstream answered with a non-2xx status
        UpstreamConnectionError: transport failure or a body that is not JSON
    """
    kwargs: dict[str, Any] = {}
    if timeout is not None:
        kwargs["timeout"] = timeout

    url = f"{str(client.base_url).rstrip('/')}/{path.lstrip('/')}"
    try:
        response = client.get(path, **kwargs)
    except httpx.HTTPError as exc:
        logger.warning("Request to %s failed: %s", url, exc)
        raise UpstreamConnectionError(str(exc) or exc.__class__.__name__, url) from exc

    if not response.is_success:
        raise UpstreamStatusError(
            response.status_code,
            url=url,
            body=_decode_body(response),
            text=response.text,
        )

    try:
        return response.json()
    except ValueError as exc:
        logger.warning("Upstream %s returned a non-JSON body", url)
        raise UpstreamConnectionError(f"Invalid JSON from upstream: {exc}", url) from exc
