"""Outbound HTTP with a hard timeout.

All external calls go through ``fetch_with_timeout`` so that a slow upstream
can never hang a request handler, and so tests can inject an
``httpx.MockTransport``.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx

from wandr.shared.exceptions import ExternalServiceError, FetchTimeoutError

API_TIMEOUTS = {
    "GOOGLE_PLACES": 15000,
    "DEFAULT": 30000,
}


def fetch_with_timeout(
    url: str,
    *,
    method: str = "GET",
    timeout_ms: int = API_TIMEOUTS["DEFAULT"],
    params: Optional[dict[str, Any]] = None,
    json: Any = None,
    headers: Optional[dict[str, str]] = None,
    service: str = "http",
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Response:
    """Send one request, aborting it once ``timeout_ms`` elapses.

    The response is returned as-is; callers decide what a non-2xx status
    means for them.
    """
    timeout = httpx.Timeout(timeout_ms / 1000)
    try:
        with httpx.Client(timeout=timeout, transport=transport) as client:
            return client.request(method, url, params=params, json=json, headers=headers)
    except httpx.TimeoutException:
        raise FetchTimeoutError(service, timeout_ms) from None
    except httpx.HTTPError as exc:
        raise ExternalServiceError(service, f"request failed: {exc}") from None


__all__ = ["API_TIMEOUTS", "fetch_with_timeout"]
