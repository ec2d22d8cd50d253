"""
Shared async GET helper for the HTTP data-source clients.

Each upstream call is attempted exactly once.  Failures are logged and
reported as ``None`` so that callers can treat "no data" as a normal value.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


async def async_http_get(
    client: httpx.AsyncClient,
    url: str,
    *,
    params: Optional[dict[str, Any]] = None,
    headers: Optional[dict[str, str]] = None,
    label: str = "HTTP",
) -> Optional[Any]:
    """GET *url* once and return the parsed JSON body.

    Returns ``None`` on a non-2xx status, a transport error or a body that
    is not valid JSON.
    """
    try:
        resp = await client.get(url, params=params, headers=headers)
        if resp.status_code == 429:
            logger.warning("%s rate-limited for %s", label, url)
            return None
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPStatusError as exc:
        logger.warning("%s HTTP %s for %s", label, exc.response.status_code, url)
        return None
    except httpx.RequestError as exc:
        logger.warning("%s request failed: %s – %s", label, url, exc)
        return None
    except ValueError as exc:
        logger.warning("%s returned invalid JSON for %s: %s", label, url, exc)
        return None
