"""JSON-over-HTTP helper shared by the provider adapters.

Every failure mode (transport error, non-2xx status, body that is not JSON)
is raised as :class:`UpstreamError` tagged with the calling provider's name.
"""

from __future__ import annotations

from typing import Any

import httpx

from nowplaying_bot.utils.errors import UpstreamError
from nowplaying_bot.utils.logging import get_logger

_logger = get_logger(__name__)


async def fetch_json(
    http_client: httpx.AsyncClient,
    url: str,
    provider_name: str,
    params: dict[str, str] | None = None,
    headers: dict[str, str] | None = None,
) -> Any:
    """GET *url* and decode the JSON body.

    Raises
    ------
    UpstreamError
        If the request fails, the status is not 2xx, or the body is not JSON.
    """
    try:
        response = await http_client.get(url, params=params, headers=headers)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        _logger.warning(
            "upstream_http_error",
            provider=provider_name,
            url=url,
            status=exc.response.status_code,
        )
        raise UpstreamError(
            message=f"HTTP {exc.response.status_code} from {url}",
            provider_name=provider_name,
        ) from exc
    except httpx.HTTPError as exc:
        _logger.warning("upstream_request_failed", provider=provider_name, url=url, error=str(exc))
        raise UpstreamError(
            message=f"Request to {url} failed: {exc}",
            provider_name=provider_name,
        ) from exc

    try:
        return response.json()
    except ValueError as exc:
        _logger.warning("upstream_invalid_json", provider=provider_name, url=url)
        raise UpstreamError(
            message=f"Invalid JSON from {url}: {exc}",
            provider_name=provider_name,
        ) from exc
