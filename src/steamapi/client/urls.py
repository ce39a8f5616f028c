"""Request URL construction for the Steam Web API.

Every accessor builds its request target here so that path layout and query
encoding stay identical across endpoints:

    https://api.steampowered.com/{interface}/{method}/v{version}/?{query}

Query parameters are sorted by name, so the same inputs always produce the
same URL.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import httpx


BASE_URL = "https://api.steampowered.com"

USER_SERVICE = "ISteamUser"
PLAYER_SERVICE = "IPlayerService"


def _format_value(value: Any) -> str:
    """Convert a query parameter value to its wire form."""
    # Steam expects numeric flags, httpx would send "true"/"false"
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def encode_params(params: Mapping[str, Any]) -> str:
    """Percent-encode query parameters in name order."""
    items: Sequence[tuple[str, str]] = [
        (name, _format_value(value))
        for name, value in sorted(params.items())
        if value is not None
    ]
    return str(httpx.QueryParams(items))


def build_url(
    interface: str,
    method: str,
    version: int = 1,
    params: Mapping[str, Any] | None = None,
    base_url: str = BASE_URL,
) -> str:
    """
    Build a fully-qualified Steam API URL.

    Args:
        interface: Steam API interface (e.g., "ISteamUser")
        method: API method (e.g., "GetPlayerSummaries")
        version: API version (default: 1)
        params: Query parameters, including the API key
        base_url: Scheme and host of the API

    Returns:
        URL string with the encoded query appended

    Raises:
        ValueError: If interface or method is empty or version is not positive
    """
    if not interface or not method:
        raise ValueError("interface and method are required")
    if version < 1:
        raise ValueError(f"Invalid API version: {version}")

    url = f"{base_url.rstrip('/')}/{interface}/{method}/v{version}/"
    query = encode_params(params or {})
    if query:
        url = f"{url}?{query}"
    return url
