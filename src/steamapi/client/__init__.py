"""Steam API client module."""

from .errors import (
    PlayerNotFoundError,
    SteamAPIError,
    SteamDecodeError,
    SteamStatusError,
    SteamTimeoutError,
    SteamTransportError,
)
from .steam_client import SteamClient

__all__ = [
    "SteamClient",
    "SteamAPIError",
    "SteamTransportError",
    "SteamTimeoutError",
    "SteamStatusError",
    "SteamDecodeError",
    "PlayerNotFoundError",
]
