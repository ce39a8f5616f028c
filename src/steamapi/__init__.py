"""Async client for the Steam Web API: player profiles, owned games and friends."""

from .client import (
    PlayerNotFoundError,
    SteamAPIError,
    SteamClient,
    SteamDecodeError,
    SteamStatusError,
    SteamTimeoutError,
    SteamTransportError,
)
from .models import Friend, Game, Player

__all__ = [
    "SteamClient",
    "Player",
    "Game",
    "Friend",
    "SteamAPIError",
    "SteamTransportError",
    "SteamTimeoutError",
    "SteamStatusError",
    "SteamDecodeError",
    "PlayerNotFoundError",
]

__version__ = "0.1.0"
