"""Exceptions raised by the Steam API client."""


class SteamAPIError(Exception):
    """Base exception for Steam API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SteamTransportError(SteamAPIError):
    """Raised when the request never got an answer (connection, DNS, protocol)."""

    pass


class SteamTimeoutError(SteamTransportError):
    """Raised when the caller's timeout elapses before the response arrives."""

    pass


class SteamStatusError(SteamAPIError):
    """Raised when Steam answers with a non-success HTTP status."""

    pass


class SteamDecodeError(SteamAPIError):
    """Raised when Steam answers with a body the client cannot understand."""

    pass


class PlayerNotFoundError(SteamAPIError):
    """Raised when a single-player lookup returns no player."""

    def __init__(self, steam_id: str):
        super().__init__(f"Player not found for Steam ID: {steam_id}")
        self.steam_id = steam_id
