"""Steam API Client for player profiles, game libraries and friend lists.

Each accessor follows the same pipeline:

    build_url -> _open (one GET) -> decode_envelope -> typed records

There is no caching, rate limiting or retrying. Errors propagate to the
caller unchanged in kind (see ``steamapi.client.errors``).
"""

import asyncio
import logging
import os
from collections.abc import AsyncIterator, Callable, Sequence
from contextlib import asynccontextmanager
from typing import Any, TypeVar

import httpx

from steamapi.client.decoder import decode_envelope
from steamapi.client.errors import (
    PlayerNotFoundError,
    SteamStatusError,
    SteamTimeoutError,
    SteamTransportError,
)
from steamapi.client.urls import PLAYER_SERVICE, USER_SERVICE, build_url
from steamapi.models import Friend, Game, Player


logger = logging.getLogger(__name__)

T = TypeVar("T")


class SteamClient:
    """
    Async client for the Steam Web API.

    The client only holds the API key and a connection pool, both fixed at
    construction, so one instance can be shared by concurrent tasks.

    Every accessor takes an optional ``timeout`` in seconds bounding the
    whole call, including both requests of ``get_friends``. Without it a
    call runs until it completes or its task is cancelled.
    """

    def __init__(self, api_key: str | None = None):
        """
        Initialize Steam API client.

        Args:
            api_key: Steam Web API key. If not provided, reads from STEAM_API_KEY env var.

        Raises:
            ValueError: If no API key is available
        """
        api_key = api_key or os.getenv("STEAM_API_KEY")
        if not api_key:
            raise ValueError("STEAM_API_KEY must be provided or set in environment")
        self._api_key = api_key

        self._client = httpx.AsyncClient(
            timeout=None,
            headers={"Accept": "application/json"},
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}(api_key=<redacted>)"

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "SteamClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    # Transport

    @asynccontextmanager
    async def _open(self, url: str) -> AsyncIterator[httpx.Response]:
        """
        Issue one GET request and yield the streamed response.

        The response body is released when the ``async with`` block exits,
        however it exits.

        Raises:
            SteamTimeoutError: If httpx reports a timeout
            SteamTransportError: On connection or protocol errors
            SteamStatusError: On a non-success HTTP status
        """
        try:
            async with self._client.stream("GET", url) as response:
                if response.status_code == 401:
                    raise SteamStatusError(
                        "Unauthorized - invalid API key or private profile",
                        response.status_code,
                    )
                if response.status_code == 403:
                    raise SteamStatusError(
                        "Access forbidden - check API key permissions",
                        response.status_code,
                    )
                if not response.is_success:
                    raise SteamStatusError(
                        f"Steam API returned HTTP {response.status_code}",
                        response.status_code,
                    )
                yield response
        except httpx.TimeoutException as e:
            raise SteamTimeoutError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise SteamTransportError(f"HTTP error: {e}") from e

    async def _fetch(
        self,
        url: str,
        wrapper: str,
        key: str,
        record_type: Callable[[dict[str, Any]], T],
    ) -> list[T]:
        async with self._open(url) as response:
            body = await response.aread()
            return decode_envelope(body, wrapper, key, record_type)

    async def get(
        self,
        interface: str,
        method: str,
        version: int,
        params: dict[str, Any],
        wrapper: str,
        key: str,
        record_type: Callable[[dict[str, Any]], T],
        timeout: float | None = None,
    ) -> list[T]:
        """
        Make a GET request to the Steam API and decode its collection.

        Args:
            interface: Steam API interface (e.g., "ISteamUser")
            method: API method (e.g., "GetPlayerSummaries")
            version: API version
            params: Method parameters (the API key is added here)
            wrapper: Envelope wrapper key (e.g., "response")
            key: Collection key inside the wrapper (e.g., "players")
            record_type: Builds one record from one JSON object
            timeout: Seconds allowed for the round trip, or None for no limit

        Returns:
            Decoded records

        Raises:
            SteamAPIError: On transport, status or decode errors
        """
        url = build_url(
            interface,
            method,
            version,
            {**params, "key": self._api_key, "format": "json"},
        )
        logger.debug(f"GET {interface}.{method}.v{version}")

        if timeout is None:
            return await self._fetch(url, wrapper, key, record_type)
        if timeout <= 0:
            raise SteamTimeoutError(f"{interface}.{method} not sent, no time left")

        try:
            return await asyncio.wait_for(
                self._fetch(url, wrapper, key, record_type), timeout
            )
        except asyncio.TimeoutError as e:
            raise SteamTimeoutError(
                f"{interface}.{method} did not complete within {timeout}s"
            ) from e

    # Accessors

    async def get_player_summaries(
        self, steam_ids: Sequence[str], *, timeout: float | None = None
    ) -> list[Player]:
        """
        Get player summaries for one or more Steam IDs.

        All IDs go out in a single request.

        Args:
            steam_ids: SteamID64 strings
            timeout: Seconds allowed for the round trip

        Returns:
            List of players, in the order Steam returns them. Unknown IDs are
            simply absent.

        Raises:
            ValueError: If no IDs are provided or a bare string is passed
            SteamAPIError: On API errors
        """
        if isinstance(steam_ids, str):
            raise ValueError("steam_ids must be a list of Steam IDs, not a single string")
        if not steam_ids:
            raise ValueError("At least one Steam ID is required")

        return await self.get(
            USER_SERVICE,
            "GetPlayerSummaries",
            2,
            {"steamids": list(steam_ids)},
            "response",
            "players",
            Player.from_dict,
            timeout=timeout,
        )

    async def get_player_summary(
        self, steam_id: str, *, timeout: float | None = None
    ) -> Player:
        """
        Get the summary of a single player.

        Raises:
            PlayerNotFoundError: If Steam returns no player for the ID
            SteamAPIError: On API errors
        """
        players = await self.get_player_summaries([steam_id], timeout=timeout)
        if not players:
            raise PlayerNotFoundError(steam_id)
        return players[0]

    async def get_owned_games(
        self, steam_id: str, *, timeout: float | None = None
    ) -> list[Game]:
        """
        Get a player's owned games, including app info and free games played.

        An empty library is returned as an empty list.
        """
        return await self.get(
            PLAYER_SERVICE,
            "GetOwnedGames",
            1,
            {
                "steamid": steam_id,
                "include_appinfo": True,
                "include_played_free_games": True,
            },
            "response",
            "games",
            Game.from_dict,
            timeout=timeout,
        )

    async def get_friend_list(
        self, steam_id: str, *, timeout: float | None = None
    ) -> list[Friend]:
        """Get a player's friend list (relationship "friend" only)."""
        return await self.get(
            USER_SERVICE,
            "GetFriendList",
            1,
            {"steamid": steam_id, "relationship": "friend"},
            "friendslist",
            "friends",
            Friend.from_dict,
            timeout=timeout,
        )

    async def get_friends(
        self, steam_id: str, *, timeout: float | None = None
    ) -> list[Player]:
        """
        Get full profiles of a player's friends.

        Fetches the friend list, then all friend profiles in one batch
        request. A player with no friends costs a single request. The result
        follows the order of the profile response, which need not match the
        friend list order.

        ``timeout`` is one deadline for the whole lookup. If it runs out
        while fetching the friend list, the profile request is never sent.

        Raises:
            SteamTimeoutError: If the deadline passes before both requests finish
            SteamAPIError: If either request fails. No partial result is returned.
        """
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout

        friends = await self.get_friend_list(steam_id, timeout=timeout)
        if not friends:
            return []

        friend_ids = list(dict.fromkeys(friend.steam_id for friend in friends))

        # Cancellation point: a cancel requested during the friend list stops here
        await asyncio.sleep(0)

        remaining = None if deadline is None else deadline - loop.time()
        return await self.get_player_summaries(friend_ids, timeout=remaining)
