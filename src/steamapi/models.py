"""Typed records for Steam API payloads.

Records are immutable and built from the raw JSON objects Steam returns.
``from_dict`` raises ``ValueError`` when a field is missing or cannot be
coerced to its declared type; the response decoder turns that into a
``SteamDecodeError``.
"""

from dataclasses import dataclass
from typing import Any


def _require(data: dict[str, Any], field: str) -> Any:
    if field not in data or data[field] is None:
        raise ValueError(f"missing required field '{field}'")
    return data[field]


def _as_str(value: Any, field: str) -> str:
    # Steam occasionally sends ids as numbers
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"field '{field}' must be a string, got {type(value).__name__}")
    return str(value)


def _as_int(value: Any, field: str, minimum: int | None = None) -> int:
    if isinstance(value, bool):
        raise ValueError(f"field '{field}' must be an integer, got bool")
    try:
        result = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"field '{field}' must be an integer, got {value!r}") from None
    if isinstance(value, float) and value != result:
        raise ValueError(f"field '{field}' must be an integer, got {value!r}")
    if minimum is not None and result < minimum:
        raise ValueError(f"field '{field}' must be >= {minimum}, got {result}")
    return result


@dataclass(frozen=True)
class Player:
    """Profile summary of a Steam user."""

    steam_id: str
    persona_name: str = ""
    avatar: str = ""
    avatar_medium: str = ""
    avatar_full: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        return cls(
            steam_id=_as_str(_require(data, "steamid"), "steamid"),
            persona_name=_as_str(data.get("personaname", ""), "personaname"),
            avatar=_as_str(data.get("avatar", ""), "avatar"),
            avatar_medium=_as_str(data.get("avatarmedium", ""), "avatarmedium"),
            avatar_full=_as_str(data.get("avatarfull", ""), "avatarfull"),
        )


@dataclass(frozen=True)
class Game:
    """A game in a player's library. Playtime is in minutes."""

    app_id: int
    name: str = ""
    playtime_forever: int = 0
    img_icon_url: str = ""
    img_logo_url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Game":
        return cls(
            app_id=_as_int(_require(data, "appid"), "appid"),
            name=_as_str(data.get("name", ""), "name"),
            playtime_forever=_as_int(
                data.get("playtime_forever", 0), "playtime_forever", minimum=0
            ),
            img_icon_url=_as_str(data.get("img_icon_url", ""), "img_icon_url"),
            img_logo_url=_as_str(data.get("img_logo_url", ""), "img_logo_url"),
        )


@dataclass(frozen=True)
class Friend:
    """
    Friend list entry.

    Only the related Steam ID and the time the friendship started (seconds
    since epoch). Use ``SteamClient.get_friends`` to get full profiles.
    """

    steam_id: str
    friend_since: int = 0
    relationship: str = "friend"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Friend":
        return cls(
            steam_id=_as_str(_require(data, "steamid"), "steamid"),
            friend_since=_as_int(data.get("friend_since", 0), "friend_since"),
            relationship=_as_str(data.get("relationship", "friend"), "relationship"),
        )
