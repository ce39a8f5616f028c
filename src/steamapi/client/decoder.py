"""Decoding of Steam API response envelopes.

Steam nests every payload one level under a wrapper object that depends on
the method called:

- GetPlayerSummaries: {"response": {"players": [...]}}
- GetOwnedGames: {"response": {"games": [...]}}
- GetFriendList: {"friendslist": {"friends": [...]}}

A body whose wrapper or collection is missing is an error, not an empty
result.
"""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from steamapi.client.errors import SteamDecodeError


logger = logging.getLogger(__name__)

T = TypeVar("T")


def _reject_constant(name: str) -> Any:
    raise SteamDecodeError(f"Response body is not valid JSON: unexpected '{name}'")


def parse_json(body: bytes) -> Any:
    """Parse a response body, raising SteamDecodeError if it is not JSON."""
    # json.loads would otherwise accept NaN and Infinity
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SteamDecodeError(f"Response body is not valid JSON: {e}") from e


def decode_envelope(
    body: bytes,
    wrapper: str,
    key: str,
    record_type: Callable[[dict[str, Any]], T],
) -> list[T]:
    """
    Decode the collection found at ``body[wrapper][key]``.

    Args:
        body: Raw response body
        wrapper: Name of the outer wrapper object (e.g., "response")
        key: Name of the collection inside the wrapper (e.g., "players")
        record_type: Callable building one record from one JSON object,
                     usually a model's ``from_dict``

    Returns:
        List of records, possibly empty

    Raises:
        SteamDecodeError: If the body does not have the expected shape
    """
    path = f"{wrapper}.{key}"
    data = parse_json(body)

    if not isinstance(data, dict):
        raise SteamDecodeError(f"Expected a JSON object with '{wrapper}', got {type(data).__name__}")
    if wrapper not in data:
        raise SteamDecodeError(f"Response is missing the '{wrapper}' wrapper")

    inner = data[wrapper]
    if not isinstance(inner, dict):
        raise SteamDecodeError(f"'{wrapper}' is not an object")
    if key not in inner:
        raise SteamDecodeError(f"Response is missing '{path}'")

    items = inner[key]
    if not isinstance(items, list):
        raise SteamDecodeError(f"'{path}' is not a list")

    records: list[T] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise SteamDecodeError(f"'{path}[{index}]' is not an object")
        try:
            records.append(record_type(item))
        except ValueError as e:
            raise SteamDecodeError(f"Invalid '{path}[{index}]': {e}") from e

    logger.debug(f"Decoded {len(records)} record(s) from {path}")
    return records
