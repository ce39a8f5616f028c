#!/usr/bin/env python3
"""Steam API tool server via Model Context Protocol.

Exposes the SteamClient accessors as MCP tools over stdio. Every tool
returns its records as JSON text.
"""

import asyncio
import json
import logging
import os
import sys
from collections.abc import Awaitable, Callable
from dataclasses import asdict
from typing import Any

from dotenv import load_dotenv
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from steamapi import __version__
from steamapi.client import SteamAPIError, SteamClient


# Configure logging - only to stderr to avoid corrupting MCP protocol
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)

load_dotenv()

server = Server("steamapi")

steam_client: SteamClient | None = None


def _steam_id_schema(description: str) -> dict[str, Any]:
    return {
        "type": "object",
        "properties": {"steam_id": {"type": "string", "description": description}},
        "required": ["steam_id"],
    }


TOOLS: list[Tool] = [
    Tool(
        name="get_player_summary",
        description="Get the Steam profile (name and avatars) of one player.",
        inputSchema=_steam_id_schema("SteamID64 of the player"),
    ),
    Tool(
        name="get_player_summaries",
        description="Get Steam profiles of several players in a single request.",
        inputSchema={
            "type": "object",
            "properties": {
                "steam_ids": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "SteamID64 values",
                }
            },
            "required": ["steam_ids"],
        },
    ),
    Tool(
        name="get_owned_games",
        description="Get a player's owned games with playtime in minutes.",
        inputSchema=_steam_id_schema("SteamID64 of the player"),
    ),
    Tool(
        name="get_friend_list",
        description="Get a player's friend Steam IDs and when each friendship started.",
        inputSchema=_steam_id_schema("SteamID64 of the player"),
    ),
    Tool(
        name="get_friends",
        description="Get full Steam profiles of all of a player's friends.",
        inputSchema=_steam_id_schema("SteamID64 of the player"),
    ),
]


def _handlers(client: SteamClient) -> dict[str, Callable[[dict[str, Any]], Awaitable[Any]]]:
    return {
        "get_player_summary": lambda args: client.get_player_summary(args["steam_id"]),
        "get_player_summaries": lambda args: client.get_player_summaries(args["steam_ids"]),
        "get_owned_games": lambda args: client.get_owned_games(args["steam_id"]),
        "get_friend_list": lambda args: client.get_friend_list(args["steam_id"]),
        "get_friends": lambda args: client.get_friends(args["steam_id"]),
    }


def _to_json(result: Any) -> str:
    if isinstance(result, list):
        return json.dumps([asdict(record) for record in result], indent=2)
    return json.dumps(asdict(result), indent=2)


async def call_tool(
    client: SteamClient, name: str, arguments: dict[str, Any] | None
) -> list[TextContent]:
    """
    Run a tool against the given client.

    Raises:
        ValueError: If the tool is unknown
    """
    handler = _handlers(client).get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")

    try:
        result = await handler(arguments or {})
    except (SteamAPIError, ValueError, KeyError) as e:
        logger.info(f"Tool {name} failed: {e!r}")
        return [TextContent(type="text", text=f"Error: {e}")]
    return [TextContent(type="text", text=_to_json(result))]


@server.list_tools()
async def handle_list_tools() -> list[Tool]:
    """List all available Steam API tools."""
    return TOOLS


@server.call_tool()
async def handle_call_tool(
    name: str, arguments: dict[str, Any] | None
) -> list[TextContent]:
    """Handle tool execution requests."""
    if steam_client is None:
        raise RuntimeError("Steam client not initialized")

    try:
        return await call_tool(steam_client, name, arguments)
    except ValueError as e:
        return [TextContent(type="text", text=f"Error: {e}")]
    except Exception as e:
        logger.exception(f"Unexpected error executing tool {name}")
        return [TextContent(type="text", text=f"Unexpected error: {e}")]


async def run_server() -> None:
    """Run the MCP server."""
    global steam_client

    api_key = os.getenv("STEAM_API_KEY")
    if not api_key:
        logger.error("STEAM_API_KEY environment variable is required")
        sys.exit(1)

    steam_client = SteamClient(api_key=api_key)
    logger.info(f"Steam client initialized, serving {len(TOOLS)} tools")

    async with stdio_server() as (read_stream, write_stream):
        try:
            await server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name="steamapi",
                    server_version=__version__,
                    capabilities=server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={},
                    ),
                ),
            )
        finally:
            await steam_client.close()


def main() -> None:
    """Main entry point."""
    try:
        asyncio.run(run_server())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as e:
        logger.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
