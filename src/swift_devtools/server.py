"""MCP protocol binding.

``tools/list`` answers with the operation catalog and ``tools/call`` runs one
operation through the ``Dispatcher``. Only an unknown operation name becomes
a protocol-level error; every other outcome is a text result.
"""

from __future__ import annotations

import anyio
import mcp.types as types
from loguru import logger
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .config import Settings
from .dispatcher import Dispatcher
from .errors import UnknownToolError


def tool_definitions(dispatcher: Dispatcher) -> list[types.Tool]:
    return [
        types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=dict(descriptor.input_schema),
        )
        for descriptor in dispatcher.list_operations()
    ]


def create_server(dispatcher: Dispatcher, settings: Settings) -> Server:
    """Create a low-level MCP server wired to ``dispatcher``."""
    server: Server = Server(settings.server_name, version=settings.server_version)

    async def _handle_list_tools(_request: types.ListToolsRequest) -> types.ServerResult:
        return types.ServerResult(types.ListToolsResult(tools=tool_definitions(dispatcher)))

    async def _handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        try:
            text = dispatcher.dispatch(name)
        except UnknownToolError as exc:
            raise McpError(types.ErrorData(code=types.INVALID_PARAMS, message=str(exc))) from exc
        return types.ServerResult(
            types.CallToolResult(content=[types.TextContent(type="text", text=text)], isError=False)
        )

    server.request_handlers[types.ListToolsRequest] = _handle_list_tools
    server.request_handlers[types.CallToolRequest] = _handle_call_tool
    return server


async def serve_stdio(dispatcher: Dispatcher, settings: Settings) -> None:
    server = create_server(dispatcher, settings)
    options = server.create_initialization_options(NotificationOptions(tools_changed=False))
    logger.info(
        "server.start name={} version={} tools={}",
        settings.server_name,
        settings.server_version,
        len(dispatcher.registry),
    )
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, options)
    logger.info("server.stop name={}", settings.server_name)


def serve(settings: Settings, dispatcher: Dispatcher | None = None) -> None:
    """Run the stdio server until the client disconnects."""
    anyio.run(serve_stdio, dispatcher or Dispatcher.from_runner(), settings)
