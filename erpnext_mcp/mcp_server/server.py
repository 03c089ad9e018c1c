"""Server lifecycle: stdio and Streamable HTTP transports."""

from __future__ import annotations

import contextlib
from typing import AsyncIterator

from mcp.server import Server

from erpnext_mcp.logger import Logger


async def run_stdio(app: Server, logger: Logger) -> None:
    """Serve over stdin/stdout until the client disconnects."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        logger.info("ERPNext MCP server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())


def create_http_app(app: Server, logger: Logger, *, authenticated: bool):
    """Starlette app mounting the MCP server at /mcp/ plus a /health route."""
    from mcp.server.streamable_http_manager import StreamableHTTPSessionManager
    from starlette.applications import Starlette
    from starlette.middleware.cors import CORSMiddleware
    from starlette.responses import JSONResponse
    from starlette.routing import Mount, Route

    session_manager_http = StreamableHTTPSessionManager(
        app=app,
        event_store=None,
        json_response=False,
        stateless=False,
    )

    async def handle_streamable_http(scope, receive, send) -> None:
        await session_manager_http.handle_request(scope, receive, send)

    async def health(request) -> JSONResponse:
        return JSONResponse(
            {"status": "ok", "service": app.name, "authenticated": authenticated}
        )

    @contextlib.asynccontextmanager
    async def lifespan(starlette_app) -> AsyncIterator[None]:
        logger.info("Starting StreamableHTTP session manager")
        async with session_manager_http.run():
            logger.info("StreamableHTTP session manager ready")
            yield

    starlette_app = Starlette(
        debug=False,
        routes=[
            Route("/health", health, methods=["GET"]),
            Mount("/mcp/", app=handle_streamable_http),
        ],
        lifespan=lifespan,
    )

    return CORSMiddleware(
        starlette_app,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        expose_headers=["Mcp-Session-Id"],
    )


async def run_http(
    app: Server,
    logger: Logger,
    *,
    host: str = "0.0.0.0",
    port: int = 8010,
    authenticated: bool = False,
) -> None:
    import uvicorn

    logger.info("Starting ERPNext MCP server", host=host, port=port, transport="Streamable HTTP")
    config = uvicorn.Config(
        create_http_app(app, logger, authenticated=authenticated),
        host=host,
        port=port,
        log_level="info",
    )
    server = uvicorn.Server(config)
    await server.serve()
