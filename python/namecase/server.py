"""
namecase MCP Server - FastMCP implementation

Exposes the naming engine to MCP clients (code-generating agents) so that
generated file names and type names follow the same conventions as the
scaffolding CLI.

CRITICAL: In stdio mode stdout carries JSON-RPC - NEVER use print()! Use logger.
"""

import os

from fastmcp import FastMCP

from namecase.logging_config import setup_logging
from namecase.tools.names import convert_case, inflect, name_variants

logger = setup_logging()

mcp = FastMCP(
    "namecase",
    instructions=(
        "Derive consistent identifiers from one name: snake_case, PascalCase, "
        "camelCase, kebab-case, Title Case, and plural/singular forms."
    ),
)

# output_schema=None returns raw strings instead of {"result": ...} wrappers
mcp.tool(output_schema=None)(name_variants)
mcp.tool(output_schema=None)(convert_case)
mcp.tool(output_schema=None)(inflect)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765


def main():
    """Stdio entry point (one client, launched by the MCP host)."""
    logger.info("Starting namecase MCP server (stdio mode)")
    try:
        mcp.run(show_banner=False)
    except BrokenPipeError:
        # Client disconnected - exit cleanly without stack trace
        import sys

        sys.stderr.write("Client disconnected. Shutting down.\n")
        sys.exit(0)


def main_http(host: str = None, port: int = None):
    """
    HTTP entry point for a shared namecase server.

    Args:
        host: Host to bind to (default: 127.0.0.1, or NAMECASE_HOST env var)
        port: Port to listen on (default: 8765, or NAMECASE_PORT env var)
    """
    host = host or os.environ.get("NAMECASE_HOST", DEFAULT_HOST)
    port = port or int(os.environ.get("NAMECASE_PORT", str(DEFAULT_PORT)))

    # HTTP transport does not use stdout, stderr logging is safe here
    setup_logging(console=True)
    logger.info(f"Starting namecase MCP server on http://{host}:{port}/mcp")

    try:
        mcp.run(transport="http", host=host, port=port)
    except KeyboardInterrupt:
        logger.info("Shutting down namecase HTTP server...")


def main_http_cli():
    """
    CLI entry point with argument parsing for HTTP server.

    Usage:
        namecase-server-http --host 0.0.0.0 --port 8765

    Or via environment variables:
        NAMECASE_HOST=0.0.0.0 NAMECASE_PORT=8765 namecase-server-http
    """
    import argparse

    parser = argparse.ArgumentParser(description="namecase MCP server (HTTP mode)")
    parser.add_argument(
        "--host",
        default=None,
        help=f"Host to bind to (default: {DEFAULT_HOST}, or NAMECASE_HOST env var)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help=f"Port to listen on (default: {DEFAULT_PORT}, or NAMECASE_PORT env var)",
    )
    args = parser.parse_args()
    main_http(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
