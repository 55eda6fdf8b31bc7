"""wslpath MCP Server - Windows/WSL path translation exposed over MCP."""

import argparse
import logging

from fastmcp import FastMCP

from wslpath import __version__
from wslpath.tools import (
    clean_path,
    list_mappings,
    translate_path,
)

mcp = FastMCP(
    "wslpath MCP Server",
    instructions=(
        "Translates file paths between Windows (C:\\..., \\\\host\\share\\...) "
        "and WSL/Unix (/mnt/c/...) formats using the volume mappings defined "
        "in the server environment."
    ),
)

logger = logging.getLogger("wslpath.server")

translate_path.register(mcp)
clean_path.register(mcp)
list_mappings.register(mcp)


def main():
    """Entry point for the wslpath MCP server."""
    parser = argparse.ArgumentParser(
        prog="wslpath-mcp",
        description="wslpath MCP Server - Windows/WSL path translation exposed over MCP",
    )
    parser.add_argument("--version", "-v", action="version", version=f"wslpath-mcp {__version__}")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind when using http/sse transport (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind when using http/sse transport (default: 8000)",
    )
    args = parser.parse_args()

    run_kwargs: dict = {"transport": args.transport, "show_banner": False}
    if args.transport in ("http", "sse"):
        run_kwargs["host"] = args.host
        run_kwargs["port"] = args.port

    # Suppress noisy uvicorn shutdown messages
    logging.getLogger("uvicorn.error").setLevel(logging.CRITICAL)

    logger.debug("Starting wslpath MCP server (%s)", args.transport)
    try:
        mcp.run(**run_kwargs)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
