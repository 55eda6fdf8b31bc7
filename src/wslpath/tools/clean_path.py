"""Lexical path normalization tool."""

from typing import Any

from fastmcp import FastMCP

from wslpath.contracts import build_ok, build_translation_data
from wslpath.grammar import clean, identify
from wslpath.utils import PathText, SourceFormat, parse_format


def register(mcp: FastMCP) -> None:
    """Register wsl_clean_path tool with the MCP server."""

    @mcp.tool()
    def wsl_clean_path(
        path: PathText,
        format: SourceFormat = "auto",
    ) -> dict[str, Any]:
        """Normalize a path lexically, keeping its format.

        Collapses repeated separators, drops "." elements and resolves ".."
        against the preceding element. Never touches the filesystem.
        """
        fmt = parse_format(format) or identify(path)
        return build_ok(
            build_translation_data(
                input=path,
                output=clean(fmt, path),
                source_format=fmt.value,
                target_format=fmt.value,
            )
        )
