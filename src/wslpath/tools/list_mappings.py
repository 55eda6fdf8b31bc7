"""Environment snapshot tool."""

from typing import Any

from fastmcp import FastMCP

from wslpath.config import get_path_environment
from wslpath.contracts import MappingsData, build_ok


def register(mcp: FastMCP) -> None:
    """Register wsl_list_mappings tool with the MCP server."""

    @mcp.tool()
    def wsl_list_mappings() -> dict[str, Any]:
        """Show the Windows volume to WSL mount point mappings in effect."""
        env = get_path_environment()
        data = MappingsData(
            volumes={f"{letter}:": mount for letter, mount in env.volumes.items()},
            unc_volumes=dict(env.unc_volumes),
            rootfs_path=env.rootfs_path,
            resolve_relative=env.resolve_relative,
        )
        return build_ok(data.model_dump())
