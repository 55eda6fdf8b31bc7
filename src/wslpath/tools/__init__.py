"""wslpath MCP tool implementations."""

from . import (
    clean_path,
    list_mappings,
    translate_path,
)

__all__ = [
    "clean_path",
    "list_mappings",
    "translate_path",
]
