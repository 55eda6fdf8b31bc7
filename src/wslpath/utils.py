"""Validation models and utilities for wslpath MCP tools."""

from typing import Annotated, Literal, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator

from wslpath.grammar import PathFormat

# Longest path accepted by the tools
PATH_MAX_LENGTH = 32767


def normalize_input(value: Optional[str], lowercase: bool = False) -> str:
    """Normalize user input: collapse whitespace, optionally lowercase."""
    if value is None:
        return ""
    normalized = " ".join(value.split())
    return normalized.lower() if lowercase else normalized


def validate_path_text(value: str) -> str:
    """Validate a single path string.

    Paths may legitimately contain spaces, so nothing is stripped; only
    empty and multi-line values are rejected.
    """
    if not value:
        raise ValueError("path cannot be empty")
    if "\n" in value or "\r" in value:
        raise ValueError("path must be a single line")
    return value


def parse_format(value: Optional[str]) -> Optional[PathFormat]:
    """Map a format name to ``PathFormat``; ``auto`` and empty map to None."""
    name = normalize_input(value, lowercase=True)
    if name in ("", "auto"):
        return None
    return PathFormat(name)


PathText = Annotated[
    str,
    AfterValidator(validate_path_text),
    Field(
        ...,
        min_length=1,
        max_length=PATH_MAX_LENGTH,
        description=(
            "Path to process, Windows (C:\\Users\\me, \\\\host\\share\\dir) "
            "or Unix (/mnt/c/Users/me, ./notes.txt)."
        ),
    ),
]

TargetFormat = Annotated[
    Literal["auto", "windows", "unix"],
    Field(
        default="auto",
        description="Target format. 'auto' translates to the opposite of the detected format.",
    ),
]

SourceFormat = Annotated[
    Literal["auto", "windows", "unix", "any"],
    Field(default="auto", description="Format the path is written in. 'auto' detects it."),
]

AllowRootfs = Annotated[
    bool,
    Field(
        default=True,
        description="Fall back to the WSL rootfs path when no volume mapping matches",
    ),
]

AbsoluteOutput = Annotated[
    bool,
    Field(default=False, description="Resolve relative paths so the result is absolute"),
]
