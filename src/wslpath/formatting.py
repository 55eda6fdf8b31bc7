"""Error rendering helpers for CLI and MCP tool outputs."""

from __future__ import annotations

from typing import Any

from wslpath.contracts import build_error
from wslpath.errors import NoMountMatchError, TranslationError, UnmappedVolumeError

ACTIONS = {
    UnmappedVolumeError: "define the volume mapping environment variable, then retry",
    NoMountMatchError: "map the containing volume or allow the rootfs fallback",
}


def _action_for(exc: TranslationError) -> str | None:
    for error_type, action in ACTIONS.items():
        if isinstance(exc, error_type):
            return action
    return None


def format_line_error(exc: Exception) -> str:
    """Render a per-line failure the way the CLI prints it on stderr."""
    text = str(exc).strip()
    return f"error: {text.splitlines()[0] if text else type(exc).__name__}"


def build_translation_error(exc: TranslationError, *, path: str) -> dict[str, Any]:
    """Build a unified error envelope for a failed translation."""
    details: dict[str, Any] = {"input": path}
    details.update(exc.details())
    action = _action_for(exc)
    if action:
        details["action"] = action
    return build_error(exc.code, str(exc), details)
