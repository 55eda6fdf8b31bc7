"""Best-effort resolution of relative Unix paths against the live filesystem."""

from __future__ import annotations

from typing import Callable
import os

# Turns a (relative) Unix path into an absolute one. May raise OSError.
Resolver = Callable[[str], str]


def resolve_path(path: str) -> str:
    """Canonicalize the longest existing leading part of ``path``.

    Each leading prefix is resolved through symlinks while it exists. The
    first element that does not exist, and everything after it, is appended
    as given. A path whose first element already does not exist comes back
    unchanged (and therefore still relative).
    """
    resolved = ""
    pending: list[str] = []
    parts = path.split("/")
    if path.startswith("/"):
        parts[0] = "/"

    for part in parts:
        if pending:
            pending.append(part)
            continue
        if not part:
            continue
        candidate = os.path.join(resolved, part) if resolved else part
        try:
            resolved = os.path.realpath(candidate, strict=True)
        except OSError:
            pending.append(part)

    tail = "/".join(pending)
    if resolved and tail:
        return os.path.join(resolved, tail)
    return resolved or tail
