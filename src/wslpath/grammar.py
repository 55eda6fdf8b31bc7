"""Lexical path grammar for Windows and Unix path formats.

Every function here is pure: it looks only at the given string and the
declared ``PathFormat``. Nothing reads the environment or the filesystem.

Windows paths may carry a volume prefix, either a drive letter (``C:``) or a
UNC host and share (``\\\\host\\share``). Unix paths never do; volumes are
mounted somewhere inside the single ``/`` tree.
"""

from __future__ import annotations

from enum import Enum

WINDOWS_SEP = "\\"
UNIX_SEP = "/"


class PathFormat(Enum):
    """Closed set of path formats understood by the translator."""

    WINDOWS = "windows"
    UNIX = "unix"
    # A bare name without any separator, valid verbatim in both formats.
    ANY = "any"


def separator_of(fmt: PathFormat) -> str:
    """Return the separator used when joining elements in ``fmt``."""
    if fmt is PathFormat.WINDOWS:
        return WINDOWS_SEP
    if fmt is PathFormat.UNIX:
        return UNIX_SEP
    if fmt is PathFormat.ANY:
        return UNIX_SEP
    raise ValueError(f"unknown path format: {fmt!r}")


def is_separator(fmt: PathFormat, char: str) -> bool:
    if fmt is PathFormat.WINDOWS:
        return char == WINDOWS_SEP
    if fmt is PathFormat.UNIX:
        return char == UNIX_SEP
    if fmt is PathFormat.ANY:
        return char in (WINDOWS_SEP, UNIX_SEP)
    raise ValueError(f"unknown path format: {fmt!r}")


def _has_drive_prefix(path: str) -> bool:
    return len(path) >= 2 and path[1] == ":" and path[0].isascii() and path[0].isalpha()


def identify(path: str) -> PathFormat:
    """Detect the format of ``path`` from its first directory separator.

    Without any separator a drive prefix still marks a Windows path
    (``D:foo.dat`` is relative to the current directory of ``D:``).
    Anything else is a plain file name, valid in either format.
    """
    for char in path:
        if char == WINDOWS_SEP:
            return PathFormat.WINDOWS
        if char == UNIX_SEP:
            return PathFormat.UNIX
    if _has_drive_prefix(path):
        return PathFormat.WINDOWS
    return PathFormat.ANY


def split_volume(fmt: PathFormat, path: str) -> tuple[str, str]:
    """Split ``path`` into ``(volume, remainder)``.

    Only Windows paths have volumes. A drive letter is one ASCII letter and
    a colon. A UNC volume is ``\\\\host\\share``: the host must not start with
    a separator or ``.``, and the share must not start with a separator or
    ``.`` either (``\\\\.\\`` device paths are never volumes). The remainder
    keeps its leading separator. When no rule matches the volume is empty
    and the remainder is the whole path.
    """
    if fmt is not PathFormat.WINDOWS:
        return "", path

    if len(path) < 2:
        return "", path
    if _has_drive_prefix(path):
        return path[:2], path[2:]

    if len(path) < 5:
        return "", path
    if path[:2] != WINDOWS_SEP * 2 or path[2] in (WINDOWS_SEP, "."):
        return "", path

    # walk the host name up to the separator in front of the share
    for n in range(3, len(path) - 1):
        if path[n] != WINDOWS_SEP:
            continue
        share_start = n + 1
        if path[share_start] in (WINDOWS_SEP, "."):
            return "", path
        end = path.find(WINDOWS_SEP, share_start)
        if end == -1:
            end = len(path)
        return path[:end], path[end:]
    return "", path


def is_drive_volume(volume: str) -> bool:
    return len(volume) == 2 and _has_drive_prefix(volume)


def is_unc_volume(volume: str) -> bool:
    return volume.startswith(WINDOWS_SEP * 2)


def elements(fmt: PathFormat, path: str) -> list[str]:
    """Split ``path`` into its elements on the separator(s) of ``fmt``.

    A rooted path yields a single leading empty element. Separator runs do
    not produce interior empty elements, and a trailing separator produces
    no trailing one.
    """
    parts: list[str] = []
    current: list[str] = []
    for char in path:
        if is_separator(fmt, char):
            if current or not parts:
                parts.append("".join(current))
            current = []
        else:
            current.append(char)
    if current:
        parts.append("".join(current))
    return parts


def is_rooted(fmt: PathFormat, path: str) -> bool:
    """Return True if the volume-stripped ``path`` starts at a root."""
    _, remainder = split_volume(fmt, path)
    return bool(remainder) and is_separator(fmt, remainder[0])


def clean(fmt: PathFormat, path: str) -> str:
    """Return the shortest lexically equivalent form of ``path``.

    Works like ``os.path.normpath`` generalized to the separator and volume
    rules of ``fmt``:

    1. Collapse runs of separators into one.
    2. Drop every ``.`` element.
    3. Drop every ``..`` together with the element before it, unless that
       element is itself ``..``. A ``..`` right above the root is dropped
       on its own.

    The volume prefix is kept on both rooted and relative paths, with a
    drive letter upper-cased. The result ends in a separator only for a
    root (``/`` or ``C:\\``); an empty result becomes ``.``. A relative
    Windows path whose first element looks like a drive (``x\\..\\C:foo``)
    is written as ``.\\C:foo`` so it does not gain a volume.
    """
    volume, remainder = split_volume(fmt, path)
    if is_drive_volume(volume):
        volume = volume.upper()
    sep = separator_of(fmt)
    if not remainder:
        # UNC volumes are always rooted
        return volume + (sep if is_unc_volume(volume) else ".")

    stack: list[str] = []
    for part in elements(fmt, remainder):
        if part == ".":
            continue
        if part == ".." and stack and stack[-1] != "..":
            if stack == [""]:
                # nothing above the root
                continue
            stack.pop()
            continue
        stack.append(part)

    if not stack:
        return volume + "."
    if stack == [""]:
        return volume + sep
    if fmt is PathFormat.WINDOWS and not volume and _has_drive_prefix(stack[0]):
        stack.insert(0, ".")
    return volume + sep.join(stack)
