"""Translate paths between Windows and Unix formats.

A ``Translator`` holds an immutable ``PathEnvironment`` snapshot and an
optional resolver for relative Unix paths. Every call is a pure function of
its arguments plus that snapshot, so one translator can be shared freely
across threads.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Mapping
import logging

from wslpath.config import UNC_ENV_VAR, PathEnvironment, get_path_environment, volume_variable
from wslpath.errors import InvalidPathError, NoMountMatchError, TranslationError, UnmappedVolumeError
from wslpath.grammar import (
    UNIX_SEP,
    WINDOWS_SEP,
    PathFormat,
    clean,
    identify,
    is_drive_volume,
    is_rooted,
    is_unc_volume,
    split_volume,
)
from wslpath.resolver import Resolver, resolve_path

logger = logging.getLogger("wslpath.translator")

# Relative paths are resolved at most once; a second level means the
# resolver handed back another relative path.
MAX_RESOLVE_DEPTH = 1


@dataclass(frozen=True)
class Translation:
    path: str
    source: PathFormat
    target: PathFormat
    # True when the result points into the read-only WSL rootfs
    rootfs_fallback: bool = False


@dataclass(frozen=True)
class LineResult:
    """Outcome of translating one input line."""

    text: str
    output: str | None = None
    error: TranslationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def source_for(target: PathFormat) -> PathFormat:
    """Return the format a forced ``target`` translates from."""
    if target is PathFormat.WINDOWS:
        return PathFormat.UNIX
    if target is PathFormat.UNIX:
        return PathFormat.WINDOWS
    return PathFormat.ANY


def _under_mount(path: str, mount: str) -> bool:
    if mount == UNIX_SEP:
        return path.startswith(UNIX_SEP)
    return path == mount or path.startswith(mount + UNIX_SEP)


class Translator:
    def __init__(self, environment: PathEnvironment, resolver: Resolver | None = None) -> None:
        self.environment = environment
        self.resolver = resolver if resolver is not None else resolve_path

    def translate(
        self,
        source: PathFormat,
        target: PathFormat,
        path: str,
        allow_rootfs_fallback: bool = True,
        absolute: bool = False,
    ) -> Translation:
        """Translate ``path`` given in ``source`` format to ``target`` format.

        Raises:
            UnmappedVolumeError: the Windows volume has no mount point.
            NoMountMatchError: an absolute Unix path is under no mount point
                and the rootfs fallback is disabled or not configured.
            InvalidPathError: a relative path could not be resolved.
        """
        return self._translate(source, target, path, allow_rootfs_fallback, absolute, 0)

    def translate_auto(
        self,
        path: str,
        allow_rootfs_fallback: bool = True,
        absolute: bool = False,
    ) -> Translation:
        """Detect the format of ``path`` and translate it to the other one.

        A bare name stays as it is, unless ``absolute`` is set: then it is
        read as a relative Unix name and resolved to a Windows path.
        """
        fmt = identify(path)
        if fmt is PathFormat.ANY and absolute:
            fmt = PathFormat.UNIX
        if fmt is PathFormat.ANY:
            return Translation(clean(fmt, path), fmt, fmt)
        target = PathFormat.UNIX if fmt is PathFormat.WINDOWS else PathFormat.WINDOWS
        return self.translate(fmt, target, path, allow_rootfs_fallback, absolute)

    def translate_line(
        self,
        text: str,
        target: PathFormat | None = None,
        allow_rootfs_fallback: bool = True,
        absolute: bool = False,
    ) -> LineResult:
        """Translate one input line, capturing a translation failure in the result.

        ``target=None`` picks the opposite format of the detected one.
        """
        try:
            if target is None:
                result = self.translate_auto(text, allow_rootfs_fallback, absolute)
            else:
                result = self.translate(source_for(target), target, text, allow_rootfs_fallback, absolute)
        except TranslationError as exc:
            logger.debug("Failed to translate %r: %s", text, exc)
            return LineResult(text=text, error=exc)
        return LineResult(text=text, output=result.path)

    def translate_lines(
        self,
        lines: Iterable[str],
        target: PathFormat | None = None,
        allow_rootfs_fallback: bool = True,
        absolute: bool = False,
        max_workers: int | None = None,
    ) -> list[LineResult]:
        """Translate every line independently, keeping input order.

        With more than one worker the lines are fanned out over a thread
        pool; ``Executor.map`` still yields results in input order.
        """

        def _one(text: str) -> LineResult:
            return self.translate_line(text, target, allow_rootfs_fallback, absolute)

        workers = max_workers if max_workers is not None else self.environment.max_workers
        if workers <= 1:
            return [_one(text) for text in lines]
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(_one, lines))

    # ------------------------------------------------------------------

    def _translate(
        self,
        source: PathFormat,
        target: PathFormat,
        path: str,
        allow_rootfs_fallback: bool,
        absolute: bool,
        depth: int,
    ) -> Translation:
        cleaned = clean(source, path)
        if depth > MAX_RESOLVE_DEPTH:
            raise InvalidPathError(cleaned)

        if source is target or PathFormat.ANY in (source, target):
            return Translation(cleaned, source, target)

        if source is PathFormat.WINDOWS:
            result = self._windows_to_unix(cleaned)
            if absolute and not is_rooted(PathFormat.UNIX, result):
                result = clean(PathFormat.UNIX, self._resolve(result))
            return Translation(result, source, target)

        if is_rooted(PathFormat.UNIX, cleaned):
            result, fallback = self._unix_to_windows(cleaned, allow_rootfs_fallback)
            return Translation(result, source, target, fallback)

        relative = clean(PathFormat.WINDOWS, cleaned.replace(UNIX_SEP, WINDOWS_SEP))
        if not (absolute or self.environment.resolve_relative):
            return Translation(relative, source, target)

        nested = self._translate(
            source, target, self._resolve(cleaned), allow_rootfs_fallback, absolute, depth + 1
        )
        if nested.rootfs_fallback or absolute:
            # a relative path into the virtual rootfs means nothing on Windows
            return Translation(nested.path, source, target, nested.rootfs_fallback)
        return Translation(relative, source, target)

    def _windows_to_unix(self, path: str) -> str:
        volume, remainder = split_volume(PathFormat.WINDOWS, path)
        if is_drive_volume(volume):
            mount = self.environment.drive_mount(volume[0])
            if mount is None:
                raise UnmappedVolumeError(volume, volume_variable(volume[0]))
        elif is_unc_volume(volume):
            mount = self.environment.unc_mount(volume)
            if mount is None:
                raise UnmappedVolumeError(volume, UNC_ENV_VAR)
        else:
            return clean(PathFormat.UNIX, path.replace(WINDOWS_SEP, UNIX_SEP))

        logger.debug("Mapped volume %s to %s", volume, mount)
        if remainder and not remainder.startswith(WINDOWS_SEP):
            # drive-relative, e.g. C:foo
            remainder = WINDOWS_SEP + remainder
        return clean(PathFormat.UNIX, mount + remainder.replace(WINDOWS_SEP, UNIX_SEP))

    def _unix_to_windows(self, path: str, allow_rootfs_fallback: bool) -> tuple[str, bool]:
        best_volume = None
        best_mount = ""
        for volume, mount in self.environment.mount_points():
            if _under_mount(path, mount) and len(mount) > len(best_mount):
                best_volume, best_mount = volume, mount

        if best_volume is not None:
            logger.debug("Matched %s to mount point %s (%s)", path, best_mount, best_volume)
            rest = path if best_mount == UNIX_SEP else path[len(best_mount):]
            if not rest:
                rest = UNIX_SEP
            return clean(PathFormat.WINDOWS, best_volume + rest.replace(UNIX_SEP, WINDOWS_SEP)), False

        rootfs = self.environment.rootfs_path
        if allow_rootfs_fallback and rootfs:
            logger.debug("No mount point for %s, using rootfs %s", path, rootfs)
            joined = rootfs + WINDOWS_SEP + path.replace(UNIX_SEP, WINDOWS_SEP)
            return clean(PathFormat.WINDOWS, joined), True
        raise NoMountMatchError(path)

    def _resolve(self, path: str) -> str:
        try:
            return self.resolver(path)
        except OSError as exc:
            logger.debug("Could not resolve %s: %s", path, exc)
            return path


def get_translator(
    environ: Mapping[str, str] | None = None,
    resolver: Resolver | None = None,
) -> Translator:
    """Build a translator over a fresh snapshot of ``environ``."""
    return Translator(get_path_environment(environ), resolver)
