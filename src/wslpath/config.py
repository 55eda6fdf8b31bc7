"""Volume mapping configuration read from the process environment."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping
import logging
import os

from wslpath.grammar import PathFormat, clean, split_volume, is_unc_volume

logger = logging.getLogger("wslpath.config")

# e.g. C_VOLUME_PATH=/mnt/c
VOLUME_ENV_SUFFIX = "_VOLUME_PATH"
# e.g. WSL_UNC_PATH='\\nas\media=/mnt/media;\\nas\backup=/mnt/backup'
UNC_ENV_VAR = "WSL_UNC_PATH"
# Windows path of the distribution rootfs, e.g. WSL_ROOTFS_PATH=C:\rootfs
ROOTFS_ENV_VAR = "WSL_ROOTFS_PATH"

RESOLVE_RELATIVE_ENV_VAR = "WSLPATH_RESOLVE_RELATIVE"
MAX_WORKERS_ENV_VAR = "WSLPATH_MAX_WORKERS"
LOG_LEVEL_ENV_VAR = "WSLPATH_LOG_LEVEL"


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    value = environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    value = environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def volume_variable(letter: str) -> str:
    """Name of the environment variable holding the mount point of ``letter:``."""
    return letter.upper() + VOLUME_ENV_SUFFIX


def _empty_mapping() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True)
class PathEnvironment:
    """Immutable snapshot of everything the translator reads from the environment."""

    # drive letter ("C") -> cleaned Unix mount point
    volumes: Mapping[str, str] = field(default_factory=_empty_mapping)
    # UNC prefix ("\\host\share") -> cleaned Unix mount point
    unc_volumes: Mapping[str, str] = field(default_factory=_empty_mapping)
    rootfs_path: str | None = None
    resolve_relative: bool = True
    max_workers: int = 1

    def drive_mount(self, letter: str) -> str | None:
        return self.volumes.get(letter.upper())

    def unc_mount(self, volume: str) -> str | None:
        wanted = volume.upper()
        for prefix, mount in self.unc_volumes.items():
            if prefix.upper() == wanted:
                return mount
        return None

    def mount_points(self) -> list[tuple[str, str]]:
        """Return ``(windows_volume, mount_point)`` pairs for every mapping."""
        pairs = [(letter + ":", mount) for letter, mount in self.volumes.items()]
        pairs.extend(self.unc_volumes.items())
        return pairs


def parse_unc_mappings(value: str) -> dict[str, str]:
    """Parse the ``\\\\host\\share=/mount;...`` list held in ``WSL_UNC_PATH``."""
    mappings: dict[str, str] = {}
    for entry in value.split(";"):
        if not entry.strip():
            continue
        prefix, sep, mount = entry.partition("=")
        if not sep or not mount:
            logger.warning("Ignoring malformed %s entry: %r", UNC_ENV_VAR, entry)
            continue
        volume, rest = split_volume(PathFormat.WINDOWS, prefix.strip())
        if not is_unc_volume(volume) or rest.strip("\\"):
            logger.warning("Ignoring %s entry that is not a bare \\\\host\\share: %r", UNC_ENV_VAR, entry)
            continue
        mappings[volume] = clean(PathFormat.UNIX, mount.strip())
    return mappings


def _drive_mappings(environ: Mapping[str, str]) -> dict[str, str]:
    volumes: dict[str, str] = {}
    for name, value in environ.items():
        if not name.endswith(VOLUME_ENV_SUFFIX) or not value:
            continue
        letter = name[: -len(VOLUME_ENV_SUFFIX)]
        if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            continue
        letter = letter.upper()
        if letter in volumes:
            logger.warning("Drive %s: is mapped more than once, using %s=%r", letter, name, value)
        volumes[letter] = clean(PathFormat.UNIX, value)
    return dict(sorted(volumes.items()))


def get_path_environment(environ: Mapping[str, str] | None = None) -> PathEnvironment:
    """Snapshot volume mappings and settings from ``environ`` (default ``os.environ``)."""
    if environ is None:
        environ = os.environ
    rootfs = environ.get(ROOTFS_ENV_VAR)
    return PathEnvironment(
        volumes=MappingProxyType(_drive_mappings(environ)),
        unc_volumes=MappingProxyType(parse_unc_mappings(environ.get(UNC_ENV_VAR, ""))),
        rootfs_path=rootfs if rootfs else None,
        resolve_relative=_env_bool(environ, RESOLVE_RELATIVE_ENV_VAR, True),
        max_workers=max(1, _env_int(environ, MAX_WORKERS_ENV_VAR, 1)),
    )


def get_log_level(environ: Mapping[str, str] | None = None) -> int:
    if environ is None:
        environ = os.environ
    name = environ.get(LOG_LEVEL_ENV_VAR, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
