"""Exceptions raised while translating paths."""

from __future__ import annotations


class TranslationError(Exception):
    """Base class for failures local to a single input path."""

    code = "translation_error"

    def details(self) -> dict[str, str]:
        return {}


class UnmappedVolumeError(TranslationError):
    """A drive letter or UNC prefix has no mount point configured."""

    code = "unmapped_volume"

    def __init__(self, volume: str, variable: str) -> None:
        super().__init__(f"volume {volume!r} is not mapped: environment variable not set: {variable}")
        self.volume = volume
        self.variable = variable

    def details(self) -> dict[str, str]:
        return {"volume": self.volume, "variable": self.variable}


class NoMountMatchError(TranslationError):
    """An absolute Unix path lies under no known mount point."""

    code = "no_mount_match"

    def __init__(self, path: str) -> None:
        super().__init__(f"path not found under any mapped volume: {path}")
        self.path = path

    def details(self) -> dict[str, str]:
        return {"path": self.path}


class InvalidPathError(TranslationError):
    """The path could not be resolved within the recursion bound."""

    code = "invalid_path"

    def __init__(self, path: str) -> None:
        super().__init__(f"invalid path: {path}")
        self.path = path

    def details(self) -> dict[str, str]:
        return {"path": self.path}


class InputReadError(Exception):
    """The input stream failed; fatal for the whole run."""

    code = "input_read_failure"
