"""wslpath - translate file paths between Windows and WSL (Unix) formats."""

__version__ = "0.2.0"

from wslpath.config import PathEnvironment, get_path_environment
from wslpath.errors import (
    InputReadError,
    InvalidPathError,
    NoMountMatchError,
    TranslationError,
    UnmappedVolumeError,
)
from wslpath.grammar import PathFormat, clean, elements, identify, split_volume
from wslpath.translator import LineResult, Translation, Translator, get_translator

__all__ = [
    "__version__",
    "PathEnvironment",
    "get_path_environment",
    "InputReadError",
    "InvalidPathError",
    "NoMountMatchError",
    "TranslationError",
    "UnmappedVolumeError",
    "PathFormat",
    "clean",
    "elements",
    "identify",
    "split_volume",
    "LineResult",
    "Translation",
    "Translator",
    "get_translator",
]
