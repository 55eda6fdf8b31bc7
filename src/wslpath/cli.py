"""Command line interface.

Usage:
    wslpath [-w|-x] [-e] [-a] [PATH ...]
    printf '%s\\n' 'C:\\Users' /etc | wslpath
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional, Sequence

from wslpath import __version__
from wslpath.config import (
    LOG_LEVEL_ENV_VAR,
    RESOLVE_RELATIVE_ENV_VAR,
    ROOTFS_ENV_VAR,
    UNC_ENV_VAR,
    VOLUME_ENV_SUFFIX,
    get_log_level,
    get_path_environment,
)
from wslpath.errors import InputReadError
from wslpath.formatting import format_line_error
from wslpath.grammar import PathFormat
from wslpath.translator import LineResult, Translator

logger = logging.getLogger("wslpath.cli")

EXIT_OK = 0
EXIT_LINE_FAILED = 1
EXIT_INVALID_ARGS = 100
EXIT_READ_FAILED = 127

EPILOG = f"""\
Without -w or -x the format of every path is detected on its own and the
path is translated to the other format. Bare file names pass through.

Environment:
  Absolute paths are translated through variables associating Windows
  volumes with WSL mount points. A drive letter X: is looked up in
  X{VOLUME_ENV_SUFFIX}, e.g. C{VOLUME_ENV_SUFFIX}=/mnt/c for "C:\\Windows".

  UNC shares are listed in {UNC_ENV_VAR} as semicolon-separated pairs:

      {UNC_ENV_VAR}='\\\\h1\\s1=/mnt/s1;\\\\h2\\s2=/mnt/s2'

  The same variables are used in reverse for Unix paths; the mount point
  matching the longest leading part of the path wins.

  Unix paths below no mount point exist only in the virtual Linux file
  system. They are translated relative to the Windows path held in
  {ROOTFS_ENV_VAR}, unless -e is given, in which case they fail.

  {RESOLVE_RELATIVE_ENV_VAR}=false keeps relative Unix paths relative
  without consulting the filesystem. {LOG_LEVEL_ENV_VAR} sets the log level.

Warning:
  Writing to the WSL rootfs from Windows can corrupt it. Only use paths
  resolved through {ROOTFS_ENV_VAR} for reading.

Exit status:
  0 success, 1 some path failed, 100 invalid options, 127 input read error.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wslpath",
        description="Translate file paths between Windows and WSL (Unix) formats.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-w", dest="to_windows", action="store_true", help="Convert Unix to Windows file path(s)")
    parser.add_argument("-x", dest="to_unix", action="store_true", help="Convert Windows to Unix file path(s)")
    parser.add_argument(
        "-e",
        dest="no_rootfs",
        action="store_true",
        help="Do not translate paths found only in the WSL rootfs",
    )
    parser.add_argument("-a", dest="absolute", action="store_true", help="Always print absolute path(s)")
    parser.add_argument("--version", "-v", action="version", version=f"wslpath {__version__}")
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Path(s) to translate (default: read STDIN)")
    return parser


def configure_logging(level: int) -> None:
    # stdout carries the results; diagnostics go to stderr
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s - %(message)s"))
    root_logger.addHandler(handler)


def read_lines(paths: Sequence[str], stream: Iterable[str]) -> Iterator[str]:
    """Yield the input lines, from ``paths`` if given, else from ``stream``."""
    if paths:
        yield from "\n".join(paths).splitlines()
        return
    try:
        for line in stream:
            yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"failed to read input: {exc}") from exc


def _emit(result: LineResult) -> bool:
    if result.ok:
        print(result.output)
        return True
    print(format_line_error(result.error), file=sys.stderr)
    return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(get_log_level())

    if args.to_windows and args.to_unix:
        print("error: invalid arguments: -w and -x are mutually exclusive", file=sys.stderr)
        return EXIT_INVALID_ARGS

    target = None
    if args.to_windows:
        target = PathFormat.WINDOWS
    elif args.to_unix:
        target = PathFormat.UNIX
    allow_rootfs = not args.no_rootfs

    environment = get_path_environment()
    translator = Translator(environment)
    lines = read_lines(args.paths, sys.stdin)

    failed = False
    try:
        if environment.max_workers <= 1:
            for text in lines:
                failed |= not _emit(translator.translate_line(text, target, allow_rootfs, args.absolute))
        else:
            for result in translator.translate_lines(list(lines), target, allow_rootfs, args.absolute):
                failed |= not _emit(result)
    except InputReadError as exc:
        logger.debug("Input stream failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_READ_FAILED

    return EXIT_LINE_FAILED if failed else EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
