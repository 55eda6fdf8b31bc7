"""Tests for the wslpath command line."""

import io
import os
import sys

import pytest

from wslpath import __version__
from wslpath.cli import EXIT_INVALID_ARGS, EXIT_LINE_FAILED, EXIT_OK, EXIT_READ_FAILED, main, read_lines

pytestmark = pytest.mark.usefixtures("wsl_env", "restore_logging")


class _BrokenStream:
    def __iter__(self):
        yield "C:\\ok\n"
        raise OSError("device went away")


def test_windows_argument(capsys) -> None:
    assert main(["C:\\Windows\\System32\\.."]) == EXIT_OK
    assert capsys.readouterr().out == "/mnt/c/Windows\n"


def test_mixed_arguments_are_detected_individually(capsys) -> None:
    assert main(["C:\\a", "/mnt/backup/andrew/file", "foo.txt"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["/mnt/c/a", "D:\\andrew\\file", "foo.txt"]


def test_rootfs_fallback(capsys) -> None:
    assert main(["/etc"]) == EXIT_OK
    assert capsys.readouterr().out == "C:\\rootfs\\etc\n"


def test_no_rootfs_flag_fails_line(capsys) -> None:
    assert main(["-e", "/etc"]) == EXIT_LINE_FAILED
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_failed_line_does_not_stop_processing(capsys) -> None:
    assert main(["Z:\\x", "C:\\y"]) == EXIT_LINE_FAILED
    captured = capsys.readouterr()
    assert captured.out == "/mnt/c/y\n"
    assert "Z_VOLUME_PATH" in captured.err


def test_conflicting_flags(capsys) -> None:
    assert main(["-w", "-x", "/tmp"]) == EXIT_INVALID_ARGS
    assert "mutually exclusive" in capsys.readouterr().err


def test_forced_windows_target(capsys) -> None:
    assert main(["-w", "docs/a.txt", "foo.txt"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["docs\\a.txt", "foo.txt"]


def test_forced_unix_target(capsys) -> None:
    assert main(["-x", "C:\\x", "foo.txt"]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["/mnt/c/x", "foo.txt"]


def test_reads_stdin_without_arguments(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO("C:\\a\r\n/mnt/c/b\n\\\\nas\\media\\m\n"))
    assert main([]) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == ["/mnt/c/a", "C:\\b", "/mnt/media/m"]


def test_input_read_failure(capsys, monkeypatch) -> None:
    monkeypatch.setattr(sys, "stdin", _BrokenStream())
    assert main([]) == EXIT_READ_FAILED
    captured = capsys.readouterr()
    assert captured.out == "/mnt/c/ok\n"
    assert "device went away" in captured.err


def test_thread_pool_keeps_order(capsys, wsl_env) -> None:
    wsl_env.setenv("WSLPATH_MAX_WORKERS", "4")
    paths = [f"C:\\dir{i}" for i in range(50)]
    assert main(paths) == EXIT_OK
    assert capsys.readouterr().out.splitlines() == [f"/mnt/c/dir{i}" for i in range(50)]


def test_version(capsys) -> None:
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert capsys.readouterr().out.strip() == f"wslpath {__version__}"


def test_read_lines_splits_arguments() -> None:
    assert list(read_lines(["a\nb", "c"], io.StringIO("ignored"))) == ["a", "b", "c"]


def test_absolute_flag_resolves_bare_name(capsys, wsl_env, tmp_path) -> None:
    (tmp_path / "foo.txt").write_text("")
    wsl_env.setenv("T_VOLUME_PATH", os.path.realpath(tmp_path))
    wsl_env.chdir(tmp_path)
    assert main(["-a", "foo.txt"]) == EXIT_OK
    assert capsys.readouterr().out == "T:\\foo.txt\n"
