"""Tests for config: environment snapshotting."""

import logging

import pytest

from wslpath.config import get_log_level, get_path_environment, parse_unc_mappings, volume_variable


def test_drive_mappings_are_normalized() -> None:
    env = get_path_environment(
        {
            "C_VOLUME_PATH": "/mnt/c/",
            "d_VOLUME_PATH": "/mnt//d",
            "CD_VOLUME_PATH": "/mnt/cd",
            "1_VOLUME_PATH": "/mnt/1",
            "E_VOLUME_PATH": "",
            "PATH": "/usr/bin",
        }
    )
    assert dict(env.volumes) == {"C": "/mnt/c", "D": "/mnt/d"}
    assert env.drive_mount("c") == "/mnt/c"
    assert env.drive_mount("E") is None


def test_duplicate_drive_letter_is_logged(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="wslpath.config"):
        env = get_path_environment({"c_VOLUME_PATH": "/mnt/lower", "C_VOLUME_PATH": "/mnt/upper"})
    assert env.drive_mount("C") == "/mnt/upper"
    assert len(caplog.records) == 1
    assert "C_VOLUME_PATH" in caplog.records[0].getMessage()


def test_defaults_for_empty_environment() -> None:
    env = get_path_environment({})
    assert dict(env.volumes) == {}
    assert dict(env.unc_volumes) == {}
    assert env.rootfs_path is None
    assert env.resolve_relative is True
    assert env.max_workers == 1


def test_snapshot_is_immutable() -> None:
    env = get_path_environment({"C_VOLUME_PATH": "/mnt/c"})
    with pytest.raises(TypeError):
        env.volumes["D"] = "/mnt/d"
    with pytest.raises(AttributeError):
        env.rootfs_path = "C:\\rootfs"


@pytest.mark.parametrize(
    "raw, expected",
    [("false", False), ("0", False), ("no", False), ("TRUE", True), (" on ", True)],
)
def test_resolve_relative_flag(raw, expected) -> None:
    assert get_path_environment({"WSLPATH_RESOLVE_RELATIVE": raw}).resolve_relative is expected


@pytest.mark.parametrize("raw, expected", [("4", 4), ("0", 1), ("-3", 1), ("many", 1)])
def test_max_workers(raw, expected) -> None:
    assert get_path_environment({"WSLPATH_MAX_WORKERS": raw}).max_workers == expected


def test_volume_variable() -> None:
    assert volume_variable("c") == "C_VOLUME_PATH"


class TestParseUncMappings:
    def test_multiple_entries(self):
        mappings = parse_unc_mappings("\\\\nas\\media=/mnt/media/;\\\\nas\\backup=/mnt/backup")
        assert mappings == {"\\\\nas\\media": "/mnt/media", "\\\\nas\\backup": "/mnt/backup"}

    def test_malformed_entries_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="wslpath.config"):
            mappings = parse_unc_mappings(";bogus;\\\\h\\s=/mnt/s;\\\\h\\s\\sub=/x;C:\\x=/y;\\\\h\\t=")
        assert mappings == {"\\\\h\\s": "/mnt/s"}
        assert len(caplog.records) == 4

    def test_trailing_separator_on_share(self):
        assert parse_unc_mappings("\\\\h\\s\\=/mnt/s") == {"\\\\h\\s": "/mnt/s"}

    def test_lookup_is_case_insensitive(self):
        env = get_path_environment({"WSL_UNC_PATH": "\\\\NAS\\Media=/mnt/media"})
        assert env.unc_mount("\\\\nas\\media") == "/mnt/media"
        assert env.unc_mount("\\\\nas\\other") is None


def test_mount_points_cover_drives_and_shares() -> None:
    env = get_path_environment({"C_VOLUME_PATH": "/mnt/c", "WSL_UNC_PATH": "\\\\h\\s=/mnt/s"})
    assert env.mount_points() == [("C:", "/mnt/c"), ("\\\\h\\s", "/mnt/s")]


def test_log_level() -> None:
    assert get_log_level({}) == logging.WARNING
    assert get_log_level({"WSLPATH_LOG_LEVEL": "debug"}) == logging.DEBUG
    assert get_log_level({"WSLPATH_LOG_LEVEL": "chatty"}) == logging.WARNING
