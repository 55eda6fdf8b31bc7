import logging
import os

import pytest

ENV_KEYS = ("WSL_UNC_PATH", "WSL_ROOTFS_PATH", "WSLPATH_RESOLVE_RELATIVE", "WSLPATH_MAX_WORKERS", "WSLPATH_LOG_LEVEL")


@pytest.fixture()
def wsl_env(monkeypatch):
    """Replace any real volume mappings with a known set."""
    for key in list(os.environ):
        if key.endswith("_VOLUME_PATH") or key in ENV_KEYS:
            monkeypatch.delenv(key)
    monkeypatch.setenv("C_VOLUME_PATH", "/mnt/c")
    monkeypatch.setenv("D_VOLUME_PATH", "/mnt/backup")
    monkeypatch.setenv("WSL_UNC_PATH", "\\\\nas\\media=/mnt/media")
    monkeypatch.setenv("WSL_ROOTFS_PATH", "C:\\rootfs")
    monkeypatch.setenv("WSLPATH_RESOLVE_RELATIVE", "false")
    return monkeypatch


@pytest.fixture()
def restore_logging():
    """The CLI reconfigures the root logger; put pytest's handlers back."""
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
