"""Unit tests for dotinstall.logging_config module."""

import logging

import pytest

from dotinstall.api.config.DotinstallConfig import DotinstallConfig
from dotinstall.api.install import InstallDotfiles
from dotinstall.logging_config import setup_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("dotinstall")
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_writes_to_logfile_under_home(dotinstall_home, tmp_path, clean_logger):
    log_file = setup_logging(DotinstallConfig())

    InstallDotfiles().append(tmp_path / ".bashrc", "set -o vi")

    assert log_file == dotinstall_home.resolve() / "logfile"
    text = log_file.read_text()
    assert "dotinstall.api.install.InstallDotfiles - INFO - Appended" in text


def test_level_filters_records(tmp_path, clean_logger):
    config = DotinstallConfig(log={"level": "WARN"})
    log_file = setup_logging(config, log_file=tmp_path / "logs" / "install.log")

    InstallDotfiles().append(tmp_path / ".bashrc", "set -o vi")

    assert log_file.exists()
    assert log_file.read_text() == ""


def test_repeated_setup_replaces_handler(tmp_path, clean_logger):
    setup_logging(DotinstallConfig(), log_file=tmp_path / "a.log")
    setup_logging(DotinstallConfig(), log_file=tmp_path / "b.log")
    assert len(clean_logger.handlers) == 2


def test_warnings_echoed_to_stderr(tmp_path, clean_logger):
    setup_logging(DotinstallConfig(), log_file=tmp_path / "install.log")

    stream_handlers = [
        h for h in clean_logger.handlers if type(h) is logging.StreamHandler
    ]

    assert len(stream_handlers) == 1
    assert stream_handlers[0].level == logging.WARNING


def test_errors_reach_stderr_but_info_does_not(tmp_path, clean_logger, capsys):
    setup_logging(DotinstallConfig(), log_file=tmp_path / "install.log")
    child = logging.getLogger("dotinstall.api.install.cmd_append")

    child.info("quiet detail")
    child.error("Failed to append to /x")

    err = capsys.readouterr().err
    assert "Failed to append to /x" in err
    assert "quiet detail" not in err
    assert "quiet detail" in (tmp_path / "install.log").read_text()
