"""Tests for mortmonitor.core.utils.logging."""

import os
from pathlib import Path

import pytest
from loguru import logger

from mortmonitor.core.config_schema import MortMonitorConfig
from mortmonitor.core.utils.logging import configure_logging, resolve_log_file, setup_logging


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()


def _settings(tmp_dir, **logging):
    return MortMonitorConfig.model_validate(
        {
            "paths": {"data_dir": tmp_dir, "log_dir": os.path.join(tmp_dir, "logs")},
            "logging": logging,
        }
    )


class TestResolveLogFile:
    def test_disabled_by_default(self, tmp_dir):
        assert resolve_log_file(_settings(tmp_dir)) is None

    def test_relative_name_lands_in_log_dir(self, tmp_dir):
        settings = _settings(tmp_dir, file="mortmonitor.log")
        assert resolve_log_file(settings) == Path(tmp_dir) / "logs" / "mortmonitor.log"

    def test_absolute_path_kept(self, tmp_dir):
        target = os.path.join(tmp_dir, "elsewhere", "run.log")
        assert resolve_log_file(_settings(tmp_dir, file=target)) == Path(target)

    def test_missing_log_dir_falls_back_to_data_dir(self, tmp_dir):
        settings = MortMonitorConfig.model_validate(
            {"paths": {"data_dir": tmp_dir}, "logging": {"file": "mortmonitor.log"}}
        )
        assert resolve_log_file(settings) == Path(tmp_dir) / "logs" / "mortmonitor.log"


class TestConfigureLogging:
    def test_file_sink_receives_messages(self, tmp_dir):
        os.makedirs(os.path.join(tmp_dir, "logs"))
        log_file = configure_logging(_settings(tmp_dir, level="info", file="mortmonitor.log"))

        logger.info("rates refreshed")
        logger.debug("not at this level")

        content = log_file.read_text()
        assert "rates refreshed" in content
        assert "| INFO |" in content
        assert "not at this level" not in content

    def test_console_only(self, tmp_dir, capsys):
        assert configure_logging(_settings(tmp_dir)) is None
        logger.warning("conforming limit missing")
        logger.info("quiet")

        err = capsys.readouterr().err
        assert "[WARNING] conforming limit missing" in err
        assert "quiet" not in err


def test_setup_logging_replaces_sinks(capsys):
    setup_logging(level="ERROR")
    setup_logging(level="ERROR")
    logger.error("once")
    assert capsys.readouterr().err.count("once") == 1
