"""
Tests for TOML logging configuration.
"""

import logging

import pytest

from survey_design.scripts.logger import load_default_config, setup_logging

LOG_CFG = """
version = 1
disable_existing_loggers = false

[handlers.console]
class = "logging.StreamHandler"
level = "DEBUG"

[loggers.survey_design]
level = "INFO"
handlers = ["console"]
"""


@pytest.fixture
def log_cfg(tmp_path):
    cfg = tmp_path / "logging.toml"
    cfg.write_text(LOG_CFG)
    return cfg


class TestSetupLogging:
    def test_explicit_path(self, log_cfg, monkeypatch, restore_design_logger):
        """Should load the file passed as argument, ignoring the environment."""
        monkeypatch.setenv("SURVEY_DESIGN_LOG_CFG", "/nonexistent/logging.toml")

        design_logger = setup_logging(log_cfg)

        assert design_logger is restore_design_logger
        assert design_logger.level == logging.INFO

    def test_explicit_path_missing(self, tmp_path, restore_design_logger):
        """Should fail loudly when the given file does not exist."""
        with pytest.raises(FileNotFoundError):
            setup_logging(tmp_path / "absent.toml")

    def test_loads_config_from_environment(
        self, log_cfg, monkeypatch, restore_design_logger
    ):
        monkeypatch.setenv("SURVEY_DESIGN_LOG_CFG", str(log_cfg))

        setup_logging()

        assert restore_design_logger.level == logging.INFO
        assert any(
            isinstance(h, logging.StreamHandler) for h in restore_design_logger.handlers
        )

    def test_missing_environment_file_uses_null_handler(
        self, tmp_path, monkeypatch, restore_design_logger
    ):
        monkeypatch.setenv("SURVEY_DESIGN_LOG_CFG", str(tmp_path / "absent.toml"))

        setup_logging()

        assert len(restore_design_logger.handlers) == 1
        assert isinstance(restore_design_logger.handlers[0], logging.NullHandler)

    def test_directory_is_rejected(self, tmp_path, monkeypatch, restore_design_logger):
        monkeypatch.setenv("SURVEY_DESIGN_LOG_CFG", str(tmp_path))

        with pytest.raises(FileNotFoundError):
            setup_logging()

    def test_packaged_default(self, monkeypatch, restore_design_logger):
        """Should fall back to the configuration shipped with the package."""
        monkeypatch.delenv("SURVEY_DESIGN_LOG_CFG", raising=False)

        design_logger = setup_logging()

        assert design_logger.level == logging.DEBUG
        assert design_logger.propagate is False
        assert [type(h) for h in design_logger.handlers] == [logging.StreamHandler]


class TestDefaultConfig:
    def test_packaged_file_is_readable(self):
        cfg = load_default_config()
        assert cfg["version"] == 1
        assert cfg["loggers"]["survey_design"]["handlers"] == ["console"]
