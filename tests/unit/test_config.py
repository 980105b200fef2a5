"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from commacalc.config import CalcConfig, configure_logging, load_config


class TestLoadConfig:
    def test_defaults(self) -> None:
        config = load_config({})
        assert config.log_level == "WARNING"
        assert config.caret is True

    def test_log_level_is_normalized(self) -> None:
        assert load_config({"COMMACALC_LOG_LEVEL": " debug "}).log_level == "DEBUG"

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            load_config({"COMMACALC_LOG_LEVEL": "chatty"})

    @pytest.mark.parametrize("value", ["0", "false", "FALSE", "no", "off"])
    def test_caret_disabled(self, value: str) -> None:
        assert load_config({"COMMACALC_CARET": value}).caret is False

    @pytest.mark.parametrize("value", ["1", "true", "yes", ""])
    def test_caret_enabled(self, value: str) -> None:
        assert load_config({"COMMACALC_CARET": value}).caret is True

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("COMMACALC_LOG_LEVEL", "INFO")
        assert load_config().log_level == "INFO"


class TestCalcConfig:
    def test_frozen(self) -> None:
        config = CalcConfig()
        with pytest.raises(ValidationError):
            config.caret = False  # type: ignore[misc]

    def test_configure_logging_sets_package_level(self) -> None:
        package_logger = logging.getLogger("commacalc")
        previous = package_logger.level
        try:
            configure_logging(CalcConfig(log_level="DEBUG"))
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)
