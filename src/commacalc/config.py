"""
Runtime configuration for the commacalc command line.

Configuration via environment variables:

- ``COMMACALC_LOG_LEVEL`` — logging level name (default: ``WARNING``)
- ``COMMACALC_CARET`` — ``1``/``true`` or ``0``/``false`` (default: ``1``);
  whether diagnostics draw a caret under the error position

Command-line flags take precedence over the environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_FALSE_VALUES = ("0", "false", "no", "off")


class CalcConfig(BaseModel):
    """Settings for a command-line run."""

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, description="Logging level name")
    caret: bool = Field(default=True, description="Draw a caret under error positions")

    model_config = ConfigDict(frozen=True)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


def load_config(environ: Mapping[str, str] | None = None) -> CalcConfig:
    """Build a config from ``COMMACALC_*`` environment variables."""
    env = os.environ if environ is None else environ
    return CalcConfig(
        log_level=env.get("COMMACALC_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        caret=env.get("COMMACALC_CARET", "1").strip().lower() not in _FALSE_VALUES,
    )


def configure_logging(config: CalcConfig) -> None:
    """Route log records to stderr at the configured level."""
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    logging.getLogger("commacalc").setLevel(config.log_level)
