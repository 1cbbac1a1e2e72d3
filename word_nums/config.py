"""
Runtime settings for the parser and its front ends.

Values come from the environment (optionally loaded from a `.env` file by the
CLI and API entry points):

    WORD_NUMS_SIGN_POLICY   plus_means_unsigned | always_signed | nonnegative_unsigned
    WORD_NUMS_LOG_LEVEL     DEBUG | INFO | WARNING | ERROR
"""

from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .models import SignPolicy

ENV_SIGN_POLICY = "WORD_NUMS_SIGN_POLICY"
ENV_LOG_LEVEL = "WORD_NUMS_LOG_LEVEL"


class ParserSettings(BaseModel):
    """Parser configuration. Immutable once built."""

    model_config = {"frozen": True}

    sign_policy: SignPolicy = SignPolicy.PLUS_MEANS_UNSIGNED
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> ParserSettings:
        """Build settings from environment variables, ignoring unset ones."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(ENV_SIGN_POLICY):
            values["sign_policy"] = env[ENV_SIGN_POLICY].strip().lower()
        if env.get(ENV_LOG_LEVEL):
            values["log_level"] = env[ENV_LOG_LEVEL]
        return cls(**values)


def configure_logging(settings: ParserSettings) -> None:
    """Set up root logging for the CLI and API entry points."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
