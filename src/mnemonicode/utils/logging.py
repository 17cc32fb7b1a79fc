"""Logging utilities for mnemonicode."""

from __future__ import annotations

import logging
import os
from typing import Optional

from ..exceptions import ConfigurationError

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "MNEMONICODE_LOG_LEVEL"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the command-line tools.

    The level comes from *level*, then ``MNEMONICODE_LOG_LEVEL``, then
    :data:`DEFAULT_LOG_LEVEL`. Records go to stderr so they never mix with
    encoded output.
    """

    log_level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric = logging.getLevelName(log_level)
    if not isinstance(numeric, int):
        raise ConfigurationError(f"unknown log level: {log_level}")
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")
