"""Utility helpers for mnemonicode."""

from .logging import DEFAULT_LOG_LEVEL, configure_logging

__all__ = ["DEFAULT_LOG_LEVEL", "configure_logging"]
