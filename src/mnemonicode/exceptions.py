"""Custom exception hierarchy for the mnemonic codec."""
from __future__ import annotations


class MnemonicError(Exception):
    """Base class for all mnemonicode errors."""


class ConfigurationError(MnemonicError):
    """Raised when user-supplied configuration is invalid."""


class DictionaryError(MnemonicError):
    """Raised when the static word table is inconsistent."""


__all__ = [
    "ConfigurationError",
    "DictionaryError",
    "MnemonicError",
]
