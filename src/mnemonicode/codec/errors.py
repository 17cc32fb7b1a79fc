"""Exception types raised while decoding mnemonic text."""

from __future__ import annotations

from typing import Optional

from ..exceptions import MnemonicError


class DecodeError(MnemonicError):
    """Base class for decode failures.

    Each subclass identifies one kind of rejection and carries a fixed
    message; no further payload is attached.
    """

    message = "Invalid mnemonic"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.message)


class UnrecognizedWordError(DecodeError):
    """Raised when a token is not part of the word table."""

    message = "Unrecognized word"


class UnexpectedRemainderWordError(DecodeError):
    """Raised when a remainder word shows up outside the last slot of a chunk."""

    message = "Unexpected 24-bit remainder word"


class DataPastRemainderError(DecodeError):
    """Raised when a word follows a terminal 3-byte chunk."""

    message = "Unexpected data past 24-bit remainder"


class InvalidEncodingError(DecodeError):
    """Raised when a chunk's last digit would overflow 32 bits."""

    message = "Invalid encoding"


class UnexpectedRemainderError(DecodeError):
    """Raised when the trailing value does not fit the leftover byte count."""

    message = "Unexpected remainder (possible truncated string)"


__all__ = [
    "DataPastRemainderError",
    "DecodeError",
    "InvalidEncodingError",
    "UnexpectedRemainderError",
    "UnexpectedRemainderWordError",
    "UnrecognizedWordError",
]
