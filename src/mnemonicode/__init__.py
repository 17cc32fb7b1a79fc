"""Encode binary data as sequences of common English words and back."""

from .codec import (
    DEFAULT_FORMAT,
    DataPastRemainderError,
    DecodeError,
    InvalidEncodingError,
    Template,
    UnexpectedRemainderError,
    UnexpectedRemainderWordError,
    UnrecognizedWordError,
    decode,
    decode_to,
    encode,
    encode_to,
    encode_with_format,
    to_string,
    words_required,
)
from .exceptions import ConfigurationError, DictionaryError, MnemonicError

__all__ = [
    "ConfigurationError",
    "DEFAULT_FORMAT",
    "DataPastRemainderError",
    "DecodeError",
    "DictionaryError",
    "InvalidEncodingError",
    "MnemonicError",
    "Template",
    "UnexpectedRemainderError",
    "UnexpectedRemainderWordError",
    "UnrecognizedWordError",
    "decode",
    "decode_to",
    "encode",
    "encode_to",
    "encode_with_format",
    "to_string",
    "words_required",
]
