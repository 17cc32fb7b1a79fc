"""Mnemonic codec: word table, encoder, decoder and format templates."""

from .decoder import decode, decode_to, tokenize
from .dictionary import TOTAL_WORDS, WORD_INDEX, index_of, word_for
from .encoder import (
    encode,
    encode_to,
    encode_with_format,
    iter_words,
    to_string,
    word_indices,
    words_required,
)
from .errors import (
    DataPastRemainderError,
    DecodeError,
    InvalidEncodingError,
    UnexpectedRemainderError,
    UnexpectedRemainderWordError,
    UnrecognizedWordError,
)
from .template import DEFAULT_FORMAT, Template
from .wordlist import BASE, REMAINDER, WORDS

__all__ = [
    "BASE",
    "DEFAULT_FORMAT",
    "DataPastRemainderError",
    "DecodeError",
    "InvalidEncodingError",
    "REMAINDER",
    "TOTAL_WORDS",
    "Template",
    "UnexpectedRemainderError",
    "UnexpectedRemainderWordError",
    "UnrecognizedWordError",
    "WORDS",
    "WORD_INDEX",
    "decode",
    "decode_to",
    "encode",
    "encode_to",
    "encode_with_format",
    "index_of",
    "iter_words",
    "to_string",
    "tokenize",
    "word_for",
    "word_indices",
    "words_required",
]
