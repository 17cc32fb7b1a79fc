"""Mnemonic word decoding back into the original bytes."""

from __future__ import annotations

import io
import logging
import re
import struct
from typing import BinaryIO, Iterator, Tuple, Union

from .dictionary import index_of, is_remainder_index
from .errors import (
    DataPastRemainderError,
    DecodeError,
    InvalidEncodingError,
    UnexpectedRemainderError,
    UnexpectedRemainderWordError,
)
from .wordlist import BASE

LOGGER = logging.getLogger(__name__)

TextLike = Union[str, bytes, bytearray, memoryview]

_WORD_RE = re.compile(r"[A-Za-z]+")

# Largest accumulated low digits that still fit 32 bits when the last digit is 1624.
_MAX_LOW_DIGITS_AT_1624 = 0xFFFFFFFF - 1624 * BASE * BASE

_REMAINDER_LIMITS = {1: 0xFF, 2: 0xFFFF, 3: 0xFFFFFF}


def tokenize(src: TextLike) -> Iterator[str]:
    """Yield the words of *src*, treating any run of non-letters as a separator.

    Bytes are read as Latin-1, so every non-ASCII byte separates words.
    """

    if isinstance(src, (bytes, bytearray, memoryview)):
        text = bytes(src).decode("latin-1")
    elif isinstance(src, str):
        text = src
    else:
        raise TypeError(f"src must be str or bytes-like, not {type(src).__name__}")
    for match in _WORD_RE.finditer(text):
        yield match.group(0)


def _fold_index(index: int, x: int, offset: int) -> Tuple[int, int]:
    """Fold one word index into the chunk accumulator.

    Returns the updated ``(x, offset)`` pair where *offset* counts decoded
    bytes so far.
    """

    slot = offset % 4
    if is_remainder_index(index) and slot != 2:
        raise UnexpectedRemainderWordError()
    if slot == 3:
        raise DataPastRemainderError()
    if slot == 0:
        return index, offset + 1
    if slot == 1:
        return x + index * BASE, offset + 1
    if is_remainder_index(index):
        # 24-bit tail; offset lands on 3 and the chunk is closed.
        return x + (index - BASE) * BASE * BASE, offset + 1
    if index >= BASE - 1 or (index == BASE - 2 and x > _MAX_LOW_DIGITS_AT_1624):
        raise InvalidEncodingError()
    return x + index * BASE * BASE, offset + 2


def decode_to(src: TextLike, dest: BinaryIO) -> int:
    """Decode the mnemonic *src* into the binary stream *dest*.

    Complete chunks are written as soon as they are decoded, so *dest* may
    hold a prefix of the output when an error is raised.

    Returns:
        The number of bytes decoded.

    Raises:
        DecodeError: If *src* is not a valid encoding.
    """

    x = 0
    offset = 0
    for word in tokenize(src):
        try:
            x, offset = _fold_index(index_of(word), x, offset)
        except DecodeError:
            LOGGER.debug("rejected word %r at byte offset %d", word, offset)
            raise
        if offset % 4 == 0:
            dest.write(struct.pack("<I", x))
            x = 0

    remainder = offset % 4
    if remainder:
        dest.write(struct.pack("<I", x)[:remainder])
        if x > _REMAINDER_LIMITS[remainder]:
            LOGGER.debug("trailing value %d does not fit %d byte(s)", x, remainder)
            raise UnexpectedRemainderError()
    return offset


def decode(src: TextLike) -> bytes:
    """Decode the mnemonic *src* and return the original bytes.

    >>> decode("consul-quiet-fax")
    b'\\x01\\xe2@'
    """

    buffer = io.BytesIO()
    decode_to(src, buffer)
    return buffer.getvalue()


__all__ = ["decode", "decode_to", "tokenize"]
