"""Binary to mnemonic word encoding."""

from __future__ import annotations

from typing import BinaryIO, Iterator, List, Union

import numpy as np

from .dictionary import word_for
from .template import DEFAULT_TEMPLATE, Template, as_template
from .wordlist import BASE

BytesLike = Union[bytes, bytearray, memoryview]


def words_required(length: int) -> int:
    """Return how many words encode *length* bytes.

    Full 4-byte chunks take three words; a 1, 2 or 3 byte tail takes one, two
    or three words respectively.
    """

    if length < 0:
        raise ValueError("length must be non-negative")
    return (length + 1) * 3 // 4


def _as_bytes(data: BytesLike) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"data must be bytes-like, not {type(data).__name__}")
    return bytes(data)


def word_indices(data: BytesLike) -> List[int]:
    """Return the dictionary index of every word in the encoding of *data*.

    Each 4-byte chunk is read as a little-endian integer and split into three
    base-1626 digits, least significant first. When the input ends in a 3-byte
    chunk its last digit is shifted into the remainder range so a decoder can
    tell the short chunk apart from a full one.
    """

    payload = _as_bytes(data)
    count = words_required(len(payload))
    if not count:
        return []

    padded = payload + b"\x00" * (-len(payload) % 4)
    chunks = np.frombuffer(padded, dtype="<u4").astype(np.int64)
    digits = np.stack(
        [chunks % BASE, chunks // BASE % BASE, chunks // (BASE * BASE)],
        axis=1,
    )
    if len(payload) % 4 == 3:
        digits[-1, 2] += BASE
    return [int(index) for index in digits.reshape(-1)[:count]]


def iter_words(data: BytesLike) -> Iterator[str]:
    for index in word_indices(data):
        yield word_for(index)


def encode_with_format(data: BytesLike, template: Union[str, Template]) -> str:
    """Encode *data* and lay the words out according to *template*."""

    return as_template(template).render(iter_words(data))


def encode(data: BytesLike) -> str:
    """Encode *data* using the default ``x-x-x--`` layout.

    >>> encode(bytes([101, 2, 240, 6, 108, 11, 20, 97]))
    'digital-apollo-aroma--rival-artist-rebel'
    """

    return DEFAULT_TEMPLATE.render(iter_words(data))


to_string = encode


def encode_to(
    data: BytesLike,
    dest: BinaryIO,
    template: Union[str, Template] = DEFAULT_TEMPLATE,
) -> None:
    """Write the encoding of *data* to the binary stream *dest* as UTF-8."""

    for piece in as_template(template).iter_pieces(iter_words(data)):
        dest.write(piece.encode("utf-8"))


__all__ = [
    "encode",
    "encode_to",
    "encode_with_format",
    "iter_words",
    "to_string",
    "word_indices",
    "words_required",
]
