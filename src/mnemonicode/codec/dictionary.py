"""Word table lookups in both directions.

The reverse index is built once when the module is imported and exposed
through a read-only mapping, so lookups are safe from any thread.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Sequence

from ..exceptions import DictionaryError
from .errors import UnrecognizedWordError
from .wordlist import BASE, REMAINDER, WORDS

TOTAL_WORDS = BASE + REMAINDER


def build_index(words: Sequence[str]) -> Mapping[str, int]:
    """Return a read-only mapping from each word in *words* to its position.

    Raises:
        DictionaryError: If a word appears more than once.
    """

    index: Dict[str, int] = {}
    for position, word in enumerate(words):
        if word in index:
            raise DictionaryError(
                f"duplicate word {word!r} at positions {index[word]} and {position}"
            )
        index[word] = position
    return MappingProxyType(index)


def _load_index() -> Mapping[str, int]:
    if len(WORDS) != TOTAL_WORDS:
        raise DictionaryError(f"word table must hold {TOTAL_WORDS} entries, found {len(WORDS)}")
    return build_index(WORDS)


WORD_INDEX = _load_index()


def word_for(index: int) -> str:
    """Return the dictionary word at *index*."""

    if not 0 <= index < TOTAL_WORDS:
        raise IndexError(f"word index out of range: {index}")
    return WORDS[index]


def index_of(word: str) -> int:
    """Return the dictionary position of *word*.

    Lookups are exact; ``"Apollo"`` is not the same word as ``"apollo"``.
    """

    try:
        return WORD_INDEX[word]
    except KeyError:
        raise UnrecognizedWordError() from None


def is_remainder_index(index: int) -> bool:
    return index >= BASE


__all__ = [
    "TOTAL_WORDS",
    "WORD_INDEX",
    "build_index",
    "index_of",
    "is_remainder_index",
    "word_for",
]
