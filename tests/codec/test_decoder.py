import io

import pytest

from mnemonicode.codec import (
    DataPastRemainderError,
    DecodeError,
    InvalidEncodingError,
    UnexpectedRemainderError,
    UnexpectedRemainderWordError,
    UnrecognizedWordError,
    decode,
    decode_to,
    tokenize,
)
from mnemonicode.codec.dictionary import word_for
from mnemonicode.exceptions import MnemonicError

SAMPLE = bytes([101, 2, 240, 6, 108, 11, 20, 97])
SAMPLE_TEXT = "digital-apollo-aroma--rival-artist-rebel"


def _words(*indices: int) -> str:
    return " ".join(word_for(index) for index in indices)


def test_decode_known_vector():
    assert decode(SAMPLE_TEXT) == SAMPLE


def test_decode_24bit_remainder():
    assert decode("consul-quiet-fax") == bytes([0x01, 0xE2, 0x40])


def test_decode_empty():
    assert decode("") == b""
    assert decode(" -- \n") == b""


def test_decode_is_separator_agnostic():
    assert decode("digital apollo aroma rival artist rebel") == SAMPLE
    assert decode("  digital,apollo;aroma\n\trival 1 artist...rebel!") == SAMPLE


def test_decode_accepts_bytes():
    assert decode(SAMPLE_TEXT.encode("ascii")) == SAMPLE
    assert decode(bytearray(b"consul\xe2\x80\x94quiet fax")) == bytes([0x01, 0xE2, 0x40])


def test_decode_rejects_other_types():
    with pytest.raises(TypeError):
        decode(42)  # type: ignore[arg-type]


def test_tokenize():
    assert list(tokenize("a-b--c  d")) == ["a", "b", "c", "d"]
    assert list(tokenize("café")) == ["caf"]
    assert list(tokenize("")) == []


def test_decode_to_reports_byte_count():
    sink = io.BytesIO()
    assert decode_to(SAMPLE_TEXT, sink) == 8
    assert sink.getvalue() == SAMPLE

    sink = io.BytesIO()
    assert decode_to("consul-quiet-fax", sink) == 3


def test_short_tails():
    assert decode("academy") == b"\x00"
    assert decode("academy academy") == b"\x00\x00"
    assert decode("academy academy ego") == b"\x00\x00\x00"
    assert decode(_words(255)) == b"\xff"
    assert decode(_words(40, 40)) == (40 + 40 * 1626).to_bytes(2, "little")


def test_upper_bound_of_full_chunk():
    assert decode(_words(489, 807, 1624)) == b"\xff\xff\xff\xff"


def test_unrecognized_word():
    with pytest.raises(UnrecognizedWordError):
        decode("digital-apollo-zzyzx")
    with pytest.raises(UnrecognizedWordError):
        decode("Digital-apollo-aroma")


@pytest.mark.parametrize("text", ["fax", "fax-apollo-aroma", "digital-fax-aroma", "digital-apollo-aroma--yes"])
def test_remainder_word_outside_last_slot(text):
    with pytest.raises(UnexpectedRemainderWordError):
        decode(text)


def test_remainder_word_after_remainder_chunk():
    with pytest.raises(UnexpectedRemainderWordError):
        decode("consul-quiet-fax-fax")


def test_data_past_remainder():
    with pytest.raises(DataPastRemainderError):
        decode("consul-quiet-fax--digital")


@pytest.mark.parametrize(
    "indices",
    [(0, 0, 1625), (490, 807, 1624), (0, 808, 1624), (1625, 1625, 1624)],
)
def test_invalid_encoding(indices):
    with pytest.raises(InvalidEncodingError):
        decode(_words(*indices))


@pytest.mark.parametrize("indices", [(256,), (0, 41), (1625, 1625, 1632)])
def test_unexpected_remainder(indices):
    with pytest.raises(UnexpectedRemainderError):
        decode(_words(*indices))


def test_error_messages_and_hierarchy():
    with pytest.raises(DecodeError, match="Unexpected remainder \\(possible truncated string\\)"):
        decode(_words(256))
    assert issubclass(InvalidEncodingError, MnemonicError)
    assert str(DataPastRemainderError()) == "Unexpected data past 24-bit remainder"


def test_decode_to_keeps_completed_chunks_on_error():
    sink = io.BytesIO()
    with pytest.raises(UnrecognizedWordError):
        decode_to(SAMPLE_TEXT + "-nonsense", sink)
    assert sink.getvalue() == SAMPLE
