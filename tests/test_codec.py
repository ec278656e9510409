"""Tests for Code30 encoding/decoding."""

import os

import pytest

from c30.alphabet import CHARS, forward
from c30.codec import Decoder, Encoder, decode, encode
from c30.errors import ByteOverflowError, C30Error, InvalidCharacterError, UnexpectedEndError

ALL_BYTES = bytes(range(256))


def _payload(s: str) -> str:
    return s.replace("\r", "").replace("\n", "")


def test_zero_byte():
    assert encode(b"\x00") == "AA"


def test_known_vectors():
    # 255 = 8*30 + 15, 29 = 0*30 + 29
    assert encode(b"\xff") == forward(15) + forward(8) == "PI"
    assert encode(b"\x1d") == forward(29) + forward(0) == "ẞA"
    assert encode(b"\x1e") == "AB"
    assert encode(b"hello") == "ODLDSDSDVD"


def test_empty():
    assert encode(b"") == ""
    assert encode(b"", width=4) == ""
    assert decode("") == b""


def test_roundtrip():
    for data in [b"", b"\x00", b"\xff", ALL_BYTES, ALL_BYTES[::-1] * 3, os.urandom(1000)]:
        assert decode(encode(data)) == data


def test_roundtrip_wrapped():
    data = os.urandom(257)
    for width in range(0, 40):
        assert decode(encode(data, width=width)) == data


def test_expansion_ratio():
    for n in range(0, 50):
        data = bytes(range(n))
        assert len(encode(data)) == 2 * n
        assert len(_payload(encode(data, width=7))) == 2 * n


def test_alphabet_closure():
    text = _payload(encode(ALL_BYTES, width=10))
    assert set(text) <= set(CHARS)


def test_quotient_symbols_limited():
    """The second symbol of each pair is always A..I (quotient 0..8)."""
    text = encode(ALL_BYTES)
    assert set(text[1::2]) == set("ABCDEFGHI")
    assert set(text[0::2]) == set(CHARS)


def test_wrap_placement():
    assert encode(b"\x00\x01\x02", width=4) == "AABA\r\nCA"


def test_wrap_exact_multiple_keeps_break():
    assert encode(b"\x00\x01", width=4) == "AABA\r\n"


def test_wrap_odd_width_rounds_up():
    # lines are flushed once they hold >= width characters, two at a time
    assert encode(b"\x00\x01\x02", width=3) == "AABA\r\nCA"
    assert encode(b"\x00\x01\x02", width=1) == "AA\r\nBA\r\nCA\r\n"


def test_negative_width():
    with pytest.raises(ValueError, match="width"):
        encode(b"x", width=-1)


def test_decode_ignores_line_breaks():
    assert decode("AA\r\nBA\nCA\r") == b"\x00\x01\x02"
    # even between the two symbols of a pair
    assert decode("P\r\nI") == b"\xff"
    assert decode("\n\n\r") == b""


def test_decode_invalid_char():
    with pytest.raises(InvalidCharacterError, match="invalid character in input: '1' at offset 1"):
        decode("A1")
    with pytest.raises(InvalidCharacterError):
        decode("aa")
    with pytest.raises(InvalidCharacterError):
        decode("AA AA")


def test_decode_odd_length():
    with pytest.raises(UnexpectedEndError, match="unexpected end of input: odd length"):
        decode("A")
    with pytest.raises(UnexpectedEndError):
        decode("AABA\r\nC")


def test_decode_overflow_rejected():
    # quotient J (9) -> 270
    with pytest.raises(ByteOverflowError, match="does not fit in a byte"):
        decode("AJ")
    # 8*30 + 16 = 256
    with pytest.raises(ByteOverflowError):
        decode("QI")
    assert decode("PI") == b"\xff"


def test_errors_are_value_errors():
    for text in ("A1", "A", "AJ"):
        with pytest.raises(C30Error):
            decode(text)
        with pytest.raises(ValueError):
            decode(text)


def test_incremental_matches_oneshot():
    data = os.urandom(500)
    enc = Encoder(width=9)
    parts = [enc.feed(data[i:i + 7]) for i in range(0, len(data), 7)]
    parts.append(enc.finish())
    text = "".join(parts)
    assert text == encode(data, width=9)

    dec = Decoder()
    out = b"".join(dec.feed(text[i:i + 5]) for i in range(0, len(text), 5))
    assert out + dec.finish() == data


def test_decoder_pair_split_across_feeds():
    dec = Decoder()
    assert dec.feed("P") == b""
    assert dec.feed("I") == b"\xff"
    assert dec.finish() == b""


def test_decoder_offset_across_feeds():
    dec = Decoder()
    dec.feed("AA\r\n")
    with pytest.raises(InvalidCharacterError, match="at offset 5"):
        dec.feed("B?")


def test_encoder_width_and_line_length():
    enc = Encoder(width=7)
    assert enc.width == 7
    assert enc.line_length == 8
    assert Encoder().line_length == 0
