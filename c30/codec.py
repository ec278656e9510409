"""Code30 encoding/decoding.

Each byte B is written as two base-30 digits, least significant first:

    B = quotient * 30 + remainder
    output: CHARS[remainder] CHARS[quotient]

so every byte becomes exactly two letters. Since 255 = 8*30 + 15 the
quotient digit is always one of A..I; the remainder digit uses the whole
alphabet.

Encoded text may be wrapped into lines joined with CRLF. The decoder
ignores CR and LF wherever they appear, so wrapping never changes the
decoded bytes.

Encoder and Decoder keep the few characters of state needed between
chunks, which lets the streaming layer feed them input of any size.
encode() and decode() are the one-shot forms.
"""

from c30.alphabet import BASE, CHARS, inverse
from c30.errors import ByteOverflowError, InvalidCharacterError, UnexpectedEndError

LINE_BREAK = "\r\n"
_SKIP = frozenset("\r\n")

# Both output characters for every byte value, remainder first.
_PAIRS = tuple(CHARS[b % BASE] + CHARS[b // BASE] for b in range(256))


class Encoder:
    """Incremental bytes -> Code30 text encoder.

    With width > 0, output is broken into lines. A line is written as soon
    as it holds at least `width` characters; characters come in pairs, so
    lines are `width` rounded up to an even number.
    """

    def __init__(self, width: int = 0):
        if width < 0:
            raise ValueError(f"wrap width must be >= 0, got {width}")
        self.width = width
        self.line_length = width + width % 2
        self._line = ""

    def feed(self, data: bytes) -> str:
        """Encode data, returning all text that is final so far."""
        text = "".join(map(_PAIRS.__getitem__, data))
        if not self.line_length:
            return text
        text = self._line + text
        n = len(text) - len(text) % self.line_length
        self._line = text[n:]
        return "".join(
            text[i:i + self.line_length] + LINE_BREAK
            for i in range(0, n, self.line_length)
        )

    def finish(self) -> str:
        """Return the last, unterminated line (may be empty)."""
        tail, self._line = self._line, ""
        return tail


class Decoder:
    """Incremental Code30 text -> bytes decoder."""

    def __init__(self):
        self._remainder: int | None = None
        self._pair_offset = 0
        self.offset = 0  # characters consumed so far, line breaks included

    def feed(self, text: str) -> bytes:
        out = bytearray()
        remainder = self._remainder
        offset = self.offset
        for ch in text:
            if ch in _SKIP:
                offset += 1
                continue
            try:
                digit = inverse(ch)
            except InvalidCharacterError:
                raise InvalidCharacterError(
                    f"invalid character in input: {ch!r} at offset {offset}"
                ) from None
            if remainder is None:
                remainder = digit
                self._pair_offset = offset
            else:
                value = digit * BASE + remainder
                if value > 0xFF:
                    raise ByteOverflowError(
                        f"pair {CHARS[remainder] + ch!r} at offset {self._pair_offset} "
                        f"decodes to {value}, which does not fit in a byte"
                    )
                out.append(value)
                remainder = None
            offset += 1
        self._remainder = remainder
        self.offset = offset
        return bytes(out)

    def finish(self) -> bytes:
        """Check that input ended on a pair boundary."""
        if self._remainder is not None:
            raise UnexpectedEndError(
                f"unexpected end of input: odd length (dangling symbol at offset {self._pair_offset})"
            )
        return b""


def encode(data: bytes, width: int = 0) -> str:
    """Encode bytes to Code30, optionally wrapped every `width` characters."""
    enc = Encoder(width)
    return enc.feed(data) + enc.finish()


def decode(s: str) -> bytes:
    """Decode Code30 text to bytes. CR and LF are ignored."""
    dec = Decoder()
    return dec.feed(s) + dec.finish()
