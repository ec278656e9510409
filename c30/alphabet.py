"""The Code30 alphabet.

30 uppercase letters: the basic Latin A-Z followed by the German
umlauts Ä, Ö, Ü and the capital sharp s ẞ (U+1E9E). Index order is the
order of CHARS and is part of the wire format:

    A=0  B=1  ...  Z=25  Ä=26  Ö=27  Ü=28  ẞ=29

The four non-ASCII letters take 2 (ÄÖÜ) or 3 (ẞ) bytes in UTF-8, so
encoded text must always be read and written through a Unicode-aware
encoding.

Both directions of the mapping come from the one CHARS string, so the
forward and inverse maps are exact inverses by construction.
"""

from c30.errors import InvalidCharacterError

CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZÄÖÜẞ"
BASE = len(CHARS)
_DECODE_MAP = {c: i for i, c in enumerate(CHARS)}


def forward(index: int) -> str:
    """Symbol for a digit in [0, 30)."""
    if not 0 <= index < BASE:
        raise ValueError(f"alphabet index out of range: {index}")
    return CHARS[index]


def inverse(ch: str) -> int:
    """Digit for a symbol. Raises InvalidCharacterError for anything else."""
    digit = _DECODE_MAP.get(ch)
    if digit is None:
        raise InvalidCharacterError(f"invalid character in input: {ch!r}")
    return digit
