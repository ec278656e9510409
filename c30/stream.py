"""Streaming Code30 over binary file objects.

Both directions read the source in CHUNK_SIZE pieces and push them
through an incremental Encoder/Decoder, so memory use does not depend on
input size. The text side is always UTF-8 bytes on the wire; decoding
uses an incremental UTF-8 decoder because the multi-byte letters
(Ä, Ö, Ü, ẞ) can be split across two reads.

Errors are not caught here. OSError from src/dst and C30Error from the
codec propagate to the caller, and whatever was already written to dst
stays written.
"""

import codecs
import logging
from typing import BinaryIO, Callable

from c30.codec import Decoder, Encoder
from c30.errors import InvalidCharacterError

TEXT_ENCODING = "utf-8"
CHUNK_SIZE = 1024 * 1024
PROGRESS_INTERVAL = 1024 * 1024

Progress = Callable[[int], None]

log = logging.getLogger(__name__)


class _Ticker:
    """Calls progress(total) every time total passes another interval."""

    def __init__(self, progress: Progress | None, interval: int = PROGRESS_INTERVAL):
        self.progress = progress
        self.interval = interval
        self.total = 0

    def add(self, n: int) -> None:
        before = self.total // self.interval
        self.total += n
        if self.progress is not None and self.total // self.interval > before:
            self.progress(self.total)


def encode_stream(
    src: BinaryIO,
    dst: BinaryIO,
    width: int = 0,
    progress: Progress | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Encode everything in src to Code30 text on dst. Returns bytes read."""
    enc = Encoder(width)
    ticker = _Ticker(progress)
    while chunk := src.read(chunk_size):
        text = enc.feed(chunk)
        if text:
            dst.write(text.encode(TEXT_ENCODING))
        ticker.add(len(chunk))
    tail = enc.finish()
    if tail:
        dst.write(tail.encode(TEXT_ENCODING))
    dst.flush()
    log.debug("encoded %d bytes (width=%d)", ticker.total, enc.width)
    return ticker.total


def decode_stream(
    src: BinaryIO,
    dst: BinaryIO,
    progress: Progress | None = None,
    chunk_size: int = CHUNK_SIZE,
) -> int:
    """Decode Code30 text from src, writing the bytes to dst. Returns bytes written."""
    dec = Decoder()
    text_decoder = codecs.getincrementaldecoder(TEXT_ENCODING)()
    ticker = _Ticker(progress)

    def _text(raw: bytes, final: bool = False) -> str:
        try:
            return text_decoder.decode(raw, final)
        except UnicodeDecodeError as e:
            raise InvalidCharacterError(
                f"input is not valid {TEXT_ENCODING} text: {e.reason}"
            ) from e

    while chunk := src.read(chunk_size):
        data = dec.feed(_text(chunk))
        if data:
            dst.write(data)
            ticker.add(len(data))
    data = dec.feed(_text(b"", final=True)) + dec.finish()
    if data:
        dst.write(data)
        ticker.add(len(data))
    dst.flush()
    log.debug("decoded %d characters to %d bytes", dec.offset, ticker.total)
    return ticker.total
