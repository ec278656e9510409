#!/usr/bin/env python3
"""c30 — encode binary data to German uppercase letters and back."""

import argparse
import contextlib
import logging
import os
import sys
import time

from c30.errors import C30Error
from c30.stream import decode_stream, encode_stream

log = logging.getLogger("c30")


def setup_logging(quiet: bool = False) -> None:
    log.setLevel(logging.WARNING if quiet else logging.INFO)
    if not log.hasHandlers():
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s",
            datefmt="%H:%M:%S",
        ))
        log.addHandler(handler)


def _open(path: str, mode: str):
    """Open a binary file, with "-" meaning stdin/stdout."""
    if path == "-":
        return contextlib.nullcontext(sys.stdin.buffer if "r" in mode else sys.stdout.buffer)
    return open(path, mode)


def _report_progress(total: int) -> None:
    log.info("Processed: %d MB", total // (1024 * 1024))


def _width(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"width must be >= 0, got {n}")
    return n


def _same_file(a: str, b: str) -> bool:
    if "-" in (a, b) or not (os.path.exists(a) and os.path.exists(b)):
        return False
    return os.path.samefile(a, b)


def run(args) -> None:
    with _open(args.infile, "rb") as src, _open(args.outfile, "wb") as dst:
        if args.decode:
            decode_stream(src, dst, progress=_report_progress)
        else:
            encode_stream(src, dst, width=args.width, progress=_report_progress)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="c30",
        description="Encode binary data to German uppercase letters and back.",
        epilog="Usage: c30 [OPTIONS] < infile > outfile",
    )
    parser.add_argument("-d", "--decode", action="store_true", help="Decode mode")
    parser.add_argument(
        "-w", "--width", type=_width, default=0,
        help="Number of encoded characters per line (0 for no wrapping)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report errors")
    parser.add_argument("infile", nargs="?", default="-", help="Input file (default: stdin)")
    parser.add_argument("outfile", nargs="?", default="-", help="Output file (default: stdout)")

    args = parser.parse_args(argv)
    if _same_file(args.infile, args.outfile):
        parser.error("INFILE and OUTFILE must be different files")
    setup_logging(args.quiet)

    start = time.perf_counter()
    try:
        run(args)
    except (C30Error, OSError) as e:
        log.error("Error: %s", e)
        sys.exit(1)
    log.info("Operation completed in %.3fs", time.perf_counter() - start)


if __name__ == "__main__":
    main()
