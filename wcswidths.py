#!/usr/bin/env python3
#
# Read lines from standard input and write the display width of each one,
# as computed by wcswidth, to standard output. Undecodable lines and lines
# with non-printable characters report -1.
#
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
#
# Unicode® data: https://www.unicode.org/license.txt

import os
import sys
from typing import BinaryIO, Iterable

from wcwidth import wcwidth

LINE_MAX = 2048  # bytes, terminator included
ENCODING = "utf-8"


def line_width(text: Iterable[str]) -> int:
    total = 0
    for ch in text:
        w = wcwidth(ch)
        if w < 0:
            return -1
        total += w
    return total


def decode_line(raw: bytes) -> str | None:
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError:
        return None


def measure(raw: bytes) -> int:
    """Width of one input line with its "\\n" terminator left out.

    An unterminated line (end of input) is measured whole.
    """
    if len(raw) > LINE_MAX:
        return -1
    text = decode_line(raw)
    if text is None:
        return -1
    if text.endswith("\n"):
        text = text[:-1]
    return line_width(text)


def read_line(instream: BinaryIO) -> bytes:
    """Read one line, holding at most LINE_MAX + 1 bytes of it.

    The rest of an overlong line is skipped, so the result is longer than
    LINE_MAX exactly when the line was too long.
    """
    raw = instream.readline(LINE_MAX + 1)
    chunk = raw
    while len(chunk) > LINE_MAX and not chunk.endswith(b"\n"):
        chunk = instream.readline(LINE_MAX + 1)
    return raw


def run(instream: BinaryIO, outstream: BinaryIO):
    while True:
        try:
            raw = read_line(instream)
        except OSError as e:
            raise OSError(f"getline: {e}") from e
        if not raw:
            break
        try:
            outstream.write(b"%d\n" % measure(raw))
        except (OSError, ValueError) as e:
            raise OSError(f"write: {e}") from e
    try:
        outstream.flush()
    except (OSError, ValueError) as e:
        raise OSError(f"write: {e}") from e


def main(argv: list[str] | None = None):
    argv = sys.argv if argv is None else argv
    if len(argv) > 1:
        sys.stderr.write(f"Usage: {os.path.basename(argv[0])} < FILENAME\n")
        sys.exit(1)
    try:
        run(sys.stdin.buffer, sys.stdout.buffer)
    except OSError as e:
        sys.stderr.write(f"{e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
