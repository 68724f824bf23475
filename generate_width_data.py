#!/usr/bin/env python3
#
# Dump the display width of every Unicode code point as a list of ranges.
# Each output line holds three decimal numbers: the width, the first code
# point of a run sharing that width and the last code point of the run.
#
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
#
# Unicode® data: https://www.unicode.org/license.txt

import sys
from typing import Callable, Iterable, Iterator, NamedTuple, TextIO

from wcwidth import wcwidth

NUM_CODEPOINTS = 0x110000
MAX_CODEPOINT = NUM_CODEPOINTS - 1

Codepoint = int

# Code points that always open a new range, even when their width matches the
# preceding one. Some entries coincide; they are listed per block anyway.
BOUNDARIES: frozenset[Codepoint] = frozenset(
    [
        0x80,  # first code point encoded with 2 bytes in UTF-8
        0x800,  # 3 bytes
        0x10000,  # 4 bytes
        MAX_CODEPOINT,
        0xD800, 0xDFFF + 1,  # surrogates
        0xE000, 0xF8FF + 1,  # Private Use Area
        0xF0000, 0xFFFFD + 1,  # Supplementary PUA-A
        0x100000, 0x10FFFD + 1,  # Supplementary PUA-B
    ]
)


class WidthRange(NamedTuple):
    width: int
    start: Codepoint
    end: Codepoint

    def __str__(self) -> str:
        return f"{self.width} {self.start} {self.end}"


def is_boundary(cp: Codepoint) -> bool:
    return cp in BOUNDARIES


def classify(cp: Codepoint) -> int:
    """Width of a single code point, -1 when it has none (controls)."""
    return wcwidth(chr(cp))


def compress_widths(classify: Callable[[Codepoint], int] = classify) -> Iterator[WidthRange]:
    """Scan the whole code point space and yield maximal runs of equal width.

    A run ends where the width changes or where the next code point is in
    BOUNDARIES. Runs are yielded as soon as they are complete.
    """
    previous_width = None
    start = end = 0
    for cp in range(NUM_CODEPOINTS):
        width = classify(cp)
        if not cp or width != previous_width or is_boundary(cp):
            if cp:
                yield WidthRange(previous_width, start, end)
            start = cp
            previous_width = width
        end = cp
    yield WidthRange(previous_width, start, MAX_CODEPOINT)


def check_ranges(ranges: Iterable[WidthRange]) -> Iterator[WidthRange]:
    """Pass ranges through unchanged, asserting they form a valid table."""
    expected_start = 0
    previous = None
    for r in ranges:
        assert r.start == expected_start, f"{r}: expected start {expected_start}"
        assert r.start <= r.end <= MAX_CODEPOINT, f"{r}: bad end"
        inner = [cp for cp in BOUNDARIES if r.start < cp <= r.end]
        assert not inner, f"{r}: spans boundary {inner[0]:#X}"
        if previous is not None and previous.width == r.width:
            assert is_boundary(r.start), f"{previous} and {r} should be merged"
        expected_start = r.end + 1
        previous = r
        yield r
    assert expected_start == NUM_CODEPOINTS, f"table ends at {expected_start - 1:#X}"


def write_ranges(ranges: Iterable[WidthRange], out: TextIO):
    for r in ranges:
        try:
            out.write(f"{r}\n")
        except (OSError, ValueError) as e:
            sys.stderr.write(f"Error writing range {r}: {e}\n")
            sys.exit(1)
    try:
        out.flush()
    except (OSError, ValueError) as e:
        sys.stderr.write(f"Error flushing width data: {e}\n")
        sys.exit(1)


def main():
    write_ranges(check_ranges(compress_widths(classify)), sys.stdout)


if __name__ == "__main__":
    main()
