#
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
#
# Unicode® data: https://www.unicode.org/license.txt

import pytest

import generate_width_data as gwd


def scenario_width(cp):
    """Toy classifier: controls at NUL, printable ASCII, one wide ideograph."""
    if cp == 0:
        return -1
    if 0x20 <= cp <= 0x7E:
        return 1
    if cp == 0x4E00:
        return 2
    return 0


@pytest.fixture(scope="session")
def wcwidth_ranges():
    # One full scan with the real classifier is shared by all tests.
    return list(gwd.compress_widths(gwd.classify))


@pytest.fixture(scope="session")
def scenario_ranges():
    return list(gwd.compress_widths(scenario_width))


@pytest.fixture(scope="session")
def constant_ranges():
    return list(gwd.compress_widths(lambda cp: 1))


class BrokenStream:
    """Stream whose every operation fails like a dead pipe or disk."""

    def __init__(self, message="Input/output error"):
        self.message = message

    def readline(self, size=-1):
        raise OSError(5, self.message)

    def write(self, data):
        raise OSError(32, "Broken pipe")

    def flush(self):
        pass


@pytest.fixture
def broken_stream():
    return BrokenStream()
