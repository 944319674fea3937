"""Tests for byte and duration formatting."""

import pytest

from bench_harness import format_bytes, format_duration


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (0, "0.00 B"),
        (1, "1.00 B"),
        (1023, "1023.00 B"),
        (1024, "1.00 KB"),
        (1536, "1.50 KB"),
        (1048576, "1.00 MB"),
        (1024**3, "1.00 GB"),
        (5 * 1024**3, "5.00 GB"),
        (1024**4, "1024.00 GB"),
    ],
)
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (-1, "-1.00 B"),
        (-1536, "-1.50 KB"),
        (-3 * 1024 * 1024, "-3.00 MB"),
        (-(1024**4), "-1024.00 GB"),
    ],
)
def test_format_bytes_keeps_sign(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_format_duration():
    assert format_duration(0) == "0.00ms"
    assert format_duration(12.346) == "12.35ms"
