"""Shared fixtures for bytewave tests."""

from __future__ import annotations

import struct
from collections.abc import Callable

import pytest

RAW_HEADER_FORMAT = "<4sI4s4sIhhiihh4sI"


def _make_header(
    *,
    riff: bytes = b"RIFF",
    chunk_size: int | None = None,
    wave: bytes = b"WAVE",
    fmt: bytes = b"fmt ",
    fmt_size: int = 16,
    audio_format: int = 1,
    num_channels: int = 2,
    sample_rate: int = 44_100,
    byte_rate: int | None = None,
    block_align: int | None = None,
    bits_per_sample: int = 16,
    data: bytes = b"data",
    data_size: int = 0,
) -> bytes:
    """Pack a 44 byte header by hand, filling consistent defaults."""
    bytes_per_sample = -(-bits_per_sample // 8) if bits_per_sample < 0 else bits_per_sample // 8
    if byte_rate is None:
        byte_rate = sample_rate * num_channels * bytes_per_sample
    if block_align is None:
        block_align = num_channels * bytes_per_sample
    if chunk_size is None:
        chunk_size = 36 + data_size
    return struct.pack(
        RAW_HEADER_FORMAT,
        riff,
        chunk_size,
        wave,
        fmt,
        fmt_size,
        audio_format,
        num_channels,
        sample_rate,
        byte_rate,
        block_align,
        bits_per_sample,
        data,
        data_size,
    )


@pytest.fixture
def make_header() -> Callable[..., bytes]:
    """Return a builder for raw header bytes."""
    return _make_header
