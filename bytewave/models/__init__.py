"""Models for the canonical WAV header."""

from __future__ import annotations

__all__ = [
    "FMT_BODY_FORMAT",
    "FMT_BODY_SIZE",
    "HEADER_FORMAT",
    "HEADER_SIZE",
    "PCM_FMT_CHUNK_SIZE",
    "SIZE_FORMAT",
    "TAG_SIZE",
    "AudioFormat",
    "ChunkId",
    "ErrorCode",
    "FmtBody",
    "RawHeader",
    "WavMetadata",
    "metadata",
    "pack_header",
    "types",
    "unpack_fmt_body",
    "whole_bytes",
]
import struct
from typing import NamedTuple

from . import metadata, types
from .metadata import WavMetadata, whole_bytes
from .types import AudioFormat, ChunkId, ErrorCode

# Whole header (little-endian): RIFF/WAVE/fmt tags and sizes + 16 byte fmt body
# + data tag/size = 44 bytes
HEADER_FORMAT = "<4sI4s4sIhhiihh4sI"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

TAG_SIZE = 4
SIZE_FORMAT = "<I"

# fmt body: audio_format(2) + channels(2) + sample_rate(4) + byte_rate(4)
# + block_align(2) + bits_per_sample(2) = 16 bytes
FMT_BODY_FORMAT = "<hhiihh"
FMT_BODY_SIZE = struct.calcsize(FMT_BODY_FORMAT)
PCM_FMT_CHUNK_SIZE = FMT_BODY_SIZE


class FmtBody(NamedTuple):
    """Fields of a 16 byte ``fmt `` sub-chunk body."""

    audio_format: int  # h - signed short
    num_channels: int  # h - signed short
    sample_rate: int  # i - signed int
    byte_rate: int  # i - signed int
    block_align: int  # h - signed short
    bits_per_sample: int  # h - signed short


class RawHeader(NamedTuple):
    """All 44 bytes of a canonical header, in on-disk order."""

    chunk_size: int
    fmt: FmtBody
    data_size: int


def unpack_fmt_body(data: bytes) -> FmtBody:
    """
    Unpack the ``fmt `` sub-chunk body from bytes.

    Args:
        data: Exactly 16 bytes following the sub-chunk 1 size field

    Returns:
        FmtBody with typed fields

    Raises:
        struct.error: If data is not exactly 16 bytes
    """
    return FmtBody._make(struct.unpack(FMT_BODY_FORMAT, data))


def pack_header(header: RawHeader) -> bytes:
    """
    Pack a complete header into bytes.

    Args:
        header: RawHeader to pack

    Returns:
        44-byte packed header

    Raises:
        struct.error: If a field does not fit its on-disk width
    """
    return struct.pack(
        HEADER_FORMAT,
        ChunkId.RIFF.value,
        header.chunk_size,
        ChunkId.WAVE.value,
        ChunkId.FMT.value,
        PCM_FMT_CHUNK_SIZE,
        *header.fmt,
        ChunkId.DATA.value,
        header.data_size,
    )
