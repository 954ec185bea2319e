"""bytewave: decode and encode canonical PCM/IEEE-float WAV headers."""

from __future__ import annotations

from bytewave.codec import build_header, decode, encode
from bytewave.data import open_wav_read, open_wav_write, read_data, write_data
from bytewave.display import format_table, print_metadata
from bytewave.errors import (
    AllocationError,
    FileNotOpenedError,
    IoReadError,
    IoWriteError,
    MalformedHeaderError,
    NonPcmDataError,
    PositionQueryError,
    WavError,
)
from bytewave.models import HEADER_SIZE, AudioFormat, ErrorCode, WavMetadata

__all__ = [
    "HEADER_SIZE",
    "AllocationError",
    "AudioFormat",
    "ErrorCode",
    "FileNotOpenedError",
    "IoReadError",
    "IoWriteError",
    "MalformedHeaderError",
    "NonPcmDataError",
    "PositionQueryError",
    "WavError",
    "WavMetadata",
    "build_header",
    "decode",
    "encode",
    "format_table",
    "open_wav_read",
    "open_wav_write",
    "print_metadata",
    "read_data",
    "write_data",
]
