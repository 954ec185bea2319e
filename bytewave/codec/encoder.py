"""Encoder for the canonical WAV header."""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO

from bytewave.errors import IoWriteError, MalformedHeaderError, NonPcmDataError
from bytewave.models import (
    PCM_FMT_CHUNK_SIZE,
    TAG_SIZE,
    AudioFormat,
    FmtBody,
    RawHeader,
    WavMetadata,
    pack_header,
)

from .decoder import ensure_open

logger = logging.getLogger(__name__)

# Sub-chunk header: tag(4) + size(4)
CHUNK_HEADER_SIZE = 8

SUPPORTED_FORMATS = frozenset(fmt.value for fmt in AudioFormat)


def build_header(metadata: WavMetadata) -> bytes:
    """
    Build the 44 header bytes for ``metadata``.

    ``audio_format`` may be an AudioFormat member or its integer code. Only
    audio_format, num_channels, sample_rate, bits_per_sample and
    num_samples are read; byte rate, block align and the chunk sizes are always
    recomputed. The record is not modified.

    Raises:
        NonPcmDataError: If audio_format is neither PCM nor IEEE float.
        MalformedHeaderError: If a value does not fit its on-disk field.
    """
    audio_format = getattr(metadata.audio_format, "value", metadata.audio_format)
    if audio_format not in SUPPORTED_FORMATS:
        raise NonPcmDataError(f"Unsupported audio format {audio_format}")

    data_size = metadata.data_size
    chunk_size = (
        TAG_SIZE + (CHUNK_HEADER_SIZE + PCM_FMT_CHUNK_SIZE) + (CHUNK_HEADER_SIZE + data_size)
    )
    header = RawHeader(
        chunk_size=chunk_size,
        fmt=FmtBody(
            audio_format=audio_format,
            num_channels=metadata.num_channels,
            sample_rate=metadata.sample_rate,
            byte_rate=metadata.expected_byte_rate,
            block_align=metadata.frame_size,
            bits_per_sample=metadata.bits_per_sample,
        ),
        data_size=data_size,
    )
    try:
        return pack_header(header)
    except struct.error as err:
        raise MalformedHeaderError(f"Header field out of range: {header}") from err


def encode(stream: BinaryIO | None, metadata: WavMetadata) -> None:
    """
    Write a complete header for ``metadata`` at the stream's current position.

    Nothing is written when the record is rejected. A failed write is not
    rolled back; the caller should discard the stream.

    Raises:
        FileNotOpenedError: If ``stream`` is None or closed.
        NonPcmDataError: If audio_format is neither PCM nor IEEE float.
        MalformedHeaderError: If a value does not fit its on-disk field.
        IoWriteError: If the stream fails or accepts fewer than 44 bytes.
    """
    stream = ensure_open(stream)
    header = build_header(metadata)
    write_all(stream, header, "header")
    logger.debug(
        "Encoded %s header: %d ch, %d Hz, %d bit, %d frames",
        metadata.format_name,
        metadata.num_channels,
        metadata.sample_rate,
        metadata.bits_per_sample,
        metadata.num_samples,
    )


def write_all(stream: BinaryIO, data: bytes, what: str) -> None:
    """Write ``data`` in one call or raise IoWriteError."""
    try:
        written = stream.write(data)
    except OSError as err:
        raise IoWriteError(f"Failed to write {what}") from err
    # Some writers return None to mean everything was accepted
    if written is not None and written != len(data):
        raise IoWriteError(f"Wrote {written} of {len(data)} bytes for {what}")
