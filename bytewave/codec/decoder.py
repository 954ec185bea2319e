"""Sequential decoder for the canonical WAV header."""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO

from bytewave.errors import (
    FileNotOpenedError,
    IoReadError,
    MalformedHeaderError,
    NonPcmDataError,
    PositionQueryError,
)
from bytewave.models import (
    FMT_BODY_SIZE,
    PCM_FMT_CHUNK_SIZE,
    SIZE_FORMAT,
    TAG_SIZE,
    ChunkId,
    WavMetadata,
    unpack_fmt_body,
    whole_bytes,
)

logger = logging.getLogger(__name__)


def ensure_open(stream: BinaryIO | None) -> BinaryIO:
    """Return ``stream`` or raise if it is missing or closed."""
    if stream is None:
        raise FileNotOpenedError("No stream given")
    if getattr(stream, "closed", False):
        raise FileNotOpenedError("Stream is closed")
    return stream


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly ``size`` bytes or raise IoReadError."""
    try:
        data = stream.read(size)
    except OSError as err:
        raise IoReadError(f"Failed to read {what}") from err
    got = 0 if data is None else len(data)
    if got != size:
        raise IoReadError(f"Expected {size} bytes for {what}, got {got}")
    return data


def _expect_tag(stream: BinaryIO, tag: ChunkId) -> None:
    raw = read_exact(stream, TAG_SIZE, f"{tag.name} tag")
    if raw != tag.value:
        raise MalformedHeaderError(f"Expected {tag.value!r} tag, found {raw!r}")


def _read_size(stream: BinaryIO, what: str) -> int:
    value: int = struct.unpack(SIZE_FORMAT, read_exact(stream, 4, what))[0]
    return value


def decode(stream: BinaryIO | None, *, strict: bool = False) -> WavMetadata:
    """
    Decode a canonical WAV header from ``stream``.

    The stream must be positioned at the first byte of the RIFF container. The
    header is consumed field by field in on-disk order and the first failed
    check aborts the decode. On success the stream is left positioned at
    ``data_pos``, the first byte of sample data.

    Args:
        stream: Readable binary stream. It is borrowed, never closed.
        strict: Also reject bit depths that are not positive multiples of 8,
            non-positive channel counts and data lengths that are not a whole
            number of frames. By default these are truncated silently.

    Returns:
        A new WavMetadata populated from the header.

    Raises:
        FileNotOpenedError: If ``stream`` is None or closed.
        IoReadError: If the stream ends or fails before the header is complete.
        MalformedHeaderError: If a tag or a derived field does not match.
        NonPcmDataError: If the ``fmt `` sub-chunk is not 16 bytes long.
        PositionQueryError: If the stream cannot report its offset.
    """
    stream = ensure_open(stream)

    _expect_tag(stream, ChunkId.RIFF)
    chunk_size = _read_size(stream, "chunk size")
    _expect_tag(stream, ChunkId.WAVE)
    _expect_tag(stream, ChunkId.FMT)

    fmt_chunk_size = _read_size(stream, "fmt chunk size")
    if fmt_chunk_size != PCM_FMT_CHUNK_SIZE:
        raise NonPcmDataError(
            f"fmt chunk is {fmt_chunk_size} bytes, only {PCM_FMT_CHUNK_SIZE} is supported"
        )

    fmt = unpack_fmt_body(read_exact(stream, FMT_BODY_SIZE, "fmt chunk body"))

    _expect_tag(stream, ChunkId.DATA)
    data_size = _read_size(stream, "data chunk size")

    try:
        data_pos = stream.tell()
    except OSError as err:
        raise PositionQueryError("Unable to query data position") from err

    bytes_per_sample = whole_bytes(fmt.bits_per_sample)
    frame_size = fmt.num_channels * bytes_per_sample
    expected_byte_rate = fmt.sample_rate * frame_size

    if fmt.byte_rate != expected_byte_rate:
        raise MalformedHeaderError(
            f"Byte rate {fmt.byte_rate} does not match expected {expected_byte_rate}"
        )
    if fmt.block_align != frame_size:
        raise MalformedHeaderError(
            f"Block align {fmt.block_align} does not match expected {frame_size}"
        )
    if frame_size <= 0:
        raise MalformedHeaderError(f"Frame size {frame_size} cannot hold any samples")

    if strict:
        _check_strict(fmt.num_channels, fmt.bits_per_sample, data_size, frame_size)

    metadata = WavMetadata(
        audio_format=fmt.audio_format,
        num_channels=fmt.num_channels,
        sample_rate=fmt.sample_rate,
        byte_rate=fmt.byte_rate,
        block_align=fmt.block_align,
        bits_per_sample=fmt.bits_per_sample,
        data_pos=data_pos,
        num_samples=data_size // frame_size,
    )
    logger.debug(
        "Decoded %s header: chunk_size=%d data_size=%d data_pos=%d num_samples=%d",
        metadata.format_name,
        chunk_size,
        data_size,
        data_pos,
        metadata.num_samples,
    )
    return metadata


def _check_strict(num_channels: int, bits_per_sample: int, data_size: int, frame_size: int) -> None:
    """Reject headers that the permissive decode would truncate."""
    if num_channels <= 0:
        raise MalformedHeaderError(f"Invalid channel count {num_channels}")
    if bits_per_sample <= 0 or bits_per_sample % 8:
        raise MalformedHeaderError(f"Bit depth {bits_per_sample} is not a multiple of 8")
    if data_size % frame_size:
        raise MalformedHeaderError(
            f"Data size {data_size} is not a whole number of {frame_size} byte frames"
        )
