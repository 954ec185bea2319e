"""Sample data transfer and path based helpers."""

from __future__ import annotations

import logging
from os import PathLike
from typing import BinaryIO

from bytewave.codec.decoder import decode, ensure_open
from bytewave.codec.encoder import build_header, write_all
from bytewave.errors import AllocationError, FileNotOpenedError, IoReadError, PositionQueryError
from bytewave.models import WavMetadata

logger = logging.getLogger(__name__)

StrPath = str | PathLike[str]


def read_data(
    stream: BinaryIO | None,
    metadata: WavMetadata,
    num_frames: int | None = None,
    *,
    start_frame: int = 0,
) -> bytearray:
    """
    Read raw interleaved sample bytes that follow a decoded header.

    Args:
        stream: Seekable stream the header was decoded from.
        metadata: Record returned by decode for this stream.
        num_frames: Frames to read; defaults to all frames after ``start_frame``.
        start_frame: First frame to read, relative to ``data_pos``.

    Raises:
        PositionQueryError: If the stream cannot seek to the data.
        AllocationError: If the read buffer cannot be allocated.
        IoReadError: If fewer bytes than requested are available.
    """
    stream = ensure_open(stream)
    if start_frame < 0:
        raise ValueError("start_frame must not be negative")
    if num_frames is None:
        num_frames = max(metadata.num_samples - start_frame, 0)
    if num_frames < 0:
        raise ValueError("num_frames must not be negative")

    size = num_frames * metadata.block_align
    offset = metadata.data_pos + start_frame * metadata.block_align
    try:
        stream.seek(offset)
    except OSError as err:
        raise PositionQueryError(f"Unable to seek to sample data at {offset}") from err

    try:
        buffer = bytearray(size)
    except MemoryError as err:
        raise AllocationError(f"Unable to allocate {size} bytes for sample data") from err

    try:
        got = stream.readinto(buffer)  # type: ignore[attr-defined]
    except OSError as err:
        raise IoReadError("Failed to read sample data") from err
    got = got or 0
    if got != size:
        raise IoReadError(f"Expected {size} bytes of sample data, got {got}")
    return buffer


def write_data(stream: BinaryIO | None, metadata: WavMetadata, data: bytes) -> None:
    """
    Append raw interleaved sample bytes at the stream's current position.

    Raises:
        ValueError: If ``data`` is not a whole number of frames.
        IoWriteError: If the stream fails or accepts fewer bytes.
    """
    stream = ensure_open(stream)
    _check_aligned(metadata, data)
    write_all(stream, data, "sample data")


def _check_aligned(metadata: WavMetadata, data: bytes) -> None:
    frame_size = metadata.frame_size
    if frame_size <= 0 or len(data) % frame_size:
        raise ValueError(f"Data must be aligned to whole {frame_size} byte frames")


def open_wav_read(path: StrPath, *, strict: bool = False) -> WavMetadata:
    """Open ``path``, decode its header and close it again."""
    try:
        wav_file = open(path, "rb")  # noqa: SIM115
    except OSError as err:
        raise FileNotOpenedError(f"Unable to open {path}") from err
    with wav_file:
        metadata = decode(wav_file, strict=strict)
    logger.info("Read header of %s (%d frames)", path, metadata.num_samples)
    return metadata


def open_wav_write(path: StrPath, metadata: WavMetadata, data: bytes | None = None) -> None:
    """
    Create or truncate ``path`` and write a header, then ``data`` if given.

    ``data`` must hold exactly ``num_samples`` frames.

    The header is built and ``data`` checked before the file is opened, so a
    rejected record leaves any existing file untouched.
    """
    header = build_header(metadata)
    if data is not None:
        _check_aligned(metadata, data)
        if len(data) != metadata.data_size:
            raise ValueError(
                f"Header declares {metadata.data_size} bytes of data, got {len(data)}"
            )
    try:
        wav_file = open(path, "wb")  # noqa: SIM115
    except OSError as err:
        raise FileNotOpenedError(f"Unable to open {path}") from err
    with wav_file:
        write_all(wav_file, header, "header")
        if data is not None:
            write_all(wav_file, data, "sample data")
    logger.info(
        "Wrote %s header to %s (%d frames)", metadata.format_name, path, metadata.num_samples
    )
