"""Exceptions raised by the bytewave codec."""

from __future__ import annotations

from typing import ClassVar

from bytewave.models.types import ErrorCode

__all__ = [
    "AllocationError",
    "FileNotOpenedError",
    "IoReadError",
    "IoWriteError",
    "MalformedHeaderError",
    "NonPcmDataError",
    "PositionQueryError",
    "WavError",
]


class WavError(Exception):
    """Base class for errors reading or writing WAV headers."""

    code: ClassVar[ErrorCode]


class FileNotOpenedError(WavError):
    """The stream is missing, closed or could not be opened."""

    code = ErrorCode.FILE_NOT_OPENED


class IoReadError(WavError):
    """The stream returned fewer bytes than requested."""

    code = ErrorCode.FILE_READ_FAIL


class IoWriteError(WavError):
    """The stream accepted fewer bytes than were written."""

    code = ErrorCode.FILE_WRITE_FAIL


class PositionQueryError(WavError):
    """The stream could not report or move to an offset."""

    code = ErrorCode.FILE_POS_FAIL


class MalformedHeaderError(WavError):
    """A tag did not match or a derived field is inconsistent."""

    code = ErrorCode.MALFORMED_HEADER


class NonPcmDataError(WavError):
    """The header describes a format outside the 16 byte ``fmt `` layout."""

    code = ErrorCode.NON_PCM_DATA


class AllocationError(WavError):
    """A buffer for sample data could not be allocated."""

    code = ErrorCode.FAILED_ALLOC
