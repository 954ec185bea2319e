"""Enum types used by bytewave."""

from enum import Enum, IntEnum


class AudioFormat(Enum):
    """Audio format codes that fit in a 16 byte ``fmt `` sub-chunk."""

    PCM = 1
    """Integer pulse-code modulation."""
    IEEE_FLOAT = 3
    """IEEE-754 floating point samples."""


class ChunkId(Enum):
    """Fixed four character tags of the canonical WAV header."""

    RIFF = b"RIFF"
    WAVE = b"WAVE"
    FMT = b"fmt "
    DATA = b"data"


class ErrorCode(IntEnum):
    """Numeric result codes, also used as CLI exit status."""

    OK = 0
    FILE_NOT_OPENED = 1
    FILE_READ_FAIL = 2
    FILE_WRITE_FAIL = 3
    FILE_POS_FAIL = 4
    MALFORMED_HEADER = 5
    NON_PCM_DATA = 6
    FAILED_ALLOC = 7
