"""The WAV metadata record.

This module contains the value type shared by the decoder and the encoder. A
record is plain data: it holds no stream handle, and the codec never keeps a
reference to it after a call returns.
"""

from __future__ import annotations

from dataclasses import dataclass

from mashumaro.mixins.orjson import DataClassORJSONMixin

from .types import AudioFormat


def whole_bytes(bits: int) -> int:
    """Return the whole bytes in ``bits``, truncating toward zero."""
    return -(-bits // 8) if bits < 0 else bits // 8


@dataclass
class WavMetadata(DataClassORJSONMixin):
    """Header fields of a canonical PCM/IEEE-float WAV file."""

    audio_format: int = 0
    """1 for integer PCM, 3 for IEEE-754 float."""
    num_channels: int = 0
    """Number of interleaved channels."""
    sample_rate: int = 0
    """Samples per second per channel."""
    byte_rate: int = 0
    """Bytes per second; recomputed by the encoder, validated by the decoder."""
    block_align: int = 0
    """Bytes per frame; recomputed by the encoder, validated by the decoder."""
    bits_per_sample: int = 0
    """Bit depth of a single sample."""
    data_pos: int = 0
    """Absolute offset of the first sample byte. Set by decode, ignored by encode."""
    num_samples: int = 0
    """Number of frames (one value per channel each)."""

    @property
    def bytes_per_sample(self) -> int:
        """Return the byte width of one sample, truncating partial bytes."""
        return whole_bytes(self.bits_per_sample)

    @property
    def frame_size(self) -> int:
        """Return the block align implied by channels and bit depth."""
        return self.num_channels * self.bytes_per_sample

    @property
    def expected_byte_rate(self) -> int:
        """Return the byte rate implied by rate, channels and bit depth."""
        return self.sample_rate * self.frame_size

    @property
    def data_size(self) -> int:
        """Return the sample data length in bytes for ``num_samples`` frames."""
        return self.num_samples * self.frame_size

    @property
    def duration(self) -> float:
        """Return the playback length in seconds."""
        if self.sample_rate <= 0:
            return 0.0
        return self.num_samples / self.sample_rate

    @property
    def format_name(self) -> str:
        """Return a readable name for ``audio_format``."""
        try:
            return AudioFormat(self.audio_format).name
        except ValueError:
            return f"UNKNOWN({self.audio_format})"
