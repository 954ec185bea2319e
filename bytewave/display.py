"""Tabular rendering of decoded WAV headers.

Each header field becomes a HeaderRow carrying its absolute offset, its width on
disk and a printable value. Fields that are derived rather than stored (sample
count, data position) have no offset or width and leave those columns blank.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Literal, TextIO

from mashumaro.config import BaseConfig
from mashumaro.mixins.orjson import DataClassORJSONMixin
from mashumaro.types import Discriminator

from bytewave.models import ChunkId, WavMetadata

TABLE_HEADER = f"{'Offset':<8} | {'Bytes':<8} | {'Identifier':<32} | {'Value':<8}"
TABLE_RULE = f"{'-' * 8} | {'-' * 8} | {'-' * 32} | {'-' * 8}"


@dataclass
class PrintableValue(DataClassORJSONMixin):
    """Base class for values shown in the header table."""

    class Config(BaseConfig):
        """Config for parsing printable values."""

        discriminator = Discriminator(field="type", include_subtypes=True)

    def render(self) -> str:
        """Return the value as it appears in the table."""
        raise NotImplementedError


@dataclass
class TextValue(PrintableValue):
    """A tag, shown quoted."""

    text: str
    type: Literal["text"] = "text"

    def render(self) -> str:
        """Return the quoted text."""
        return f'"{self.text:<4}"'


@dataclass
class NumberValue(PrintableValue):
    """An integer field."""

    number: int
    type: Literal["number"] = "number"

    def render(self) -> str:
        """Return the number, padded to the column width."""
        return f"{self.number:<8}"


@dataclass(slots=True)
class HeaderRow:
    """One line of the header table."""

    identifier: str
    value: PrintableValue
    offset: int | None = None
    size: int | None = None

    def render(self) -> str:
        """Return the row formatted to the table columns."""
        offset = "" if self.offset is None else str(self.offset)
        size = "" if self.size is None else str(self.size)
        return f"{offset:<8} | {size:<8} | {self.identifier:<32} | {self.value.render()}"


def _tag(tag: ChunkId) -> TextValue:
    return TextValue(tag.value.decode("ascii"))


def header_rows(metadata: WavMetadata) -> list[HeaderRow]:
    """Return the table rows for ``metadata`` in on-disk order."""
    return [
        HeaderRow("Chunk ID", _tag(ChunkId.RIFF), 0, 4),
        HeaderRow("Format", _tag(ChunkId.WAVE), 8, 4),
        HeaderRow("Sub Chunk 1 ID", _tag(ChunkId.FMT), 12, 4),
        HeaderRow("Audio Format (1 = Int, 3 = F32)", NumberValue(metadata.audio_format), 20, 2),
        HeaderRow("Number of Channels", NumberValue(metadata.num_channels), 22, 2),
        HeaderRow("Sample Rate (Hz)", NumberValue(metadata.sample_rate), 24, 4),
        HeaderRow("Byte Rate (B/s)", NumberValue(metadata.byte_rate), 28, 4),
        HeaderRow("Block Align (B)", NumberValue(metadata.block_align), 32, 2),
        HeaderRow("Bits Per Sample (b)", NumberValue(metadata.bits_per_sample), 34, 2),
        HeaderRow("Sub Chunk 2 ID", _tag(ChunkId.DATA), 36, 4),
        HeaderRow("Number of Samples", NumberValue(metadata.num_samples)),
        HeaderRow("Data Chunk Position", NumberValue(metadata.data_pos)),
    ]


def format_table(metadata: WavMetadata) -> str:
    """Render ``metadata`` as a fixed-width table."""
    lines = [TABLE_HEADER, TABLE_RULE]
    lines.extend(row.render() for row in header_rows(metadata))
    return "\n".join(lines)


def print_metadata(metadata: WavMetadata, file: TextIO | None = None) -> None:
    """Print the header table to ``file`` (stdout by default)."""
    print(format_table(metadata), file=file or sys.stdout)  # noqa: T201
