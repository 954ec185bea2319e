"""Command-line interface for inspecting and writing WAV headers."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from bytewave.codec import build_header
from bytewave.data import open_wav_read, open_wav_write
from bytewave.display import print_metadata
from bytewave.errors import AllocationError, WavError
from bytewave.models import AudioFormat, ErrorCode, WavMetadata

logger = logging.getLogger(__name__)

# Exit status for rejected sample data, outside the ErrorCode range
INVALID_DATA_EXIT = 64


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for bytewave."""
    parser = argparse.ArgumentParser(description="Inspect and write canonical WAV headers")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level to use",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    info = subparsers.add_parser("info", help="Print the header of a WAV file")
    info.add_argument("path", help="WAV file to read")
    info.add_argument("--json", action="store_true", help="Print the header as JSON")
    info.add_argument(
        "--strict",
        action="store_true",
        help="Reject bit depths and data sizes that would otherwise be truncated",
    )

    write = subparsers.add_parser("write", help="Write a WAV header")
    write.add_argument("path", help="WAV file to create or overwrite")
    write.add_argument(
        "--audio-format",
        type=int,
        default=AudioFormat.PCM.value,
        help="1 for integer PCM, 3 for IEEE float",
    )
    write.add_argument("--channels", type=int, default=2, help="Number of channels")
    write.add_argument("--sample-rate", type=int, default=44_100, help="Sample rate in Hz")
    write.add_argument("--bits", type=int, default=16, help="Bits per sample")
    write.add_argument("--samples", type=int, default=0, help="Number of frames")
    write.add_argument(
        "--silence",
        action="store_true",
        help="Also write the frames as zeroed sample data",
    )
    return parser.parse_args(argv)


def _run_info(args: argparse.Namespace) -> None:
    metadata = open_wav_read(args.path, strict=args.strict)
    if args.json:
        _print_event(metadata.to_json())
    else:
        print_metadata(metadata)


def _run_write(args: argparse.Namespace) -> None:
    metadata = WavMetadata(
        audio_format=args.audio_format,
        num_channels=args.channels,
        sample_rate=args.sample_rate,
        bits_per_sample=args.bits,
        num_samples=args.samples,
    )
    # Validates the record before any sample buffer is allocated
    build_header(metadata)
    data = None
    if args.silence:
        try:
            data = bytes(metadata.data_size)
        except MemoryError as err:
            raise AllocationError(
                f"Unable to allocate {metadata.data_size} bytes of silence"
            ) from err
    open_wav_write(args.path, metadata, data)
    _print_event(f"Wrote {args.path}")


def main_with_args(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit status."""
    args = parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        if args.command == "info":
            _run_info(args)
        else:
            _run_write(args)
    except WavError as err:
        logger.error("%s failed: %s", args.command, err)  # noqa: TRY400
        _print_event(f"{args.command} failed with error code {int(err.code)}: {err}")
        return int(err.code)
    except ValueError as err:
        logger.error("%s failed: %s", args.command, err)  # noqa: TRY400
        _print_event(f"{args.command} failed: {err}")
        return INVALID_DATA_EXIT
    return int(ErrorCode.OK)


def _print_event(message: str) -> None:
    print(message, flush=True)  # noqa: T201


def main() -> int:
    """Run the bytewave CLI."""
    return main_with_args(sys.argv[1:])


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
