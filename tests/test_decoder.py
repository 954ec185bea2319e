import io

import pytest

from bytewave import (
    ErrorCode,
    FileNotOpenedError,
    IoReadError,
    MalformedHeaderError,
    NonPcmDataError,
    PositionQueryError,
    decode,
)


class _NoTellStream(io.BytesIO):
    def tell(self) -> int:
        raise io.UnsupportedOperation("tell")


def test_decode_stereo_pcm(make_header):
    stream = io.BytesIO(make_header(data_size=16) + bytes(16))

    metadata = decode(stream)

    assert metadata.audio_format == 1
    assert metadata.num_channels == 2
    assert metadata.sample_rate == 44_100
    assert metadata.byte_rate == 176_400
    assert metadata.block_align == 4
    assert metadata.bits_per_sample == 16
    assert metadata.data_pos == 44
    assert metadata.num_samples == 4
    assert stream.tell() == 44


def test_decode_ieee_float(make_header):
    header = make_header(audio_format=3, sample_rate=48_000, bits_per_sample=32, data_size=80)

    metadata = decode(io.BytesIO(header))

    assert metadata.audio_format == 3
    assert metadata.byte_rate == 384_000
    assert metadata.block_align == 8
    assert metadata.num_samples == 10


def test_data_pos_is_absolute(make_header):
    stream = io.BytesIO(b"junk" * 3 + make_header())
    stream.seek(12)

    assert decode(stream).data_pos == 56


@pytest.mark.parametrize("first", [b"RIFX", b"riff", b"RIF ", b"\x00\x00\x00\x00"])
def test_bad_riff_tag(make_header, first):
    with pytest.raises(MalformedHeaderError):
        decode(io.BytesIO(make_header(riff=first)))


def test_bad_riff_tag_wins_over_short_stream():
    with pytest.raises(MalformedHeaderError):
        decode(io.BytesIO(b"RIFX"))


@pytest.mark.parametrize(
    "overrides",
    [{"wave": b"WAVX"}, {"fmt": b"FMT "}, {"fmt": b"fmt\x00"}, {"data": b"DATA"}],
)
def test_bad_inner_tags(make_header, overrides):
    with pytest.raises(MalformedHeaderError):
        decode(io.BytesIO(make_header(**overrides)))


def test_byte_rate_mismatch(make_header):
    with pytest.raises(MalformedHeaderError, match="Byte rate"):
        decode(io.BytesIO(make_header(byte_rate=176_401)))


def test_block_align_mismatch(make_header):
    with pytest.raises(MalformedHeaderError, match="Block align"):
        decode(io.BytesIO(make_header(block_align=2)))


def test_inconsistent_float_header_is_malformed(make_header):
    header = make_header(
        audio_format=1,
        num_channels=2,
        sample_rate=48_000,
        byte_rate=192_000,
        block_align=4,
        bits_per_sample=32,
    )

    with pytest.raises(MalformedHeaderError):
        decode(io.BytesIO(header))


def test_extended_fmt_chunk_stops_before_body(make_header):
    # Only the bytes up to the fmt size field are available
    header = make_header(fmt_size=18)[:20]

    with pytest.raises(NonPcmDataError):
        decode(io.BytesIO(header))


def test_non_multiple_data_size_truncates(make_header):
    metadata = decode(io.BytesIO(make_header(data_size=10)))

    assert metadata.num_samples == 2


def test_non_multiple_bit_depth_truncates(make_header):
    metadata = decode(io.BytesIO(make_header(num_channels=1, bits_per_sample=12)))

    assert metadata.bits_per_sample == 12
    assert metadata.block_align == 1


def test_zero_frame_size_is_malformed(make_header):
    with pytest.raises(MalformedHeaderError, match="Frame size"):
        decode(io.BytesIO(make_header(num_channels=0)))


@pytest.mark.parametrize(
    "overrides",
    [
        {"num_channels": 1, "bits_per_sample": 12},
        {"num_channels": -2, "bits_per_sample": -16},
        {"data_size": 10},
    ],
)
def test_strict_rejects_truncation(make_header, overrides):
    header = make_header(**overrides)
    decode(io.BytesIO(header))

    with pytest.raises(MalformedHeaderError):
        decode(io.BytesIO(header), strict=True)


@pytest.mark.parametrize("length", [0, 3, 8, 19, 30, 39, 43])
def test_short_stream(make_header, length):
    with pytest.raises(IoReadError):
        decode(io.BytesIO(make_header()[:length]))


def test_missing_stream():
    with pytest.raises(FileNotOpenedError):
        decode(None)


def test_closed_stream(make_header):
    stream = io.BytesIO(make_header())
    stream.close()

    with pytest.raises(FileNotOpenedError):
        decode(stream)


def test_position_query_failure(make_header):
    with pytest.raises(PositionQueryError) as exc_info:
        decode(_NoTellStream(make_header()))

    assert isinstance(exc_info.value.__cause__, OSError)


def test_error_codes():
    assert MalformedHeaderError.code is ErrorCode.MALFORMED_HEADER
    assert int(NonPcmDataError.code) == 6
    assert int(FileNotOpenedError.code) == 1


def test_negative_bit_depth_truncates_toward_zero(make_header):
    header = make_header(
        num_channels=-1,
        sample_rate=8_000,
        byte_rate=8_000,
        block_align=1,
        bits_per_sample=-12,
        data_size=5,
    )

    metadata = decode(io.BytesIO(header))

    assert metadata.bytes_per_sample == -1
    assert metadata.frame_size == 1
    assert metadata.num_samples == 5
