import random
import zlib

import pytest

from pdfstreams.core import error as pdf_error
from pdfstreams.core import types as pdf
from pdfstreams.filters.filter import decode_stream
from pdfstreams.filters.filter_compression import FlateDecodeFilter

from predictors import flate, png_encode, tiff_encode


def flate_stream(raw, decode_parms=None):
    stream_dict = {"Filter": "/FlateDecode"}
    if decode_parms is not None:
        stream_dict["DecodeParms"] = decode_parms
    return pdf.Stream(stream_dict, raw)


@pytest.mark.parametrize("data", [
    b"",
    b"x",
    b"BT /F1 12 Tf 72 712 Td (Hello) Tj ET",
    bytes(range(256)) * 4,
    bytes(random.Random(1).randrange(256) for _ in range(5000)),
])
def test_round_trip_without_predictor(data):
    assert decode_stream(flate_stream(flate(data))) == data


def test_predictor_one_returns_data_unchanged():
    data = bytes([1, 2, 3, 4, 5])
    stream = flate_stream(flate(data), {"Predictor": 1, "Columns": 2})
    assert decode_stream(stream) == data


def test_compression_levels():
    data = b"abc" * 100
    for level in (0, 1, 9):
        assert FlateDecodeFilter(zlib.compress(data, level)).decode() == data


@pytest.mark.parametrize("raw", [b"", b"not compressed at all", zlib.compress(b"abcdef" * 50)[:-6]])
def test_decompression_failure(raw):
    with pytest.raises(pdf_error.DecompressionError) as excinfo:
        decode_stream(flate_stream(raw))
    assert isinstance(excinfo.value.__cause__, zlib.error)


def test_tiff_predictor():
    rng = random.Random(11)
    original = bytes(rng.randrange(256) for _ in range(5 * 3 * 4))
    stream = flate_stream(flate(tiff_encode(original, 5, 3)),
                          {"Predictor": 2, "Columns": 5, "Colors": 3})
    assert decode_stream(stream) == original


def test_tiff_predictor_colors_default_to_one():
    original = bytes([10, 20, 30, 40, 50, 60])
    stream = flate_stream(flate(tiff_encode(original, 3)), {"Predictor": 2, "Columns": 3})
    assert decode_stream(stream) == original


def test_tiff_row_length_mismatch_is_not_truncated():
    stream = flate_stream(flate(bytes(5)), {"Predictor": 2, "Columns": 4, "Colors": 1})
    with pytest.raises(pdf_error.InvalidRowLength):
        decode_stream(stream)


def test_png_predictor_strips_row_tags():
    rng = random.Random(5)
    columns = 5
    tags = [2, 2, 1, 0, 2, 1]
    original = bytes(rng.randrange(256) for _ in range(columns * len(tags)))
    stream = flate_stream(flate(png_encode(original, columns, tags)),
                          {"Predictor": 12, "Columns": columns})
    decoded = decode_stream(stream)
    assert decoded == original
    assert len(decoded) == columns * len(tags)


def test_png_predictor_rejects_paeth_rows():
    stream = flate_stream(flate(bytes([4, 1, 2])), {"Predictor": 15, "Columns": 2})
    with pytest.raises(pdf_error.InvalidFilterByte):
        decode_stream(stream)


@pytest.mark.parametrize("predictor", [2, 12])
def test_predictor_without_columns(predictor):
    stream = flate_stream(flate(bytes(6)), {"Predictor": predictor})
    with pytest.raises(pdf_error.MissingPredictorColumns):
        decode_stream(stream)


@pytest.mark.parametrize("predictor", [2, 10, 12, 15])
def test_bits_per_component_other_than_eight(predictor):
    # A Paeth row would fail if reversal were attempted
    stream = flate_stream(flate(bytes([4, 1, 2, 3, 4])),
                          {"Predictor": predictor, "Columns": 4, "BitsPerComponent": 4})
    with pytest.raises(pdf_error.UnsupportedBitsPerComponent) as excinfo:
        decode_stream(stream)
    assert "4" in str(excinfo.value)


def test_bits_per_component_ignored_without_predictor():
    data = b"\x12\x34"
    stream = flate_stream(flate(data), {"BitsPerComponent": 4})
    assert decode_stream(stream) == data


def test_explicit_eight_bits_per_component():
    stream = flate_stream(flate(bytes([0, 1, 2])), {"Predictor": 12, "Columns": 2,
                                                   "BitsPerComponent": 8})
    assert decode_stream(stream) == bytes([1, 2])


def test_unsupported_predictor_value():
    stream = flate_stream(flate(bytes(4)), {"Predictor": 5, "Columns": 2})
    with pytest.raises(pdf_error.UnsupportedPredictor):
        decode_stream(stream)


def test_decode_parms_of_wrong_type_is_ignored():
    data = bytes([2, 1, 1])
    stream = pdf.Stream(pdf.Dict({"Filter": pdf.Name("FlateDecode"),
                                  "DecodeParms": pdf.Int(12)}), flate(data))
    assert decode_stream(stream) == data


def test_invalid_predictor_type_fails_before_decompression():
    stream = flate_stream(b"garbage", {"Predictor": 12.5})
    with pytest.raises(pdf_error.InvalidDecodeParameter):
        decode_stream(stream)


def test_raw_stream_bytes_are_not_modified():
    encoded = tiff_encode(bytes([1, 2, 3, 4]), 4)
    raw = flate(encoded)
    stream = flate_stream(raw, {"Predictor": 2, "Columns": 4})
    decode_stream(stream)
    assert stream.raw_data == raw
