# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

# Predictor Reversal
#
# Undoes the TIFF (Predictor 2) and PNG (Predictors 10-15) row prediction
# applied on top of Flate-compressed image data. Only 8 bits per component
# are handled; the caller rejects anything else before getting here.

import logging

from ..core import types as pdf
from ..core import error as pdf_error
from ..core.decode_params import FlateParameters

logger = logging.getLogger(__name__)

# PNG row filter types
PNG_FILTER_NONE = 0
PNG_FILTER_SUB = 1
PNG_FILTER_UP = 2


def reverse_predictor(data: bytes | bytearray, params: FlateParameters) -> bytes:
    """Reverse the row prediction described by params.

    data is the already-decompressed stream content and is not modified.
    Returns a new buffer: same length for TIFF, tag bytes stripped for PNG.
    """
    if params.is_tiff:
        return reverse_tiff(data, params.columns, params.colors)
    if params.is_png:
        return reverse_png(data, params.columns)

    raise pdf_error.e(pdf_error.UNSUPPORTEDPREDICTOR, "FlateDecode",
                      f"Unsupported predictor ({params.predictor})")


def _split_rows(data: bytearray, row_length: int, func_name: str) -> int:
    """Return the number of rows in data, checking the partition is exact."""
    if row_length <= 0:
        raise pdf_error.e(pdf_error.INVALIDROWLENGTH, func_name,
                          f"Invalid row length ({row_length})")
    if len(data) % row_length != 0:
        raise pdf_error.e(pdf_error.INVALIDROWLENGTH, func_name,
                          f"Invalid row length ({len(data)}/{row_length})")
    return len(data) // row_length


def _decode_tiff_row(row: bytearray, colors: int) -> None:
    """Horizontal undifferencing: each sample adds the same-channel sample to its left."""
    for i in range(colors, len(row)):
        row[i] = (row[i] + row[i - colors]) & 0xFF


def reverse_tiff(data: bytes | bytearray, columns: int | None, colors: int = pdf.DEFAULT_COLORS) -> bytes:
    """Reverse TIFF Predictor 2 over 8-bit samples interleaved by colors."""
    logger.debug("TIFF predictor: columns=%s colors=%d", columns, colors)
    if columns is None:
        raise pdf_error.e(pdf_error.MISSINGPREDICTORCOLUMNS, "FlateDecode",
                          "Predictor Columns missing")

    row_length = columns * colors
    if colors <= 0 or row_length % colors != 0:
        raise pdf_error.e(pdf_error.INVALIDROWLENGTH, "FlateDecode",
                          f"Invalid row length ({row_length}) for colors {colors}")

    buf = bytearray(data)
    rows = _split_rows(buf, row_length, "FlateDecode")

    output = bytearray()
    for i in range(rows):
        row = buf[row_length * i:row_length * (i + 1)]
        _decode_tiff_row(row, colors)
        output.extend(row)

    logger.debug("TIFF predictor: %d rows, %d bytes", rows, len(output))
    return bytes(output)


def _decode_png_row(row: bytearray, prev_row: bytearray) -> None:
    """Reconstruct one PNG-predicted row in place. row[0] is the filter type.

    prev_row is the previous row after reconstruction (all zeros for the
    first row). Sub uses the byte to the left, so the first data byte has a
    zero predecessor and stays as it is.
    """
    filter_type = row[0]

    if filter_type == PNG_FILTER_NONE:
        pass
    elif filter_type == PNG_FILTER_SUB:
        for i in range(2, len(row)):
            row[i] = (row[i] + row[i - 1]) & 0xFF
    elif filter_type == PNG_FILTER_UP:
        for i in range(1, len(row)):
            row[i] = (row[i] + prev_row[i]) & 0xFF
    else:
        # Average (3) and Paeth (4) are not supported
        raise pdf_error.e(pdf_error.INVALIDFILTERBYTE, "FlateDecode",
                          f"Invalid filter byte ({filter_type})")


def reverse_png(data: bytes | bytearray, columns: int | None) -> bytes:
    """Reverse PNG prediction; each row is a filter-type byte followed by columns bytes.

    Rows depend on the reconstructed row above, so they are processed strictly
    in order.
    """
    if columns is None:
        raise pdf_error.e(pdf_error.MISSINGPREDICTORCOLUMNS, "FlateDecode",
                          "Predictor Columns missing")

    row_length = columns + 1  # 1 byte to specify the filter type per row
    buf = bytearray(data)
    rows = _split_rows(buf, row_length, "FlateDecode")
    logger.debug("PNG predictor: %d / %d = %d rows", len(buf), row_length, rows)

    prev_row = bytearray(row_length)
    output = bytearray()
    for i in range(rows):
        row = buf[row_length * i:row_length * (i + 1)]
        _decode_png_row(row, prev_row)
        prev_row = row
        output.extend(row[1:])

    return bytes(output)
