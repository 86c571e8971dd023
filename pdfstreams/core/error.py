# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# error types
UNSUPPORTEDFILTER = 0
UNSUPPORTEDBITSPERCOMPONENT = 1
UNSUPPORTEDPREDICTOR = 2
MISSINGPREDICTORCOLUMNS = 3
INVALIDDECODEPARAMETER = 4
INVALIDROWLENGTH = 5
INVALIDFILTERBYTE = 6
INVALIDHEXCHARACTER = 7
UNTERMINATEDHEXSTREAM = 8
HEXDECODEERROR = 9
DECOMPRESSIONERROR = 10

error_names = [
    "unsupportedfilter",
    "unsupportedbitspercomponent",
    "unsupportedpredictor",
    "missingpredictorcolumns",
    "invaliddecodeparameter",
    "invalidrowlength",
    "invalidfilterbyte",
    "invalidhexcharacter",
    "unterminatedhexstream",
    "hexdecodeerror",
    "decompressionerror",
]


class StreamDecodeError(Exception):
    """Base class for every failure while decoding a stream.

    Decoding is all-or-nothing: when one of these is raised no partial
    output exists. The document model decides whether to skip the stream or
    abort the whole document.
    """
    code: int | None = None

    @property
    def error_name(self) -> str:
        if self.code is None:
            return "streamdecodeerror"
        return error_names[self.code]


class UnsupportedFilter(StreamDecodeError):
    """Filter absent, not a name, or not one of the supported filters."""
    code = UNSUPPORTEDFILTER


class UnsupportedBitsPerComponent(StreamDecodeError):
    code = UNSUPPORTEDBITSPERCOMPONENT


class UnsupportedPredictor(StreamDecodeError):
    code = UNSUPPORTEDPREDICTOR


class MissingPredictorColumns(StreamDecodeError):
    code = MISSINGPREDICTORCOLUMNS


class InvalidDecodeParameter(StreamDecodeError):
    """A DecodeParms entry is present but has the wrong type."""
    code = INVALIDDECODEPARAMETER


class InvalidRowLength(StreamDecodeError):
    """Decoded length is not a whole number of rows (or the row length is unusable)."""
    code = INVALIDROWLENGTH


class InvalidFilterByte(StreamDecodeError):
    """PNG row tag other than None, Sub or Up."""
    code = INVALIDFILTERBYTE


class InvalidHexCharacter(StreamDecodeError):
    code = INVALIDHEXCHARACTER


class UnterminatedHexStream(StreamDecodeError):
    code = UNTERMINATEDHEXSTREAM


class HexDecodeError(StreamDecodeError):
    code = HEXDECODEERROR


class DecompressionError(StreamDecodeError):
    code = DECOMPRESSIONERROR


_error_classes = {
    cls.code: cls for cls in (
        UnsupportedFilter, UnsupportedBitsPerComponent, UnsupportedPredictor,
        MissingPredictorColumns, InvalidDecodeParameter, InvalidRowLength,
        InvalidFilterByte, InvalidHexCharacter, UnterminatedHexStream,
        HexDecodeError, DecompressionError,
    )
}


def e(error_code: int, func_name: str, detail: str) -> StreamDecodeError:
    """Log and build the exception for error_code.

    Callers raise the result so the traceback points at the failing filter:
        raise pdf_error.e(pdf_error.INVALIDROWLENGTH, "FlateDecode", "...")
    """
    message = f"{func_name}: {detail}"
    logger.error("/%s in --%s-- %s", error_names[error_code], func_name, detail)
    return _error_classes[error_code](message)
