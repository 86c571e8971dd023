# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

# PDF Stream Filter Dispatch
#
# Reads the Filter entry of a stream dictionary, picks the matching decoder
# and runs it over the stream's raw bytes. Supports FlateDecode (with TIFF
# and PNG predictors) and ASCIIHexDecode.

import enum
import logging

from ..core import types as pdf
from ..core import error as pdf_error

logger = logging.getLogger(__name__)


class FilterKind(enum.Enum):
    """The closed set of filters a stream can declare"""
    FLATE = pdf.FILTER_FLATE
    ASCII_HEX = pdf.FILTER_ASCII_HEX
    UNSUPPORTED = None

    @classmethod
    def from_name(cls, name_obj: pdf.PdfObject | None) -> FilterKind:
        """Map a Filter entry to its kind; anything but a known Name is UNSUPPORTED."""
        if name_obj is None or name_obj.TYPE != pdf.T_NAME:
            return cls.UNSUPPORTED
        for kind in (cls.FLATE, cls.ASCII_HEX):
            if name_obj.val == kind.value:
                return kind
        return cls.UNSUPPORTED


# Filter Implementation Base Class

class FilterBase:
    """Abstract base class for stream decode filters.

    A filter borrows the raw stream bytes read-only and returns a freshly
    allocated buffer from decode().
    """

    name = b''

    def __init__(self, data: bytes | bytearray, params: pdf.PdfObject | None = None) -> None:
        self.data = data
        self.params = params

    def decode(self) -> bytes:
        """Decode the whole input and return the result"""
        raise NotImplementedError("Subclasses must implement decode")


def create_filter(kind: FilterKind, data: bytes | bytearray, params: pdf.PdfObject | None) -> FilterBase | None:
    """Factory function to create specific filter implementations"""
    # Deferred imports to avoid circular dependency (leaf modules import FilterBase
    # from this module)
    from .filter_ascii import ASCIIHexDecodeFilter
    from .filter_compression import FlateDecodeFilter

    if kind is FilterKind.FLATE:
        return FlateDecodeFilter(data, params)
    elif kind is FilterKind.ASCII_HEX:
        return ASCIIHexDecodeFilter(data, params)
    else:
        return None  # Return None for unknown filters


def decode_stream(stream: pdf.Stream) -> bytes:
    """
    Decode the raw bytes of stream according to its Filter entry.

    The stream dictionary must carry a Filter name; DecodeParms is optional
    and only consulted by FlateDecode.

    Raises:
        UnsupportedFilter: Filter is missing, not a name, or not supported.
        StreamDecodeError: Any failure reported by the selected filter.
    """
    filter_obj = stream.dict.get(pdf.KEY_FILTER)
    kind = FilterKind.from_name(filter_obj)
    logger.debug("Decode stream: filter %s -> %s", filter_obj, kind.name)

    params = stream.dict.get(pdf.KEY_DECODE_PARMS)
    filter_impl = create_filter(kind, stream.raw_data, params)
    if filter_impl is None:
        raise pdf_error.e(pdf_error.UNSUPPORTEDFILTER, "decode",
                          f"Unsupported encoding method ({filter_obj})")

    return filter_impl.decode()
