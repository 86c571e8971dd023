# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

# Lossless Compression Filters
#
# Implements the FlateDecode filter: zlib/deflate decompression followed by
# optional TIFF or PNG predictor reversal.

import logging
import zlib

from ..core import types as pdf
from ..core import error as pdf_error
from ..core.decode_params import FlateParameterParser
from .filter import FilterBase
from .predictor import reverse_predictor

logger = logging.getLogger(__name__)


class FlateDecodeFilter(FilterBase):
    """FlateDecode filter - zlib/deflate decompression with predictor support"""

    name = pdf.FILTER_FLATE

    def __init__(self, data: bytes | bytearray, params: pdf.PdfObject | None = None) -> None:
        super().__init__(data, params)
        # DecodeParms is validated once, before any data is touched
        self.decode_params = FlateParameterParser.parse_decode_params(params)

    def decode(self) -> bytes:
        """Decompress the stream, then undo any row prediction"""
        logger.debug("FlateDecode: %d compressed bytes, %r", len(self.data), self.decode_params)
        try:
            decompressed = zlib.decompress(self.data)
        except zlib.error as exc:
            raise pdf_error.e(pdf_error.DECOMPRESSIONERROR, "FlateDecode",
                              f"Flate decompression error: {exc}") from exc

        params = self.decode_params
        if not params.has_predictor:
            return decompressed

        # Only 8 bits per component is supported for prediction
        if params.bits_per_component != pdf.DEFAULT_BITS_PER_COMPONENT:
            raise pdf_error.e(pdf_error.UNSUPPORTEDBITSPERCOMPONENT, "FlateDecode",
                              f"Only 8 bits per component supported, got {params.bits_per_component}")

        return reverse_predictor(decompressed, params)
