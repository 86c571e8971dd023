# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later
from __future__ import annotations

"""
DecodeParms parsing and validation for the FlateDecode filter.

The stream dictionary is read once, up front, into a FlateParameters
container. Every entry's absence or type mismatch is resolved here so the
predictor code never has to look at raw PDF objects.
"""

import logging

from . import types as pdf
from . import error as pdf_error

logger = logging.getLogger(__name__)


class FlateParameters:
    """Container for validated FlateDecode parameters"""

    def __init__(self) -> None:
        self.predictor: int = pdf.PREDICTOR_NONE
        # None when Columns is absent or not an integer
        self.columns: int | None = None
        self.colors: int = pdf.DEFAULT_COLORS
        self.bits_per_component: int = pdf.DEFAULT_BITS_PER_COMPONENT

    @property
    def has_predictor(self) -> bool:
        return self.predictor != pdf.PREDICTOR_NONE

    @property
    def is_tiff(self) -> bool:
        return self.predictor == pdf.PREDICTOR_TIFF

    @property
    def is_png(self) -> bool:
        return pdf.PREDICTOR_PNG_MIN <= self.predictor <= pdf.PREDICTOR_PNG_MAX

    def __repr__(self) -> str:
        return (f"FlateParameters(predictor={self.predictor}, columns={self.columns}, "
                f"colors={self.colors}, bits_per_component={self.bits_per_component})")


class FlateParameterParser:
    """PDF DecodeParms parsing and validation"""

    @staticmethod
    def parse_decode_params(params: pdf.PdfObject | None) -> FlateParameters:
        """Parse the DecodeParms entry of a FlateDecode stream.

        Args:
            params: The DecodeParms object, or None when the stream has none.
                Anything that is not a dictionary is treated as absent.

        Returns:
            FlateParameters with defaults filled in.

        Raises:
            InvalidDecodeParameter: Predictor or BitsPerComponent is present
                but not an integer.
        """
        result = FlateParameters()

        if params is None or params.TYPE != pdf.T_DICT:
            return result

        result.predictor = FlateParameterParser._parse_optional_int(
            params, pdf.PARAM_PREDICTOR, pdf.PREDICTOR_NONE)

        columns = params.get_typed(pdf.PARAM_COLUMNS, pdf.T_INT)
        result.columns = columns.val if columns is not None else None

        colors = params.get_typed(pdf.PARAM_COLORS, pdf.T_INT)
        if colors is not None:
            result.colors = colors.val
        elif pdf.PARAM_COLORS in params:
            logger.warning("Ignoring Colors entry of type %s, using %d",
                           type(params.get(pdf.PARAM_COLORS)).__name__, pdf.DEFAULT_COLORS)

        result.bits_per_component = FlateParameterParser._parse_optional_int(
            params, pdf.PARAM_BITS_PER_COMPONENT, pdf.DEFAULT_BITS_PER_COMPONENT)

        logger.debug("decode params: %s -> %r", params, result)
        return result

    @staticmethod
    def _parse_optional_int(params: pdf.Dict, key: bytes, default: int) -> int:
        """Parse optional integer parameter"""
        if key not in params:
            return default

        param_obj = params.get_typed(key, pdf.T_INT)
        if param_obj is None:
            raise pdf_error.e(pdf_error.INVALIDDECODEPARAMETER, "FlateDecode",
                              f"{key.decode()} must be an integer, got {params.get(key)}")

        return param_obj.val
