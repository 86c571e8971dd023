# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Constants Module

This module contains the type tags and well-known names shared by the PDF
object model and the stream filters. Type tags let callers check an object's
kind with a direct comparison (obj.TYPE == T_XXX) instead of isinstance().
"""

# PdfObject types
T_ARRAY = 0
T_BOOL = 1
T_DICT = 2
T_INT = 3
T_NAME = 4
T_NULL = 5
T_REAL = 6
T_STREAM = 7

# Stream dictionary keys
KEY_FILTER = b'Filter'
KEY_DECODE_PARMS = b'DecodeParms'
KEY_LENGTH = b'Length'

# Filter names understood by the decoder
FILTER_FLATE = b'FlateDecode'
FILTER_ASCII_HEX = b'ASCIIHexDecode'

# DecodeParms keys (Flate predictor parameters)
PARAM_PREDICTOR = b'Predictor'
PARAM_COLUMNS = b'Columns'
PARAM_COLORS = b'Colors'
PARAM_BITS_PER_COMPONENT = b'BitsPerComponent'

# Predictor values
PREDICTOR_NONE = 1
PREDICTOR_TIFF = 2
PREDICTOR_PNG_MIN = 10
PREDICTOR_PNG_MAX = 15

# DecodeParms defaults
DEFAULT_COLORS = 1
DEFAULT_BITS_PER_COMPONENT = 8
