# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

# ASCII Decoding Filters
#
# Implements the ASCIIHexDecode filter.

import logging

from ..core import types as pdf
from ..core import error as pdf_error
from .filter import FilterBase

logger = logging.getLogger(__name__)

# PDF white-space characters: NUL, TAB, LF, FF, CR, SPACE
WHITESPACE = frozenset(b'\x00\t\n\x0c\r ')
HEX_DIGITS = frozenset(b'0123456789abcdefABCDEF')
EOD_MARKER = ord('>')


class ASCIIHexDecodeFilter(FilterBase):
    """ASCII Hexadecimal decode filter - converts hex digits to bytes"""

    name = pdf.FILTER_ASCII_HEX

    def decode(self) -> bytes:
        """Decode hex digits up to the '>' end-of-data marker.

        White space is skipped and anything after the marker is ignored. An
        odd number of digits behaves as if a final 0 followed.
        """
        hex_buffer = bytearray()
        for byte_val in self.data:
            if byte_val == EOD_MARKER:
                break
            if byte_val in WHITESPACE:
                continue
            if byte_val not in HEX_DIGITS:
                raise pdf_error.e(pdf_error.INVALIDHEXCHARACTER, "ASCIIHexDecode",
                                  f"Invalid ascii hex character ({chr(byte_val)!r})")
            hex_buffer.append(byte_val)
        else:
            raise pdf_error.e(pdf_error.UNTERMINATEDHEXSTREAM, "ASCIIHexDecode",
                              f"Unexpected end of data after {len(hex_buffer)} hex digits, no '>' found")

        if len(hex_buffer) % 2 == 1:
            hex_buffer.append(ord('0'))
        logger.debug("ASCIIHexDecode: %d hex digits", len(hex_buffer))

        try:
            return bytes.fromhex(hex_buffer.decode('ascii'))
        except (ValueError, UnicodeDecodeError) as exc:
            raise pdf_error.e(pdf_error.HEXDECODEERROR, "ASCIIHexDecode", str(exc)) from exc
