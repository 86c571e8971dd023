# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Primitive Classes Module

This module contains the atomic PDF types: booleans, null, integers and
reals. These types are immutable and have plain value semantics.
"""

from .base import PdfObject
from .constants import T_BOOL, T_NULL, T_INT, T_REAL


class Bool(PdfObject):
    """PDF boolean type - represents true/false values."""
    TYPE = T_BOOL

    def __init__(self, val: bool) -> None:
        self.val = val

    def __eq__(self, other) -> bool:
        if not isinstance(other, Bool):
            return False
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        return str(self.val).lower()


class Null(PdfObject):
    """PDF null type."""
    TYPE = T_NULL

    def __init__(self, val: None = None) -> None:
        self.val = None

    def __eq__(self, other) -> bool:
        return isinstance(other, Null)

    def __hash__(self):
        return hash(None)

    def __str__(self) -> str:
        return "null"


class Int(PdfObject):
    """PDF integer type - represents whole number values."""
    TYPE = T_INT

    def __init__(self, val: int) -> None:
        self.val = val

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Int, Real)):
            return False
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        return str(self.val)


class Real(PdfObject):
    """PDF real (floating-point) type - represents decimal number values."""
    TYPE = T_REAL

    def __init__(self, val: float) -> None:
        self.val = val

    def __eq__(self, other) -> bool:
        if not isinstance(other, (Int, Real)):
            return False
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __str__(self) -> str:
        # Round to 6 decimal places to avoid floating-point noise
        formatted = f"{round(self.val, 6):.6f}".rstrip('0')
        if formatted.endswith('.'):
            formatted += '0'
        return formatted
