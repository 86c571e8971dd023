# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Base Classes Module

This module contains the base class shared by every PDF object. Objects are
produced by an external parser; the decoder only reads them.
"""

from typing import Any


class PdfObject(object):
    """
    Base class for all PDF objects.

    Every concrete type sets TYPE to one of the T_* constants so lookups can
    verify an object's kind before using its value.
    """
    TYPE = None  # Base class - no specific type

    def __init__(self, val: Any) -> None:
        self.val = val

    def __repr__(self) -> str:
        return self.__str__()
