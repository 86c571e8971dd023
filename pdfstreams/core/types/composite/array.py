# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Composite Array Module

A PDF array is an ordered sequence of PDF objects. It only shows up here as
a value that is not the type a lookup expects (e.g. a Filter array).
"""

from ..base import PdfObject
from ..constants import T_ARRAY


class Array(PdfObject):
    TYPE = T_ARRAY

    def __init__(self, items: list | None = None) -> None:
        super().__init__(list(items) if items else [])

    def __len__(self) -> int:
        return len(self.val)

    def __iter__(self):
        return iter(self.val)

    def __getitem__(self, index: int) -> PdfObject:
        return self.val[index]

    def __eq__(self, other) -> bool:
        if getattr(other, 'TYPE', None) != T_ARRAY:
            return False
        return self.val == other.val

    __hash__ = None

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self.val) + "]"
