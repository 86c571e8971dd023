# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Composite Name Module

Name objects represent PDF names (/FlateDecode, /Columns, ...). They compare
equal to other Names and to raw bytes holding the same characters, which lets
dictionary lookups use either form.
"""

from typing import Union

from ..base import PdfObject
from ..constants import T_NAME


class Name(PdfObject):
    TYPE = T_NAME

    def __init__(self, name: Union[bytes, bytearray, str]) -> None:
        if isinstance(name, str):
            name = name.encode('latin-1')
        val = bytes(name)
        if val.startswith(b'/'):
            val = val[1:]
        super().__init__(val)
        # Cache hash since Name.val is immutable
        self._hash = hash(val)

    def __hash__(self):
        return self._hash

    def __eq__(self, other) -> bool:
        if getattr(other, 'TYPE', None) == T_NAME:
            return self.val == other.val
        if isinstance(other, bytes):
            return self.val == other
        return False

    def __str__(self) -> str:
        return f"/{self.val.decode('latin-1')}"
