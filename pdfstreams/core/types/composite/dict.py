# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Composite Dict Module

This module contains the PDF Dictionary type. Keys are stored as raw name
bytes (b'Filter', b'DecodeParms', ...) and values are PdfObjects.

Lookups come in two flavours: get() returns whatever is stored, and
get_typed() only returns the value when its TYPE matches, reporting a missing
key and a type mismatch the same way (None) so callers have to check.
"""

from typing import Any

from ..base import PdfObject
from ..constants import T_DICT
from ..primitive import Bool, Int, Real, Null

# Forward references - resolved by composite package __init__.py
Name = None
Array = None


def _key_bytes(key) -> bytes:
    """Normalise a lookup key (bytes, str or Name) to raw name bytes."""
    if isinstance(key, str):
        key = key.encode('latin-1')
    elif not isinstance(key, (bytes, bytearray)):
        key = key.val
    key = bytes(key)
    return key[1:] if key.startswith(b'/') else key


def _from_python(value: Any) -> PdfObject:
    """Convert a plain Python value into the matching PdfObject.

    Strings and bytes become Names; PdfObjects are passed through unchanged.
    """
    if isinstance(value, PdfObject):
        return value
    if value is None:
        return Null()
    if isinstance(value, bool):
        return Bool(value)
    if isinstance(value, int):
        return Int(value)
    if isinstance(value, float):
        return Real(value)
    if isinstance(value, (bytes, bytearray, str)):
        return Name(value)
    if isinstance(value, dict):
        return Dict.from_python(value)
    if isinstance(value, (list, tuple)):
        return Array([_from_python(item) for item in value])
    raise TypeError(f"Cannot convert {type(value).__name__} to a PDF object")


class Dict(PdfObject):
    TYPE = T_DICT

    def __init__(self, d: dict | None = None) -> None:
        super().__init__({})
        if d:
            for key, value in d.items():
                self.put(key, value)

    @classmethod
    def from_python(cls, d: dict) -> 'Dict':
        """Build a Dict from plain Python values, e.g.
        ``{'Filter': '/FlateDecode', 'DecodeParms': {'Predictor': 12}}``.
        """
        return cls(d)

    def put(self, key, value) -> None:
        """Store value under key; plain Python values are converted first."""
        self.val[_key_bytes(key)] = _from_python(value)

    def get(self, key, default: PdfObject | None = None) -> PdfObject | None:
        return self.val.get(_key_bytes(key), default)

    def get_typed(self, key, type_tag: int) -> PdfObject | None:
        obj = self.val.get(_key_bytes(key))
        if obj is None or obj.TYPE != type_tag:
            return None
        return obj

    def __contains__(self, key) -> bool:
        return _key_bytes(key) in self.val

    def __len__(self) -> int:
        return len(self.val)

    def __iter__(self):
        return iter(self.val)

    def __eq__(self, other) -> bool:
        if getattr(other, 'TYPE', None) != T_DICT:
            return False
        return self.val == other.val

    __hash__ = None

    def __str__(self) -> str:
        items = " ".join(f"/{key.decode('latin-1')} {value}" for key, value in self.val.items())
        return f"<< {items} >>"
