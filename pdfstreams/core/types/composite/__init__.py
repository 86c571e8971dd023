# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PdfStreams Types Composite Sub-Package

**Module Organization:**
- name.py: Name class - PDF names with hash-based lookups
- array.py: Array class
- dict.py: Dict class - name-keyed dictionaries with typed lookups
- stream.py: Stream class - stream dictionary plus raw bytes

**Forward Reference Resolution:**
dict.py converts plain Python values into Names and Arrays, so those classes
are handed to it after all modules are imported.
"""

from .name import Name
from .array import Array
from .dict import Dict
from .stream import Stream

from . import dict as dict_module

dict_module.Name = Name    # Dict.from_python() needs Name for bytes/str values
dict_module.Array = Array  # Dict.from_python() needs Array for list values

__all__ = [
    'Name',
    'Array',
    'Dict',
    'Stream',
]
