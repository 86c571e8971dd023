# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Package - Public API

This package provides the PDF object model consumed by the stream filters.
All types and constants are available through this single namespace to
support the standard import pattern: `from ..core import types as pdf`

**Internal Module Organization:**
- constants.py: type tags, stream keys, filter and parameter names
- base.py: PdfObject base class
- primitive.py: Bool, Null, Int, Real
- composite/: Name, Array, Dict, Stream

**Usage:**
```python
from ..core import types as pdf

params = pdf.Dict.from_python({'Predictor': 12, 'Columns': 5})
stream = pdf.Stream({'Filter': '/FlateDecode', 'DecodeParms': params}, raw)
```
"""

from .constants import *
from .base import *
from .primitive import *
from .composite import *
