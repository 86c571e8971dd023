# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams Types Composite Stream Module

A PDF stream object: the stream dictionary plus the raw bytes found between
the ``stream`` and ``endstream`` keywords. The raw bytes are immutable; the
filters only ever read them and always hand back a new buffer.
"""

from ..base import PdfObject
from ..constants import T_STREAM, KEY_LENGTH
from ..primitive import Int
from .dict import Dict


class Stream(PdfObject):
    TYPE = T_STREAM

    def __init__(self, stream_dict: Dict | dict | None, raw_data: bytes | bytearray) -> None:
        # Work on a copy so the caller's dictionary is never modified
        if stream_dict is None:
            stream_dict = Dict()
        elif isinstance(stream_dict, Dict):
            stream_dict = Dict(stream_dict.val)
        else:
            stream_dict = Dict.from_python(stream_dict)
        super().__init__(bytes(raw_data))
        self.dict = stream_dict
        if KEY_LENGTH not in self.dict:
            self.dict.put(KEY_LENGTH, Int(len(self.val)))

    @property
    def raw_data(self) -> bytes:
        return self.val

    def __str__(self) -> str:
        return f"{self.dict} stream({len(self.val)} bytes)"
