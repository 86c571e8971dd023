# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

from __future__ import annotations

"""
PNG Output Device

Writes decoded 8-bit image samples to a PNG file using Pillow. Columns gives
the image width and Colors the number of interleaved components per pixel.
"""

import logging

from PIL import Image

logger = logging.getLogger(__name__)

# Colors -> Pillow mode for 8 bits per component
MODE_MAP = {
    1: "L",
    3: "RGB",
    4: "CMYK",
}


def write_image(data: bytes, columns: int, colors: int, path: str) -> tuple[int, int]:
    """
    Write decoded samples to a PNG file.

    Args:
        data: Decoded stream bytes, one byte per component
        columns: Samples per row (image width)
        colors: Components per sample (1, 3 or 4)
        path: Output file name

    Returns:
        (width, height) of the written image

    Raises:
        ValueError: Unsupported colors value or data not a whole number of rows
    """
    if colors not in MODE_MAP:
        raise ValueError(f"Cannot write an image with {colors} color components")
    if columns <= 0:
        raise ValueError(f"Invalid image width ({columns})")

    row_length = columns * colors
    if len(data) % row_length != 0:
        raise ValueError(f"Image data length {len(data)} is not a multiple of row length {row_length}")
    height = len(data) // row_length
    if height == 0:
        raise ValueError("No image rows to write")

    img = Image.frombytes(MODE_MAP[colors], (columns, height), bytes(data))
    # PNG has no CMYK mode
    if img.mode == "CMYK":
        img = img.convert("RGB")
    img.save(path, "PNG")
    logger.debug("Wrote %dx%d %s image to %s", columns, height, MODE_MAP[colors], path)
    return columns, height
