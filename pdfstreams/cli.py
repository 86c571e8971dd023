#!/usr/bin/env python3
# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.
#
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
PdfStreams - PDF stream decoder

Command-line front end for the stream filters. The raw stream bytes come from
a file (or stdin) and the stream dictionary is built from the options, the way
a PDF parser would have read it from the object.

Usage:
    pdfstreams content.bin
    pdfstreams -f ASCIIHexDecode data.hex -o data.bin
    pdfstreams --predictor 12 --columns 5 xref.bin -o xref.raw
    pdfstreams --predictor 15 --columns 64 gray.bin --image gray.png

Exit status is 0 on success and 1 when the stream cannot be decoded.
"""

import logging
import sys

from .cli_args import build_argument_parser, build_stream_dict
from .core import types as pdf
from .core import error as pdf_error
from .filters.filter import decode_stream

logger = logging.getLogger(__name__)


def _read_input(inputfile: str) -> bytes:
    if inputfile == "-":
        return sys.stdin.buffer.read()
    with open(inputfile, "rb") as f:
        return f.read()


def _write_output(outputfile: str | None, data: bytes) -> None:
    if outputfile:
        with open(outputfile, "wb") as f:
            f.write(data)
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.imagefile and args.columns is None:
        parser.error("--image requires --columns")

    try:
        raw = _read_input(args.inputfile)
    except OSError as exc:
        print(f"pdfstreams: cannot read {args.inputfile}: {exc.strerror}", file=sys.stderr)
        return 1

    stream = pdf.Stream(build_stream_dict(args), raw)
    logger.debug("Stream: %s", stream)

    try:
        data = decode_stream(stream)
    except pdf_error.StreamDecodeError as exc:
        print(f"pdfstreams: /{exc.error_name}: {exc}", file=sys.stderr)
        return 1

    if args.imagefile:
        # Deferred so plain decoding does not need Pillow loaded
        from .devices.png.png import write_image
        try:
            write_image(data, args.columns, args.colors or pdf.DEFAULT_COLORS, args.imagefile)
        except (ValueError, OSError) as exc:
            print(f"pdfstreams: cannot write image: {exc}", file=sys.stderr)
            return 1

    _write_output(args.outputfile, data)
    return 0


if __name__ == "__main__":
    sys.exit(main())
