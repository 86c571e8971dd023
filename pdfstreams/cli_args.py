# PdfStreams - PDF Stream Filter Decoding
# Copyright (c) 2025-2026 Scott Bowman
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
CLI argument parsing for PdfStreams.

Handles command-line argument definition and turns the parsed options into
the stream dictionary a PDF parser would normally supply.
"""

from __future__ import annotations

import argparse
from importlib import metadata

from .core import types as pdf


def _get_version() -> str:
    """Read the installed distribution version."""
    try:
        return metadata.version("pdfstreams")
    except metadata.PackageNotFoundError:
        return "unknown"


def build_argument_parser() -> argparse.ArgumentParser:
    """
    Create and configure the PdfStreams argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog="pdfstreams",
        description="PdfStreams - decode raw PDF stream data",
        epilog="INPUT holds the bytes between 'stream' and 'endstream'; use - for stdin.",
    )
    parser.add_argument(
        "-V", "--version", action="version",
        version=f"PdfStreams {_get_version()}"
    )
    parser.add_argument("inputfile", help="Raw stream data file (- for stdin)")
    parser.add_argument(
        "-f", "--filter",
        default=pdf.FILTER_FLATE.decode(),
        help=f"Filter name from the stream dictionary (default: {pdf.FILTER_FLATE.decode()})"
    )
    parser.add_argument(
        "--predictor", type=int,
        help="DecodeParms Predictor (1, 2 or 10-15)"
    )
    parser.add_argument(
        "--columns", type=int,
        help="DecodeParms Columns (samples per row)"
    )
    parser.add_argument(
        "--colors", type=int,
        help="DecodeParms Colors (components per sample, default: 1)"
    )
    parser.add_argument(
        "--bits-per-component", dest="bits_per_component", type=int,
        help="DecodeParms BitsPerComponent (only 8 is supported)"
    )
    parser.add_argument(
        "-o", "--output", dest="outputfile",
        help="Write decoded bytes to this file (default: stdout)"
    )
    parser.add_argument(
        "--image", dest="imagefile",
        help="Also write the decoded samples as a PNG image (needs --columns)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose (debug) logging"
    )

    return parser


def build_stream_dict(args: argparse.Namespace) -> pdf.Dict:
    """Build the stream dictionary described by the parsed arguments."""
    stream_dict = pdf.Dict({pdf.KEY_FILTER: pdf.Name(args.filter)})

    decode_parms = pdf.Dict()
    if args.predictor is not None:
        decode_parms.put(pdf.PARAM_PREDICTOR, pdf.Int(args.predictor))
    if args.columns is not None:
        decode_parms.put(pdf.PARAM_COLUMNS, pdf.Int(args.columns))
    if args.colors is not None:
        decode_parms.put(pdf.PARAM_COLORS, pdf.Int(args.colors))
    if args.bits_per_component is not None:
        decode_parms.put(pdf.PARAM_BITS_PER_COMPONENT, pdf.Int(args.bits_per_component))

    if len(decode_parms):
        stream_dict.put(pdf.KEY_DECODE_PARMS, decode_parms)
    return stream_dict
