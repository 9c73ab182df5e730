#!/usr/bin/env python3
"""
Convert Nexus plot files to summary NetCDF files.
"""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

import xarray_nexus as xnex
from xarray_nexus.cli import logger


def _add_common_args(parser) -> None:
    """Add arguments shared between the subcommand and standalone entry point."""
    parser.add_argument("file", type=Path, help="Nexus plot file to convert")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="filename",
        required=True,
        help="Where to store the summary",
    )
    parser.add_argument(
        "--case",
        type=str,
        metavar="name",
        help="Case name stored in the summary (default: plot file stem)",
    )
    parser.add_argument(
        "-k",
        "--keywords",
        type=Path,
        metavar="filename",
        help="File of 'CODE KEYWORD' pairs extending the built in keyword table",
    )
    parser.add_argument(
        "--class",
        dest="classname",
        type=str,
        default="FIELD",
        metavar="name",
        help="Class to convert (default: FIELD)",
    )
    parser.add_argument(
        "--instance",
        dest="instancename",
        type=str,
        default="NETWORK",
        metavar="name",
        help="Instance of the class to convert (default: NETWORK)",
    )
    parser.add_argument(
        "--compression",
        type=int,
        default=5,
        metavar="level",
        help="NetCDF compression level 1-9 (default: 5, <=0 to disable)",
    )
    logger.add_args(parser)


def add_args(subparsers) -> None:
    """Register the '2nc' subcommand."""
    parser = subparsers.add_parser(
        "2nc",
        help="Convert a plot file to a summary NetCDF",
        description="Convert a Nexus plot file to a summary NetCDF file",
    )
    _add_common_args(parser)
    parser.set_defaults(func=run)


def run(args) -> int:
    """Execute the 2nc / nex2nc conversion."""
    logger.mk_logger(args)

    if not args.file.exists():
        logging.error("File not found: %s", args.file)
        return 1

    table = dict(xnex.KW_NEX2ECL)
    if args.keywords:
        if not args.keywords.exists():
            logging.error("Keyword file not found: %s", args.keywords)
            return 1
        try:
            extra = xnex.read_keyword_table(args.keywords)
        except ValueError as e:
            logging.error("Error: %s", e)
            return 1
        table.update(extra)
        logging.info("Loaded %d keywords from %s", len(extra), args.keywords)

    case = args.case or args.file.stem

    try:
        plot = xnex.load(args.file)
        logging.info("Read %d samples from %s", len(plot), args.file)
        converted = xnex.write_summary(
            case,
            plot,
            args.output,
            table=table,
            classname=args.classname,
            instancename=args.instancename,
            compression=args.compression,
        )
    except (OSError, ValueError, RuntimeError) as e:
        logging.error("Error: %s", e)
        logging.debug("Traceback:", exc_info=True)
        return 1

    logging.info(
        "Successfully wrote %s (%d keywords, %d timesteps)",
        args.output,
        len(converted.series),
        converted.num_timesteps,
    )
    return 0


def main():
    """Standalone entry point for nex2nc."""
    parser = ArgumentParser(
        description="Convert a Nexus plot file to a summary NetCDF file",
    )
    _add_common_args(parser)
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {xnex.__version__}",
    )
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
