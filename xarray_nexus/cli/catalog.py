#
# catalog subcommand
#
# Prints the header fields and the class/variable catalog of a plot file
# without converting it.
#

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser
from pathlib import Path

import xarray_nexus as xnex
from xarray_nexus.cli import logger


def _add_common_args(parser) -> None:
    """Add arguments shared between the subcommand and standalone entry point."""
    parser.add_argument("file", type=Path, help="Nexus plot file to scan")
    parser.add_argument(
        "-i",
        "--instances",
        action="store_true",
        help="Also read the records and list the instances of each class",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="filename",
        help="Where to store the output (default: stdout)",
    )
    logger.add_args(parser)


def add_args(subparsers) -> None:
    """Register the 'catalog' subcommand."""
    parser = subparsers.add_parser(
        "catalog",
        help="List classes and variables of a plot file",
        description="Print the header and variable catalog of a Nexus plot file",
    )
    _add_common_args(parser)
    parser.set_defaults(func=run)


def _unit(unit_system: xnex.UnitSystem, code: xnex.Token) -> str:
    try:
        return unit_system.unit_str(code) or "-"
    except xnex.UnknownVariable:
        return "?"


def describe(header: xnex.NexusHeader, catalog: xnex.VariableCatalog) -> list[str]:
    """Human readable lines for a header and its catalog"""
    lines = [
        f"unit_system {header.unit_system.tag.strip()}",
        f"start {header.day:02d}/{header.month:02d}/{header.year:04d}",
        f"grid {header.nx} {header.ny} {header.nz}",
        f"ncomp {header.ncomp}",
        f"classes {header.num_classes}",
    ]
    for classname, varnames in catalog.items():
        lines.append(f"class {classname.text} {len(varnames)}")
        for varname in varnames:
            lines.append(f"  {varname.text} {_unit(header.unit_system, varname)}")
    return lines


def run(args) -> int:
    """Execute the catalog subcommand."""
    logger.mk_logger(args)

    if not args.file.exists():
        logging.error("File not found: %s", args.file)
        return 1

    try:
        with open(args.file, "rb") as fp:
            header = xnex.read_header(fp)
            catalog = xnex.read_catalog(fp, header.num_classes)
            lines = describe(header, catalog)
            if args.instances:
                samples = xnex.read_records(fp, catalog)
                plot = xnex.NexusPlot(header, tuple(samples))
                for classname in plot.classnames():
                    names = " ".join(plot.instancenames(classname))
                    lines.append(f"instances {classname} {names}")
    except (OSError, ValueError) as e:
        logging.error("Error: %s", e)
        return 1

    output = "\n".join(lines) + "\n"

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        logging.info("Wrote catalog to %s", args.output)
    else:
        sys.stdout.write(output)

    return 0


def main():
    """Standalone entry point."""
    parser = ArgumentParser(
        description="Print the header and variable catalog of a Nexus plot file",
    )
    _add_common_args(parser)
    args = parser.parse_args()
    sys.exit(run(args))


if __name__ == "__main__":
    main()
