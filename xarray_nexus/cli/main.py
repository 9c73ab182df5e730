#!/usr/bin/env python3
"""
Unified CLI for xarray-nexus: xnex

Subcommands:
    2nc      Convert a plot file to a summary NetCDF
    catalog  List header fields, classes and variables of a plot file
"""

import sys
from argparse import ArgumentParser

import xarray_nexus as xnex
from xarray_nexus.cli import catalog, nex2nc


def main():
    parser = ArgumentParser(
        prog="xnex",
        description="xarray-nexus command-line tools for Nexus plot files",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {xnex.__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    nex2nc.add_args(subparsers)
    catalog.add_args(subparsers)

    args = parser.parse_args()
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
