"""
xarray-nexus: decode Nexus reservoir simulator plot files

This package decodes the binary plot (``.plt``) records written by the
Nexus simulator and converts field level series into keyword summaries,
available as xarray Datasets or NetCDF files.
"""

from .backend import NexusBackendEntrypoint, open_nexus_dataset
from .catalog import VariableCatalog, read_catalog
from .convert import KW_NEX2ECL, ConvertedSeries, KeywordSeries, convert, read_keyword_table
from .errors import (
    BadHeader,
    InconsistentTimeAxis,
    NexusError,
    ReadError,
    UnexpectedEndOfFile,
    UnknownVariable,
    UnrecognizedUnitSystem,
)
from .header import NexusHeader, read_header
from .reader import NexusPlot, Sample, load, read_records
from .summary import summary_dataset, write_summary
from .token import Token
from .units import Measure, UnitSystem, UnitType

__version__ = "0.1"
__all__ = [
    "KW_NEX2ECL",
    "BadHeader",
    "ConvertedSeries",
    "InconsistentTimeAxis",
    "KeywordSeries",
    "Measure",
    "NexusBackendEntrypoint",
    "NexusError",
    "NexusHeader",
    "NexusPlot",
    "ReadError",
    "Sample",
    "Token",
    "UnexpectedEndOfFile",
    "UnitSystem",
    "UnitType",
    "UnknownVariable",
    "UnrecognizedUnitSystem",
    "VariableCatalog",
    "convert",
    "load",
    "open_nexus_dataset",
    "read_catalog",
    "read_header",
    "read_keyword_table",
    "read_records",
    "summary_dataset",
    "write_summary",
]
