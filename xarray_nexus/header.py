"""
Nexus plot file header parsing
"""

from __future__ import annotations

import datetime
import os
from dataclasses import dataclass
from typing import BinaryIO

from ._stream import as_int32, read_exact, read_token, read_words, skip
from .errors import BadHeader, UnexpectedEndOfFile
from .units import UnitSystem

FILE_TYPE = b"PLOT  BIN   "
HEADER_PREFIX = 4
DESCRIPTOR_BLOBS = 4  # plot file version, simulator, simulator version x2
DESCRIPTOR_WIDTH = 6
UNIT_TAG_WIDTH = 6
HEADER_PADDING = 530 + 264
NUM_FIELDS = 8


@dataclass(frozen=True)
class NexusHeader:
    """Header of a plot file

    The eight integer fields are kept in wire order; ``fields`` returns them
    as read so callers that do not interpret them can pass them through.
    """

    unit_system: UnitSystem
    num_classes: int
    day: int
    month: int
    year: int
    nx: int
    ny: int
    nz: int
    ncomp: int

    @property
    def fields(self) -> tuple[int, ...]:
        return (
            self.num_classes,
            self.day,
            self.month,
            self.year,
            self.nx,
            self.ny,
            self.nz,
            self.ncomp,
        )

    @property
    def grid(self) -> tuple[int, int, int]:
        return (self.nx, self.ny, self.nz)

    @property
    def start_date(self) -> datetime.datetime:
        """Simulation start derived from the day/month/year fields"""
        try:
            return datetime.datetime(self.year, self.month, self.day)
        except ValueError as e:
            raise BadHeader(f"Invalid start date {self.day}/{self.month}/{self.year}: {e}") from e


def read_header(fp: BinaryIO) -> NexusHeader:
    """Read and validate the header from the start of ``fp``

    Raises:
        BadHeader: wrong file type tag or a negative field
        UnexpectedEndOfFile: stream ends inside the header
        UnrecognizedUnitSystem: unit tag not known
    """
    fp.seek(HEADER_PREFIX, os.SEEK_SET)

    try:
        file_type = read_exact(fp, len(FILE_TYPE), "file type")
    except UnexpectedEndOfFile as e:
        raise BadHeader("Could not verify file type", e.offset) from e
    if file_type != FILE_TYPE:
        raise BadHeader(f"Could not verify file type {file_type!r}", HEADER_PREFIX)

    skip(fp, DESCRIPTOR_BLOBS * DESCRIPTOR_WIDTH)
    unit_tag = read_token(fp, UNIT_TAG_WIDTH, "unit system")
    unit_system = UnitSystem(unit_tag)

    skip(fp, HEADER_PADDING)
    offset = fp.tell()
    values = as_int32(read_words(fp, NUM_FIELDS, "header fields"))
    if (values < 0).any():
        raise BadHeader("Negative value, corrupted file", offset)

    return NexusHeader(unit_system, *(int(v) for v in values))
