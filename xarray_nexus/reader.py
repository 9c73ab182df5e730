"""
Nexus plot file reader
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, NamedTuple

from ._stream import SEPARATOR, as_float32, read_token, read_words, skip
from .catalog import CLASSNAME_WIDTH, VARNAME_WIDTH, VariableCatalog, read_catalog
from .errors import BadHeader, ReadError
from .header import NexusHeader, read_header
from .token import Token

logger = logging.getLogger(__name__)

STOP = Token.pad("STOP", CLASSNAME_WIDTH)
INSTANCE_WIDTH = 8
INSTANCE_PADDING = 64
BLOCK_WORDS = 5


class Sample(NamedTuple):
    """One decoded value"""

    timestep: int
    time: float
    max_perfs: int
    classname: Token
    instancename: Token
    varname: Token
    value: float


@dataclass(frozen=True)
class NexusPlot:
    """Decoded plot file: header plus every sample in file order"""

    header: NexusHeader
    samples: tuple[Sample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    def filter(
        self,
        classname: str | None = None,
        instancename: str | None = None,
        varname: str | None = None,
    ) -> list[Sample]:
        """Samples matching every given name, in file order"""
        want = []
        if classname is not None:
            want.append((3, Token.pad(classname, CLASSNAME_WIDTH)))
        if instancename is not None:
            want.append((4, Token.pad(instancename, INSTANCE_WIDTH)))
        if varname is not None:
            want.append((5, Token.pad(varname, VARNAME_WIDTH)))
        return [s for s in self.samples if all(s[i] == tok for i, tok in want)]

    def unique(self, field: str) -> list:
        """Sorted unique values of a Sample field, e.g. ``timestep``"""
        return sorted({getattr(s, field) for s in self.samples}, key=_sort_key)

    def classnames(self) -> list[str]:
        return _ordered_text(s.classname for s in self.samples)

    def instancenames(self, classname: str | None = None) -> list[str]:
        samples = self.samples if classname is None else self.filter(classname=classname)
        return _ordered_text(s.instancename for s in samples)

    def varnames(self, classname: str | None = None) -> list[str]:
        samples = self.samples if classname is None else self.filter(classname=classname)
        return _ordered_text(s.varname for s in samples)


def _sort_key(value):
    return value.raw if isinstance(value, Token) else value


def _ordered_text(tokens) -> list[str]:
    return [t.text for t in dict.fromkeys(tokens)]


def _block_count(value: float, what: str, offset: int) -> int:
    # truncates toward zero, so only values at or below -1 go negative
    if not math.isfinite(value) or value <= -1:
        raise BadHeader(f"Invalid {what} {value}", offset)
    return int(value)


def read_records(fp: BinaryIO, catalog: VariableCatalog) -> list[Sample]:
    """Read timestep blocks until the STOP class name

    Raises:
        BadHeader: a block names a class missing from the catalog
        UnexpectedEndOfFile: stream ends before the STOP tag
    """
    samples: list[Sample] = []
    n_blocks = 0

    while True:
        offset = fp.tell()
        classname = read_token(fp, CLASSNAME_WIDTH, "class name")
        if classname == STOP:
            logger.debug("Read %d blocks, %d samples", n_blocks, len(samples))
            return samples

        varnames = catalog.get(classname)
        if varnames is None:
            raise BadHeader(f"Unknown class {classname.text!r}", offset)

        skip(fp, SEPARATOR)
        offset = fp.tell()
        words = as_float32(read_words(fp, BLOCK_WORDS, "block header"))
        timestep = _block_count(float(words[0]), "timestep", offset)
        time = float(words[1])
        num_items = _block_count(float(words[2]), "item count", offset)
        # words[3] is the maximum item count, unused
        max_perfs = _block_count(float(words[4]), "perforation count", offset)

        for _ in range(num_items):
            skip(fp, SEPARATOR)
            instancename = read_token(fp, INSTANCE_WIDTH, "instance name")
            skip(fp, INSTANCE_PADDING)
            values = as_float32(read_words(fp, len(varnames), f"values of {instancename}"))
            samples.extend(
                Sample(timestep, time, max_perfs, classname, instancename, varname, float(value))
                for varname, value in zip(varnames, values, strict=True)
            )

        skip(fp, SEPARATOR)
        n_blocks += 1


def read_plot(fp: BinaryIO) -> NexusPlot:
    """Decode a whole plot stream"""
    header = read_header(fp)
    catalog = read_catalog(fp, header.num_classes)
    samples = read_records(fp, catalog)
    return NexusPlot(header, tuple(samples))


def load(source: str | Path | BinaryIO) -> NexusPlot:
    """Load a plot file from a path or a seekable binary stream

    Raises:
        ReadError: ``source`` is a path that cannot be opened
    """
    if hasattr(source, "read"):
        return read_plot(source)

    filename = Path(source)
    try:
        fp = open(filename, "rb")
    except OSError as e:
        raise ReadError(f"Could not open file {filename}: {e.strerror}") from e

    with fp:
        logger.debug("Reading %s", filename)
        return read_plot(fp)
