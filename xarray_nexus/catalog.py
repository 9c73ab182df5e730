"""
Variable catalog: the variable codes recorded for each data class
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import BinaryIO

from ._stream import SEPARATOR, as_int32, read_exact, read_token, read_words, skip
from .errors import BadHeader
from .token import Token

logger = logging.getLogger(__name__)

CLASSNAME_WIDTH = 8
VARNAME_WIDTH = 4


class VariableCatalog(Mapping):
    """Ordered, read-only mapping of class name token to variable code tokens

    The order of the codes for a class is the order of the values in every
    value array written for an instance of that class.
    """

    def __init__(self, entries: Mapping[Token, tuple[Token, ...]] | None = None):
        self._entries: dict[Token, tuple[Token, ...]] = {
            k: tuple(v) for k, v in (entries or {}).items()
        }

    def __getitem__(self, classname: Token) -> tuple[Token, ...]:
        return self._entries[classname]

    def __iter__(self) -> Iterator[Token]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def classnames(self) -> list[str]:
        return [c.text for c in self._entries]

    def varnames(self, classname: str | Token) -> list[str]:
        if not isinstance(classname, Token):
            classname = Token.pad(classname, CLASSNAME_WIDTH)
        return [v.text for v in self._entries.get(classname, ())]

    def __repr__(self):
        body = ", ".join(f"{c.text}: {len(v)}" for c, v in self._entries.items())
        return f"VariableCatalog({body})"


def read_catalog(fp: BinaryIO, num_classes: int) -> VariableCatalog:
    """Read the class names and their variable codes

    Args:
        fp: stream positioned right after the header
        num_classes: class count from the header

    Raises:
        BadHeader: a negative variable count
        UnexpectedEndOfFile: stream ends inside the catalog
    """
    skip(fp, SEPARATOR)
    classnames = [read_token(fp, CLASSNAME_WIDTH, "class name") for _ in range(num_classes)]

    skip(fp, SEPARATOR)
    offset = fp.tell()
    counts = as_int32(read_words(fp, num_classes, "variable counts"))
    if (counts < 0).any():
        raise BadHeader("Negative value, corrupted file", offset)

    skip(fp, SEPARATOR)
    entries: dict[Token, tuple[Token, ...]] = {}
    for classname, count in zip(classnames, counts, strict=True):
        skip(fp, VARNAME_WIDTH)  # time variable name
        buf = read_exact(fp, int(count) * VARNAME_WIDTH, f"variables of {classname}")
        entries[classname] = tuple(
            Token(buf[k : k + VARNAME_WIDTH]) for k in range(0, len(buf), VARNAME_WIDTH)
        )
        skip(fp, SEPARATOR)
        logger.debug("Class %s has %d variables", classname, count)

    return VariableCatalog(entries)
