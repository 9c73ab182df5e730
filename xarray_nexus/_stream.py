"""Low level readers for big-endian fixed-width words"""

from __future__ import annotations

import os
from typing import BinaryIO

import numpy as np

from .errors import UnexpectedEndOfFile
from .token import Token

SEPARATOR = 8  # bytes between Fortran style records


def read_exact(fp: BinaryIO, size: int, what: str = "") -> bytes:
    """Read exactly ``size`` bytes or raise UnexpectedEndOfFile"""
    offset = fp.tell()
    data = fp.read(size)
    if len(data) != size:
        detail = f"reading {what}: " if what else ""
        raise UnexpectedEndOfFile(f"{detail}expected {size} bytes, got {len(data)}", offset)
    return data


def skip(fp: BinaryIO, size: int) -> None:
    fp.seek(size, os.SEEK_CUR)


def read_token(fp: BinaryIO, width: int, what: str = "") -> Token:
    return Token(read_exact(fp, width, what))


def read_words(fp: BinaryIO, count: int, what: str = "") -> np.ndarray:
    """Read ``count`` big-endian 32 bit words, byte swapped to host order"""
    data = read_exact(fp, 4 * count, what)
    return np.frombuffer(data, dtype=">u4").astype(np.uint32)


def as_int32(words: np.ndarray) -> np.ndarray:
    return words.view(np.int32)


def as_float32(words: np.ndarray) -> np.ndarray:
    """Reinterpret the bit pattern of each word as an IEEE float"""
    return words.view(np.float32)
