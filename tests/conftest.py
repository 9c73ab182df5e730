"""Shared fixtures and plot file builders for xarray-nexus tests."""

from __future__ import annotations

import io
import os
import struct
from pathlib import Path

import pytest

# Real plot file, e.g. SPE1.plt; skip tests when the env var is not set
_plt = os.getenv("NEXUS_PLT_FILE", "")
PLT_FILE = Path(_plt) if _plt else None
has_test_data = PLT_FILE is not None and PLT_FILE.exists()
skip_no_data = pytest.mark.skipif(not has_test_data, reason="Test data not available")

SEP = b"\x00" * 8
HEADER_FIELDS_OFFSET = 4 + 12 + 24 + 6 + 794


def pad(text: str, width: int) -> bytes:
    return text.encode("ascii").ljust(width, b" ")


def build_header(
    unit: str = "METBAR",
    num_classes: int = 1,
    date: tuple[int, int, int] = (1, 1, 1980),
    grid: tuple[int, int, int] = (10, 10, 3),
    ncomp: int = 2,
    file_type: bytes = b"PLOT  BIN   ",
) -> bytes:
    day, month, year = date
    out = bytearray(b"\x00" * 4)
    out += file_type
    out += pad("V2", 6) + pad("NEXUS", 6) + pad("5000", 6) + pad("4", 6)
    out += pad(unit, 6)
    out += b"\x00" * 794
    out += struct.pack(">8i", num_classes, day, month, year, *grid, ncomp)
    return bytes(out)


def build_catalog(classes: dict[str, list[str]]) -> bytes:
    out = bytearray(SEP)
    for name in classes:
        out += pad(name, 8)
    out += SEP
    out += struct.pack(f">{len(classes)}i", *(len(v) for v in classes.values()))
    out += SEP
    for varnames in classes.values():
        out += b"TIME"
        for varname in varnames:
            out += pad(varname, 4)
        out += SEP
    return bytes(out)


def build_block(
    classname: str,
    timestep: int,
    time: float,
    items: list[tuple[str, list[float]]],
    max_perfs: int = 0,
) -> bytes:
    out = bytearray(pad(classname, 8))
    out += SEP
    out += struct.pack(">5f", timestep, time, len(items), len(items), max_perfs)
    for instancename, values in items:
        out += SEP
        out += pad(instancename, 8)
        out += b"\x00" * 64
        out += struct.pack(f">{len(values)}f", *values)
    out += SEP
    return bytes(out)


def build_plot(
    classes: dict[str, list[str]],
    blocks: list[bytes] = (),
    unit: str = "METBAR",
    stop: bool = True,
    **header,
) -> bytes:
    header.setdefault("num_classes", len(classes))
    out = build_header(unit=unit, **header)
    out += build_catalog(classes)
    for block in blocks:
        out += block
    if stop:
        out += pad("STOP", 8)
    return out


FIELD_CLASSES = {"FIELD": ["QOP", "WCUT"]}


def field_plot_bytes() -> bytes:
    """One FIELD block at timestep 1, NETWORK instance, values [12.5, 0.3]"""
    return build_plot(
        FIELD_CLASSES,
        [build_block("FIELD", 1, 0.0, [("NETWORK", [12.5, 0.3])])],
    )


def multi_plot_bytes() -> bytes:
    """Two classes, three timesteps, written out of timestep order"""
    classes = {
        "FIELD": ["QOP", "QWP", "COP", "BHP"],
        "WELL": ["QOP", "BHP"],
    }
    blocks = [
        build_block("FIELD", 2, 31.0, [("NETWORK", [110.0, 20.0, 3410.0, 250.0])], max_perfs=3),
        build_block(
            "WELL", 2, 31.0, [("P1", [60.0, 240.0]), ("P2", [50.0, 245.0])], max_perfs=3
        ),
        build_block("FIELD", 1, 0.0, [("NETWORK", [100.0, 10.0, 0.0, 260.0])], max_perfs=3),
        build_block("FIELD", 3, 59.0, [("NETWORK", [90.0, 30.0, 5930.0, 240.0])], max_perfs=3),
    ]
    return build_plot(classes, blocks)


@pytest.fixture()
def field_stream() -> io.BytesIO:
    return io.BytesIO(field_plot_bytes())


@pytest.fixture()
def multi_stream() -> io.BytesIO:
    return io.BytesIO(multi_plot_bytes())


@pytest.fixture()
def plt_file(tmp_path) -> Path:
    """Multi-class plot written to disk"""
    path = tmp_path / "CASE.plt"
    path.write_bytes(multi_plot_bytes())
    return path


def netcdf_engine_available() -> bool:
    for module in ("netCDF4", "scipy", "h5netcdf"):
        try:
            __import__(module)
        except ImportError:
            continue
        return True
    return False
