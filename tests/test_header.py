"""Tests for header and catalog decoding."""

from __future__ import annotations

import datetime
import io
import struct

import pytest
from conftest import HEADER_FIELDS_OFFSET, build_catalog, build_header

from xarray_nexus.catalog import read_catalog
from xarray_nexus.errors import (
    BadHeader,
    UnexpectedEndOfFile,
    UnrecognizedUnitSystem,
)
from xarray_nexus.header import read_header
from xarray_nexus.token import Token
from xarray_nexus.units import UnitSystem, UnitType


class TestReadHeader:
    """Tests for read_header."""

    def test_fields(self):
        header = read_header(io.BytesIO(build_header(num_classes=3)))
        assert header.unit_system == UnitSystem(UnitType.metric_bars)
        assert header.num_classes == 3
        assert (header.day, header.month, header.year) == (1, 1, 1980)
        assert header.grid == (10, 10, 3)
        assert header.ncomp == 2
        assert header.fields == (3, 1, 1, 1980, 10, 10, 3, 2)

    def test_stream_left_after_header(self):
        data = build_header() + b"rest"
        fp = io.BytesIO(data)
        read_header(fp)
        assert fp.read() == b"rest"

    def test_start_date(self):
        header = read_header(io.BytesIO(build_header(date=(15, 6, 2001))))
        assert header.start_date == datetime.datetime(2001, 6, 15)

    def test_invalid_start_date(self):
        header = read_header(io.BytesIO(build_header(date=(0, 0, 0))))
        with pytest.raises(BadHeader):
            header.start_date

    def test_other_unit_system(self):
        header = read_header(io.BytesIO(build_header(unit="ENGLSH")))
        assert header.unit_system.unit_type is UnitType.english

    def test_bad_file_type(self):
        with pytest.raises(BadHeader, match="file type"):
            read_header(io.BytesIO(build_header(file_type=b"GRID  BIN   ")))

    def test_empty_stream(self):
        with pytest.raises(BadHeader):
            read_header(io.BytesIO(b""))

    def test_truncated_before_unit_tag(self):
        with pytest.raises(UnexpectedEndOfFile):
            read_header(io.BytesIO(build_header()[:30]))

    def test_unknown_unit_system(self):
        with pytest.raises(UnrecognizedUnitSystem):
            read_header(io.BytesIO(build_header(unit="XXXXXX")))

    def test_truncated_fields(self):
        with pytest.raises(UnexpectedEndOfFile):
            read_header(io.BytesIO(build_header()[:-4]))

    @pytest.mark.parametrize("field", range(8))
    def test_negative_field(self, field):
        data = bytearray(build_header())
        pos = HEADER_FIELDS_OFFSET + 4 * field
        data[pos : pos + 4] = struct.pack(">i", -1)
        with pytest.raises(BadHeader, match="Negative"):
            read_header(io.BytesIO(bytes(data)))

    def test_error_carries_offset(self):
        data = bytearray(build_header())
        data[HEADER_FIELDS_OFFSET : HEADER_FIELDS_OFFSET + 4] = struct.pack(">i", -5)
        with pytest.raises(BadHeader) as excinfo:
            read_header(io.BytesIO(bytes(data)))
        assert excinfo.value.offset == HEADER_FIELDS_OFFSET
        assert f"offset {HEADER_FIELDS_OFFSET}" in str(excinfo.value)


class TestReadCatalog:
    """Tests for read_catalog."""

    def test_classes_and_codes(self):
        classes = {"FIELD": ["QOP", "QWP", "WCUT"], "WELL": ["QOP", "BHP"]}
        catalog = read_catalog(io.BytesIO(build_catalog(classes)), 2)
        assert catalog.classnames() == ["FIELD", "WELL"]
        assert catalog.varnames("FIELD") == ["QOP", "QWP", "WCUT"]
        assert catalog.varnames(Token.pad("WELL", 8)) == ["QOP", "BHP"]
        assert catalog[Token(b"WELL    ")] == (Token(b"QOP "), Token(b"BHP "))

    def test_order_is_preserved(self):
        classes = {"ZETA": ["WCUT", "QOP"], "ALPHA": ["QWP"]}
        catalog = read_catalog(io.BytesIO(build_catalog(classes)), 2)
        assert catalog.classnames() == ["ZETA", "ALPHA"]
        assert catalog.varnames("ZETA") == ["WCUT", "QOP"]

    def test_class_without_variables(self):
        classes = {"FIELD": ["QOP"], "EMPTY": []}
        catalog = read_catalog(io.BytesIO(build_catalog(classes)), 2)
        assert catalog.varnames("EMPTY") == []
        assert len(catalog) == 2

    def test_no_classes(self):
        catalog = read_catalog(io.BytesIO(build_catalog({})), 0)
        assert len(catalog) == 0

    def test_unknown_class_varnames(self):
        catalog = read_catalog(io.BytesIO(build_catalog({"FIELD": ["QOP"]})), 1)
        assert catalog.varnames("WELL") == []

    def test_negative_count(self):
        data = bytearray(build_catalog({"FIELD": ["QOP"]}))
        pos = 8 + 8 + 8
        data[pos : pos + 4] = struct.pack(">i", -2)
        with pytest.raises(BadHeader):
            read_catalog(io.BytesIO(bytes(data)), 1)

    def test_truncated(self):
        data = build_catalog({"FIELD": ["QOP", "QWP", "WCUT"]})
        with pytest.raises(UnexpectedEndOfFile):
            read_catalog(io.BytesIO(data[:-14]), 1)

    def test_truncated_class_names(self):
        data = build_catalog({"FIELD": ["QOP"], "WELL": ["QOP"]})
        with pytest.raises(UnexpectedEndOfFile):
            read_catalog(io.BytesIO(data[:12]), 2)
