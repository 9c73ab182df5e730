"""
Unit systems used by Nexus plot files

A plot file names its unit system with a 6 character tag in the header.
Each system maps every physical measure to the unit string written into
the converted summary.
"""

from __future__ import annotations

import enum

from .errors import UnknownVariable, UnrecognizedUnitSystem
from .token import Token


class UnitType(enum.Enum):
    english = "ENGLSH"
    metric_bars = "METBAR"
    metric_kpa = "METKPA"
    metkg_cm2 = "METKG/"
    lab = "LAB   "


class Measure(enum.Enum):
    compressibility = enum.auto()
    density = enum.auto()
    formation_volume_factor_gas = enum.auto()
    formation_volume_factor_oil = enum.auto()
    fraction = enum.auto()
    gas_liquid_ratio = enum.auto()
    length = enum.auto()
    moles = enum.auto()
    permeability = enum.auto()
    pressure = enum.auto()
    pressure_absolute = enum.auto()
    reservoir_rates = enum.auto()
    reservoir_volumes = enum.auto()
    surface_rates_gas = enum.auto()
    surface_rates_liquid = enum.auto()
    surface_volumes_gas = enum.auto()
    surface_volumes_liquid = enum.auto()
    temperature = enum.auto()
    time = enum.auto()
    viscosity = enum.auto()
    volume = enum.auto()
    water_cut = enum.auto()


# Column order: english, metric_bars, metric_kpa, metkg_cm2, lab
_UNIT_TABLE: dict[Measure, tuple[str, str, str, str, str]] = {
    Measure.compressibility: ("PSI-1", "BARS-1", "KPA-1", "(KG/CM2)-1", "PSI-1"),
    Measure.density: ("LB/FT3", "KG/M3", "KG/M3", "KG/M3", "G/CC"),
    Measure.formation_volume_factor_gas: ("RB/MSCF", "RM3/SM3", "RM3/SM3", "RM3/SM3", "CC/CC"),
    Measure.formation_volume_factor_oil: ("RB/STB", "RM3/SM3", "RM3/SM3", "RM3/SM3", "CC/CC"),
    Measure.fraction: ("", "", "", "", ""),
    Measure.gas_liquid_ratio: ("MSCF/STB", "SM3/SM3", "SM3/SM3", "SM3/SM3", "CC/CC"),
    Measure.length: ("FT", "M", "M", "M", "CM"),
    Measure.moles: ("LB-M", "KG-M", "KG-M", "KG-M", "G-M"),
    Measure.permeability: ("MD", "MD", "MD", "MD", "MD"),
    Measure.pressure: ("PSI", "BARS", "KPA", "KG/CM2", "PSI"),
    Measure.pressure_absolute: ("PSIA", "BARSA", "KPAA", "KG/CM2A", "PSIA"),
    Measure.reservoir_rates: ("RB/DAY", "RM3/DAY", "RM3/DAY", "RM3/DAY", "CC/HR"),
    Measure.reservoir_volumes: ("kRB", "kRM3", "kRM3", "kRM3", "CC"),
    Measure.surface_rates_gas: ("MSCF/DAY", "SM3/DAY", "SM3/DAY", "SM3/DAY", "CC/HR"),
    Measure.surface_rates_liquid: ("STB/DAY", "SM3/DAY", "SM3/DAY", "SM3/DAY", "CC/HR"),
    Measure.surface_volumes_gas: ("MMSCF", "kSM3", "kSM3", "kSM3", "CC"),
    Measure.surface_volumes_liquid: ("kSTB", "kSM3", "kSM3", "kSM3", "CC"),
    Measure.temperature: ("F", "C", "C", "C", "C"),
    Measure.time: ("DAY", "DAY", "DAY", "DAY", "HR"),
    Measure.viscosity: ("CP", "CP", "CP", "CP", "CP"),
    Measure.volume: ("FT3", "M3", "M3", "M3", "CC"),
    Measure.water_cut: ("STB/STB", "SM3/SM3", "SM3/SM3", "SM3/SM3", "CC/CC"),
}

_COLUMNS = {
    UnitType.english: 0,
    UnitType.metric_bars: 1,
    UnitType.metric_kpa: 2,
    UnitType.metkg_cm2: 3,
    UnitType.lab: 4,
}

# Variable codes as written in the plot file catalog
VARIABLE_MEASURES: dict[str, Measure] = {
    "QOP": Measure.surface_rates_liquid,
    "QWP": Measure.surface_rates_liquid,
    "QGP": Measure.surface_rates_gas,
    "QLP": Measure.surface_rates_liquid,
    "QPP": Measure.surface_rates_liquid,
    "QOI": Measure.surface_rates_liquid,
    "QWI": Measure.surface_rates_liquid,
    "QGI": Measure.surface_rates_gas,
    "COP": Measure.surface_volumes_liquid,
    "CWP": Measure.surface_volumes_liquid,
    "CGP": Measure.surface_volumes_gas,
    "CLP": Measure.surface_volumes_liquid,
    "CPP": Measure.surface_volumes_liquid,
    "COI": Measure.surface_volumes_liquid,
    "CWI": Measure.surface_volumes_liquid,
    "CGI": Measure.surface_volumes_gas,
    "GOR": Measure.gas_liquid_ratio,
    "GLR": Measure.gas_liquid_ratio,
    "WCUT": Measure.water_cut,
    "BHP": Measure.pressure,
    "THP": Measure.pressure,
    "PAVH": Measure.pressure,
}


class UnitSystem:
    """Unit strings for one of the Nexus unit systems

    Args:
        system: a ``UnitType``, its 6 character tag, or the raw tag token
            read off the stream
    """

    __slots__ = ("unit_type",)

    def __init__(self, system: UnitType | str | bytes | Token):
        if isinstance(system, UnitType):
            unit_type = system
        else:
            if isinstance(system, Token):
                system = system.raw
            if isinstance(system, bytes):
                system = system.decode("ascii", errors="replace")
            try:
                unit_type = UnitType(system)
            except ValueError:
                raise UnrecognizedUnitSystem(repr(system)) from None
        object.__setattr__(self, "unit_type", unit_type)

    def __setattr__(self, name, value):
        raise AttributeError("UnitSystem is immutable")

    def __reduce__(self):
        return (UnitSystem, (self.unit_type,))

    @property
    def tag(self) -> str:
        return self.unit_type.value

    def unit_str(self, what: Measure | str | Token) -> str:
        """Unit string for a measure or a variable code

        Raises:
            UnknownVariable: ``what`` is a variable code without a known measure
        """
        if isinstance(what, Measure):
            return _UNIT_TABLE[what][_COLUMNS[self.unit_type]]
        code = what.text if isinstance(what, Token) else what.strip()
        measure = VARIABLE_MEASURES.get(code)
        if measure is None:
            raise UnknownVariable(repr(code))
        return self.unit_str(measure)

    def __eq__(self, other):
        if isinstance(other, UnitSystem):
            return self.unit_type is other.unit_type
        return NotImplemented

    def __hash__(self):
        return hash(self.unit_type)

    def __repr__(self):
        return f"UnitSystem({self.unit_type.name})"
