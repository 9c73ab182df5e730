"""
Conversion of decoded plot samples into keyword time series
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from operator import attrgetter
from pathlib import Path

from .catalog import CLASSNAME_WIDTH
from .errors import InconsistentTimeAxis, UnknownVariable
from .reader import INSTANCE_WIDTH, NexusPlot, Sample
from .token import Token

logger = logging.getLogger(__name__)

# Nexus variable code -> summary keyword for field level series
KW_NEX2ECL: dict[str, str] = {
    "QOP": "FOPR",
    "QWP": "FWPR",
    "QGP": "FGPR",
    "GOR": "FGOR",
    "WCUT": "FWCT",
    "COP": "FOPT",
    "CWP": "FWPT",
    "CGP": "FGPT",
    "QWI": "FWIR",
    "QGI": "FGIR",
    "CWI": "FWIT",
    "CGI": "FGIT",
    "QPP": "FCPR",
    "CPP": "FCPC",
}


@dataclass(frozen=True)
class KeywordSeries:
    """Values of one keyword, each paired with its index on the time axis"""

    keyword: str
    varname: str
    unit: str
    points: tuple[tuple[int, float], ...]


@dataclass(frozen=True)
class ConvertedSeries:
    """Keyword series plus the shared ``(timestep, time)`` axis"""

    series: dict[str, KeywordSeries] = field(default_factory=dict)
    time_axis: tuple[tuple[int, float], ...] = ()

    @property
    def keywords(self) -> list[str]:
        return list(self.series)

    @property
    def num_timesteps(self) -> int:
        return len(self.time_axis)

    def __getitem__(self, keyword: str) -> KeywordSeries:
        return self.series[keyword]

    def __contains__(self, keyword: str) -> bool:
        return keyword in self.series


def time_axis(samples: list[Sample]) -> tuple[tuple[int, float], ...]:
    """Unique ``(timestep, time)`` pairs ordered by timestep

    Raises:
        InconsistentTimeAxis: one timestep is reported with two times
    """
    times: dict[int, float] = {}
    for sample in samples:
        seen = times.setdefault(sample.timestep, sample.time)
        if seen != sample.time and not (math.isnan(seen) and math.isnan(sample.time)):
            raise InconsistentTimeAxis(
                f"timestep {sample.timestep} has times {seen} and {sample.time}"
            )
    return tuple(sorted(times.items()))


def convert(
    plot: NexusPlot,
    table: Mapping[str, str] | None = None,
    classname: str = "FIELD",
    instancename: str = "NETWORK",
) -> ConvertedSeries:
    """Build keyword series for one class/instance of a plot

    Variable codes missing from ``table`` are logged and dropped.

    Args:
        plot: decoded plot file
        table: variable code to keyword mapping, ``KW_NEX2ECL`` by default
        classname: class to select, the field aggregate by default
        instancename: instance to select within ``classname``

    Returns:
        ConvertedSeries with one entry per mapped variable code
    """
    if table is None:
        table = KW_NEX2ECL

    cls = Token.pad(classname, CLASSNAME_WIDTH)
    inst = Token.pad(instancename, INSTANCE_WIDTH)
    selected = [s for s in plot.samples if s.classname == cls and s.instancename == inst]
    selected.sort(key=attrgetter("timestep"))

    axis = time_axis(selected)
    position = {timestep: i for i, (timestep, _) in enumerate(axis)}

    by_varname: dict[Token, list[Sample]] = {}
    for sample in selected:
        by_varname.setdefault(sample.varname, []).append(sample)

    unit_system = plot.header.unit_system
    series: dict[str, KeywordSeries] = {}
    for varname, samples in by_varname.items():
        code = varname.text
        keyword = table.get(code)
        if keyword is None:
            logger.warning("Could not convert nexus variable %s to a summary keyword", code)
            continue
        if keyword in series:
            logger.warning(
                "Keyword %s already produced from %s, skipping %s",
                keyword,
                series[keyword].varname,
                code,
            )
            continue

        try:
            unit = unit_system.unit_str(varname)
        except UnknownVariable:
            logger.warning("No unit known for nexus variable %s", code)
            unit = ""

        points = tuple((position[s.timestep], s.value) for s in samples)
        series[keyword] = KeywordSeries(keyword, code, unit, points)

    logger.debug(
        "Converted %d samples of %s/%s into %d keywords over %d timesteps",
        len(selected),
        classname,
        instancename,
        len(series),
        len(axis),
    )
    return ConvertedSeries(series, axis)


def read_keyword_table(filename: str | Path) -> dict[str, str]:
    """Read ``CODE KEYWORD`` pairs, one per line, ``#`` starts a comment"""
    table = {}
    with open(filename, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.split("#")[0].strip()
            if not line:
                continue
            parts = line.replace(",", " ").split()
            if len(parts) != 2:
                raise ValueError(f"{filename}:{lineno}: expected 'CODE KEYWORD', got {line!r}")
            table[parts[0]] = parts[1]
    return table
