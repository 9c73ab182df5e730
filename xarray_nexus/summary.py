"""
Summary output: keyword time series as an xarray Dataset / NetCDF file
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Mapping
from pathlib import Path

import numpy as np
import xarray as xr

from .convert import ConvertedSeries, convert
from .reader import NexusPlot

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 86400.0


def summary_dataset(
    case: str,
    start: datetime.datetime,
    grid: tuple[int, int, int],
    converted: ConvertedSeries,
) -> xr.Dataset:
    """Lay a ConvertedSeries out on a 1-indexed report step axis

    Args:
        case: case name stored in the global attributes
        start: simulation start date
        grid: (nx, ny, nz) extents
        converted: output of ``convert``

    Returns:
        Dataset with one float32 variable per keyword on the ``time``
        dimension. Steps a keyword has no value for are NaN.
    """
    n_steps = converted.num_timesteps
    timesteps = np.array([ts for ts, _ in converted.time_axis], dtype=np.int32)
    days = np.array([t for _, t in converted.time_axis], dtype=np.float64)
    elapsed = days * SECONDS_PER_DAY
    offsets = np.round(elapsed * 1e9).astype(np.int64).astype("timedelta64[ns]")
    times = np.datetime64(start, "ns") + offsets

    coords = {
        "time": ("time", times),
        "report_step": ("time", np.arange(1, n_steps + 1, dtype=np.int32)),
        "timestep": ("time", timesteps),
        "elapsed": ("time", elapsed, {"long_name": "Elapsed simulation time", "units": "s"}),
    }

    data_vars = {}
    for keyword, series in converted.series.items():
        values = np.full(n_steps, np.nan, dtype=np.float32)
        for index, value in series.points:
            values[index] = value
        data_vars[keyword] = xr.Variable(
            ("time",),
            values,
            attrs={"units": series.unit, "nexus_variable": series.varname},
        )

    nx, ny, nz = grid
    attrs = {
        "case": case,
        "start_date": start.isoformat(),
        "nx": nx,
        "ny": ny,
        "nz": nz,
    }
    return xr.Dataset(data_vars, coords=coords, attrs=attrs)


def plot_summary_dataset(
    case: str,
    plot: NexusPlot,
    table: Mapping[str, str] | None = None,
    classname: str = "FIELD",
    instancename: str = "NETWORK",
) -> tuple[xr.Dataset, ConvertedSeries]:
    """Convert ``plot`` and lay it out as a summary Dataset"""
    converted = convert(plot, table, classname=classname, instancename=instancename)
    header = plot.header
    ds = summary_dataset(case, header.start_date, header.grid, converted)
    ds.attrs["unit_system"] = header.unit_system.tag.strip()
    return ds, converted


def _has_netcdf4() -> bool:
    try:
        import netCDF4  # noqa: F401
    except ImportError:
        return False
    return True


def nc_encoding(ds: xr.Dataset, complevel: int) -> dict | None:
    """NetCDF encoding dict with zlib compression, or None if disabled"""
    if complevel <= 0 or not _has_netcdf4():
        return None
    return {var: {"zlib": True, "complevel": complevel} for var in ds.data_vars}


def write_summary(
    case: str,
    plot: NexusPlot,
    output: str | Path,
    table: Mapping[str, str] | None = None,
    classname: str = "FIELD",
    instancename: str = "NETWORK",
    compression: int = 5,
) -> ConvertedSeries:
    """Convert ``plot`` and persist the summary to a NetCDF file

    Returns:
        The ConvertedSeries that was written
    """
    ds, converted = plot_summary_dataset(
        case, plot, table, classname=classname, instancename=instancename
    )
    logger.info(
        "Writing %d keywords over %d timesteps to %s",
        len(converted.series),
        converted.num_timesteps,
        output,
    )
    ds.to_netcdf(str(output), encoding=nc_encoding(ds, compression))
    return converted
