"""
Xarray backend engine for Nexus plot files
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
import xarray as xr
from xarray.backends import BackendEntrypoint
from xarray.backends.common import AbstractDataStore

from .errors import BadHeader
from .reader import NexusPlot, load
from .summary import plot_summary_dataset

logger = logging.getLogger(__name__)


class NexusDataStore(AbstractDataStore):
    """Flat sample table of a plot file, one row per decoded value"""

    def __init__(self, filename: str | Path):
        self.filename = Path(filename)
        self.plot: NexusPlot = load(self.filename)

    def get_variables(self) -> dict[str, xr.Variable]:
        samples = self.plot.samples
        dims = ("sample",)

        def column(values, dtype, **attrs):
            return xr.Variable(dims, np.array(values, dtype=dtype), attrs=attrs)

        return {
            "timestep": column([s.timestep for s in samples], np.int32),
            "time": column([s.time for s in samples], np.float32, units="DAY"),
            "max_perfs": column([s.max_perfs for s in samples], np.int32),
            "classname": column([s.classname.text for s in samples], "U8"),
            "instancename": column([s.instancename.text for s in samples], "U8"),
            "varname": column([s.varname.text for s in samples], "U4"),
            "value": column([s.value for s in samples], np.float32),
        }

    def get_attrs(self) -> dict[str, Any]:
        header = self.plot.header
        attrs = {
            "unit_system": header.unit_system.tag.strip(),
            "day": header.day,
            "month": header.month,
            "year": header.year,
            "nx": header.nx,
            "ny": header.ny,
            "nz": header.nz,
            "ncomp": header.ncomp,
            "source_file": str(self.filename),
        }
        try:
            attrs["start_date"] = header.start_date.isoformat()
        except BadHeader:
            logger.warning("%s has no valid start date", self.filename)
        return attrs

    def get_dimensions(self) -> dict[str, int]:
        return {"sample": len(self.plot)}


class NexusBackendEntrypoint(BackendEntrypoint):
    """Xarray backend entrypoint for Nexus plot files"""

    description = "Backend for reading Nexus reservoir simulator plot files"
    open_dataset_parameters = (
        "filename_or_obj",
        "drop_variables",
        "kind",
        "case",
        "classname",
        "instancename",
        "table",
    )

    def open_dataset(  # type: ignore[override]
        self,
        filename_or_obj: str | Path,
        *,
        drop_variables: tuple[str] | None = None,
        kind: str = "summary",
        case: str | None = None,
        classname: str = "FIELD",
        instancename: str = "NETWORK",
        table: dict | None = None,
    ) -> xr.Dataset:
        """Open a plot file as an xarray Dataset

        Parameters
        ----------
        filename_or_obj : str or Path
            Path to the plot file
        drop_variables : tuple of str, optional
            Variables to drop from the dataset
        kind : {"summary", "samples"}, default "summary"
            ``summary`` converts the selected class/instance into keyword
            series; ``samples`` returns every decoded value as a flat table
        case : str, optional
            Case name for the summary, defaults to the file stem
        classname, instancename : str
            Series to convert when ``kind="summary"``
        table : dict, optional
            Variable code to keyword mapping

        Returns
        -------
        dataset : xarray.Dataset
        """
        filename = Path(filename_or_obj)
        store = NexusDataStore(filename)

        if kind == "samples":
            dataset = xr.Dataset(store.get_variables(), attrs=store.get_attrs())
        elif kind == "summary":
            dataset, _ = plot_summary_dataset(
                case or filename.stem,
                store.plot,
                table,
                classname=classname,
                instancename=instancename,
            )
            dataset.attrs["source_file"] = str(filename)
        else:
            raise ValueError(f"Unknown kind {kind!r}, expected 'summary' or 'samples'")

        if drop_variables:
            dataset = dataset.drop_vars(
                [v for v in drop_variables if v in dataset.data_vars]
            )

        return dataset

    def guess_can_open(self, filename_or_obj: str | Path) -> bool:  # type: ignore[override]
        """Guess from the ``.plt`` extension"""
        try:
            return Path(filename_or_obj).suffix.lower() == ".plt"
        except (TypeError, AttributeError):
            return False


def open_nexus_dataset(
    filename: str | Path,
    kind: str = "summary",
    case: str | None = None,
    classname: str = "FIELD",
    instancename: str = "NETWORK",
    table: dict | None = None,
    drop_variables: list | None = None,
) -> xr.Dataset:
    """Open a plot file as an xarray Dataset

    This is a convenience function that uses the nexus backend.

    Examples
    --------
    >>> import xarray_nexus as xnex
    >>> ds = xnex.open_nexus_dataset('SPE1.plt')
    >>> print(ds['FOPR'])
    """
    return xr.open_dataset(
        filename,
        engine=NexusBackendEntrypoint,
        kind=kind,
        case=case,
        classname=classname,
        instancename=instancename,
        table=table,
        drop_variables=drop_variables,
    )
