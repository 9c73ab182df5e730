#!/usr/bin/env python3
"""
Simple example: Load a Nexus plot file

This example decodes a plot file, prints its catalog, and converts the
field series into an xarray summary Dataset.
"""

import xarray_nexus as xnex

plot = xnex.load("path/to/your/CASE.plt")

header = plot.header
print("Unit system:", header.unit_system.tag)
print("Start date:", header.start_date.date())
print("Grid:", header.grid)
print("Samples:", len(plot))

for classname in plot.classnames():
    print(f"\n{classname}: {', '.join(plot.varnames(classname))}")
    print(f"  instances: {', '.join(plot.instancenames(classname))}")

# Field level series, one variable per summary keyword
ds = xnex.open_nexus_dataset("path/to/your/CASE.plt")
for keyword in ds.data_vars:
    print(f"{keyword} [{ds[keyword].attrs['units']}]: {ds[keyword].values}")

# Every decoded value as a flat table
samples = xnex.open_nexus_dataset("path/to/your/CASE.plt", kind="samples")
print(samples)

ds.to_netcdf("CASE_summary.nc")
print("\nSaved to CASE_summary.nc")
