"""
Setup script for xarray-nexus
"""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
readme_file = Path(__file__).parent / "README.md"
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")
else:
    long_description = "Decode Nexus reservoir simulator plot files into xarray summaries"

setup(
    name="xarray-nexus",
    version="0.1",
    description="Decode Nexus plot files and convert them to keyword summaries",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["xarray_nexus", "xarray_nexus.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.13",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20",
        "xarray>=2022.3.0",
    ],
    extras_require={
        "netcdf": [
            "netCDF4",
        ],
        "dev": [
            "pytest>=7.0",
            "pytest-cov",
            "scipy",
            "ruff>=0.8.0",
            "mypy>=1.13",
        ],
    },
    entry_points={
        "console_scripts": [
            "xnex=xarray_nexus.cli.main:main",
            "nex2nc=xarray_nexus.cli.nex2nc:main",
        ],
        "xarray.backends": [
            "nexus=xarray_nexus.backend:NexusBackendEntrypoint",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
