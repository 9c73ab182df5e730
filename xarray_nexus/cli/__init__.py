"""Command line tools for xarray-nexus"""
