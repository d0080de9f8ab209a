"""Raster filling, rasterisation, and segment and polygon clipping algorithms."""

__version__ = "0.1.0"