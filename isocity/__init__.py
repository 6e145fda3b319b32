"""Isometric city-building pieces: points, geometry, camera, settings, tiles and terrain data."""

__version__ = "0.4.0"