"""Wireframe viewer for .fdf height maps: loading, isometric projection and drawing."""

__version__ = "0.1.0"