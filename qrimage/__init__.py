"""Render QR Code module matrices as PNG, XPM, EPS, SVG and terminal text."""

__version__ = "4.1.1"

__all__ = ["options", "symbol", "raster", "vector", "text", "output"]