"""Huck - ultimate tactics heat maps and AI positioning."""

__version__ = "0.1.0"
