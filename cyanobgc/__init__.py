"""Cyanobacteriota BGC statistics and figures."""

__version__ = "1.0.0"
