"""Visualization utilities for inspection and reporting."""

from .spectrum import plot_spectrum, save_waterfall

__all__ = ["plot_spectrum", "save_waterfall"]
