"""
Geometry resolver: template dimensions to area, cut-length and preview shapes.

Pure Python math. Every call rebuilds the result from the input snapshot.
"""

from .resolver import resolve

__all__ = ["resolve"]
