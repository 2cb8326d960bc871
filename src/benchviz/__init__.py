"""
benchviz: visualize benchmark comparison reports.

Reads benchcmp-style old/new comparison tables and draws them as an SVG
diverging bar chart or inline list, one row per benchmark case.
"""

from benchviz.canvas import Canvas
from benchviz.geometry import Geometry, load_geometry
from benchviz.parser import Section, classify_line
from benchviz.visualize import Session, visualize

__all__ = [
    "Canvas",
    "Geometry",
    "Section",
    "Session",
    "classify_line",
    "load_geometry",
    "visualize",
]
