"""
Shared fixtures for benchviz tests.
"""

import io

import pytest

from benchviz.canvas import Canvas
from benchviz.geometry import Geometry
from benchviz.visualize import Session


@pytest.fixture
def geometry():
    """Default geometry."""
    return Geometry()


@pytest.fixture
def svg_out():
    """In-memory SVG output stream."""
    return io.StringIO()


@pytest.fixture
def make_session(svg_out):
    """Build a session over the in-memory stream with optional geometry tweaks."""

    def _make(**kwargs):
        return Session(Canvas(svg_out), Geometry(**kwargs))

    return _make


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def sample_report():
    """One delta row, a lone speedup header, one speedup row."""
    return (
        "BenchmarkFoo   1000 ns/op   800 ns/op   -20.00%\n"
        "speedup\n"
        "BenchmarkBar   1000 ns/op   500 ns/op   2.00x\n"
    )
