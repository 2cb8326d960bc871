"""
Tests for geometry and configuration loading.
"""

import pytest

from benchviz.geometry import Geometry, load_geometry


def test_defaults(geometry):
    assert (geometry.width, geometry.height) == (1024, 768)
    assert (geometry.top, geometry.left, geometry.vp) == (50, 100, 512)
    assert geometry.vwidth == 300
    assert geometry.bar_height == 20
    assert geometry.speedup_max == 10.0
    assert geometry.delta_max == 100.0
    assert (geometry.scolor, geometry.rcolor) == ("green", "red")
    assert geometry.style == "bar"
    assert geometry.coltitle is True
    assert geometry.dolines is False
    assert geometry.coldata is False
    assert geometry.highlight_threshold == 2.0


@pytest.mark.parametrize(
    "bar_height,vspacing", [(20, 26), (12, 16), (3, 4), (1, 1)]
)
def test_vspacing(bar_height, vspacing):
    assert Geometry(bar_height=bar_height).vspacing == vspacing


def test_zero_point_is_offset_from_left_margin():
    assert Geometry(left=80, vp=400).zero_point == 480


def test_geometry_is_immutable(geometry):
    with pytest.raises(AttributeError):
        geometry.width = 10


@pytest.mark.parametrize(
    "kwargs",
    [
        {"delta_max": 0},
        {"speedup_max": -1.0},
        {"bar_height": 0},
        {"style": "pie"},
    ],
)
def test_invalid_geometry(kwargs):
    with pytest.raises(ValueError):
        Geometry(**kwargs)


# ===== CONFIG LOADING TESTS =====


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "benchviz.yaml"
    path.write_text("width: 800\ntitle: from file\nrcolor: firebrick\ndolines: true\n")
    return path


def test_load_defaults():
    assert load_geometry() == Geometry()


def test_load_from_file(config_file):
    g = load_geometry(str(config_file))
    assert g.width == 800
    assert g.title == "from file"
    assert g.rcolor == "firebrick"
    assert g.dolines is True
    assert g.height == 768


def test_overrides_beat_file(config_file):
    g = load_geometry(str(config_file), {"width": 640, "rcolor": None, "title": None})
    assert g.width == 640
    assert g.rcolor == "firebrick"
    assert g.title == "from file"


def test_override_types_are_coerced():
    g = load_geometry(overrides={"delta_max": 50, "coltitle": False})
    assert g.delta_max == 50.0
    assert g.coltitle is False


def test_unknown_config_key(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("colour: blue\n")
    with pytest.raises(RuntimeError, match="Failed to load configuration"):
        load_geometry(str(path))


def test_bad_config_type():
    with pytest.raises(RuntimeError):
        load_geometry(overrides={"width": "wide"})


def test_invalid_values_raise_value_error():
    with pytest.raises(ValueError):
        load_geometry(overrides={"speedup_max": 0.0})


@pytest.mark.parametrize(
    "kwargs",
    [
        {"delta_max": float("nan")},
        {"delta_max": float("inf")},
        {"speedup_max": float("nan")},
        {"speedup_max": float("inf")},
    ],
)
def test_non_finite_maxima_rejected(kwargs):
    with pytest.raises(ValueError, match="max must be positive"):
        Geometry(**kwargs)


def test_non_finite_maximum_from_config(tmp_path):
    path = tmp_path / "nan.yaml"
    path.write_text("delta_max: .nan\n")
    with pytest.raises(ValueError, match="delta max must be positive"):
        load_geometry(str(path))
