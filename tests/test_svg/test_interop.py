"""Tests for svgpathtools interop."""

import logging

import pytest
from svgpathtools import Line, QuadraticBezier, parse_path

from quadratize.cu2qu.approx import curve_to_quadratic
from quadratize.svg import (
    conic_to_path_data,
    cubic_from_segment,
    cubics_from_path_data,
    from_complex,
    spline_to_path,
    spline_to_path_data,
    to_complex,
)
from quadratize.types import Point
from tests.conftest import QUARTER_3, S_CURVE, S_CURVE_PATH


def test_complex_conversion():
    assert to_complex(Point(1.5, -2.0)) == complex(1.5, -2.0)
    assert from_complex(3 + 4j) == Point(3.0, 4.0)


def test_cubics_from_path_data_keeps_only_cubics():
    cubics = cubics_from_path_data(S_CURVE_PATH)
    assert len(cubics) == 2
    assert cubics[0] == S_CURVE
    assert cubics[1][0] == Point(50.0, 0.0)
    assert cubics[1][3] == Point(80.0, 0.0)


def test_cubics_from_path_data_warns_about_arcs(caplog):
    with caplog.at_level(logging.WARNING, logger="quadratize.svg"):
        cubics_from_path_data(S_CURVE_PATH)
    assert "Skipped 1 arc" in caplog.text


def test_cubic_from_segment_rejects_lines():
    with pytest.raises(TypeError):
        cubic_from_segment(Line(0j, 10 + 0j))


def test_spline_to_path_segments():
    spline = curve_to_quadratic(S_CURVE, 2.0)
    path = spline_to_path(spline)
    assert len(path) == 2
    assert all(isinstance(seg, QuadraticBezier) for seg in path)
    assert path.start == 0j
    assert path.end == 30 + 0j


def test_spline_to_path_data_parses_back():
    spline = curve_to_quadratic(S_CURVE, 2.0)
    parsed = parse_path(spline_to_path_data(spline))
    assert len(parsed) == len(spline)
    for seg, (p0, p1, p2) in zip(parsed, spline):
        assert isinstance(seg, QuadraticBezier)
        assert seg.start == pytest.approx(to_complex(p0))
        assert seg.control == pytest.approx(to_complex(p1))
        assert seg.end == pytest.approx(to_complex(p2))


def test_conic_to_path_data():
    parsed = parse_path(conic_to_path_data(QUARTER_3, 0.8))
    assert len(parsed) == 2
    assert parsed.start == pytest.approx(100 + 0j)
    assert parsed.end == pytest.approx(50 - 50j)
