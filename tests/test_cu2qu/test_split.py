"""Tests for cubic splitting and the distance-from-origin bound."""

import math

import pytest

from quadratize.coeffs import cubic_coefficients, eval_poly
from quadratize.cu2qu.split import farthest_fit_inside, split_into_n
from quadratize.types import Point
from tests.conftest import GENERIC_CUBIC

ZERO = Point(0.0, 0.0)


def _assert_close(p, q):
    assert p.x == pytest.approx(q.x, abs=1e-9)
    assert p.y == pytest.approx(q.y, abs=1e-9)


def test_split_into_one_is_the_curve():
    (piece,) = split_into_n(GENERIC_CUBIC, 1)
    for got, want in zip(piece, GENERIC_CUBIC):
        _assert_close(got, want)


@pytest.mark.parametrize("n", [2, 3, 7])
def test_split_into_n_pieces_are_continuous(n):
    pieces = split_into_n(GENERIC_CUBIC, n)
    assert len(pieces) == n
    assert pieces[0][0] == GENERIC_CUBIC[0]
    _assert_close(pieces[-1][3], GENERIC_CUBIC[3])
    for a, b in zip(pieces, pieces[1:]):
        _assert_close(a[3], b[0])


def test_split_pieces_follow_the_curve():
    n = 4
    coeffs = cubic_coefficients(GENERIC_CUBIC)
    for i, piece in enumerate(split_into_n(GENERIC_CUBIC, n)):
        p0, p1, p2, p3 = piece
        mid = (p0 + (p1 + p2) * 3.0 + p3) * 0.125
        x, y = eval_poly(coeffs, (i + 0.5) / n)
        _assert_close(mid, Point(float(x), float(y)))


def test_split_into_zero_raises():
    with pytest.raises(ValueError):
        split_into_n(GENERIC_CUBIC, 0)


def test_farthest_fit_inside_accepts_zero_curve():
    assert farthest_fit_inside((ZERO, ZERO, ZERO, ZERO), 0.0)


def test_farthest_fit_inside_fast_accept():
    bump = (ZERO, Point(10.0, 0.0), Point(10.0, 0.0), ZERO)
    assert farthest_fit_inside(bump, 100.0)


def test_farthest_fit_inside_rejects_far_midpoint():
    bump = (ZERO, Point(10.0, 0.0), Point(10.0, 0.0), ZERO)
    # The curve peaks at x = 7.5
    assert not farthest_fit_inside(bump, 1.0)
    assert not farthest_fit_inside(bump, 50.0)


def test_farthest_fit_inside_recurses_to_accept():
    bump = (ZERO, Point(10.0, 0.0), Point(10.0, 0.0), ZERO)
    assert farthest_fit_inside(bump, 60.0)


def test_farthest_fit_inside_rejects_nan():
    nan = Point(math.nan, math.nan)
    assert not farthest_fit_inside((ZERO, nan, nan, ZERO), 1e9)
