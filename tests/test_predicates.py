"""Tests for the orientation primitive and point-in-polygon test."""

from __future__ import annotations

import pytest

from cg2d.geom import Pt
from cg2d.predicates import cross, orientation, point_in_convex_polygon

A = Pt(0, 0, "A")
B = Pt(1, 0, "B")
C_LEFT = Pt(1, 1, "C1")
C_RIGHT = Pt(1, -1, "C2")
C_COLLINEAR = Pt(2, 0, "C3")

SQUARE = [Pt(0, 0), Pt(2, 0), Pt(2, 2), Pt(0, 2)]


def test_cross_left_turn_is_positive():
    assert cross(A, B, C_LEFT) > 0


def test_cross_right_turn_is_negative():
    assert cross(A, B, C_RIGHT) < 0


def test_cross_collinear_is_exactly_zero():
    assert cross(A, B, C_COLLINEAR) == 0


def test_cross_value_is_twice_the_signed_triangle_area():
    assert cross(Pt(0, 0), Pt(4, 0), Pt(0, 3)) == 12
    assert cross(Pt(0, 0), Pt(0, 3), Pt(4, 0)) == -12


def test_cross_is_exact_for_large_integers():
    big = 10**20
    assert cross(Pt(0, 0), Pt(big, 1), Pt(big + 1, 1)) == -1
    assert cross(Pt(0, 0), Pt(big, big), Pt(3 * big, 3 * big)) == 0


def test_cross_ignores_ids():
    assert cross(Pt(0, 0, "x"), Pt(1, 0, "y"), Pt(1, 1, "z")) == cross(A, B, C_LEFT)


@pytest.mark.parametrize(
    "c, expected",
    [(C_LEFT, 1), (C_RIGHT, -1), (C_COLLINEAR, 0)],
)
def test_orientation_sign(c, expected):
    assert orientation(A, B, c) == expected


def test_orientation_tolerance_band():
    almost = Pt(2, 1e-12)
    assert orientation(A, B, almost) == 1
    assert orientation(A, B, almost, eps=1e-9) == 0


@pytest.mark.parametrize(
    "p, inside",
    [
        (Pt(1, 1), True),
        (Pt(0, 0), True),   # vertex
        (Pt(2, 1), True),   # on an edge
        (Pt(3, 1), False),
        (Pt(1, -0.5), False),
    ],
)
def test_point_in_square(p, inside):
    assert point_in_convex_polygon(p, SQUARE) is inside


def test_point_in_degenerate_polygons():
    assert point_in_convex_polygon(Pt(0, 0), []) is False
    assert point_in_convex_polygon(Pt(1, 1), [Pt(1, 1)]) is True
    assert point_in_convex_polygon(Pt(1, 2), [Pt(1, 1)]) is False

    seg = [Pt(0, 0), Pt(4, 4)]
    assert point_in_convex_polygon(Pt(2, 2), seg) is True
    assert point_in_convex_polygon(Pt(5, 5), seg) is False
    assert point_in_convex_polygon(Pt(2, 3), seg) is False
