"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from cg2d.geom import Pt


def xy(points) -> list[tuple[float, float]]:
    return [(p.x, p.y) for p in points]


SQUARE_WITH_CENTER = [
    Pt(0, 0, "0"),
    Pt(2, 0, "1"),
    Pt(2, 2, "2"),
    Pt(0, 2, "3"),
    Pt(1, 1, "4"),
]

DIAMOND_WITH_ORIGIN = [
    Pt(-1.5, 0.0, "A"),
    Pt(0.0, -2.25, "B"),
    Pt(1.5, 0.0, "C"),
    Pt(0.0, 2.25, "D"),
    Pt(0.0, 0.0, "E"),
]

# U-shape: D lies on the top edge, E is the reflex vertex
U_SHAPE = [
    Pt(0, 0, "A"),
    Pt(2, 0, "B"),
    Pt(2, 2, "C"),
    Pt(1, 2, "D"),
    Pt(1, 1, "E"),
    Pt(0, 2, "F"),
]


@pytest.fixture
def square_with_center() -> list[Pt]:
    return list(SQUARE_WITH_CENTER)


@pytest.fixture
def diamond_with_origin() -> list[Pt]:
    return list(DIAMOND_WITH_ORIGIN)


@pytest.fixture
def u_shape() -> list[Pt]:
    return list(U_SHAPE)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240611)
