"""
cg2d: мінімальна бібліотека для 2D комп'ютерної геометрії.
Зараз: опукла оболонка (monotone chain Ендрю) + класифікація її форми.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, InvalidCoordinate, points_from_xy, unique_points
from cg2d.predicates import cross, orientation, point_in_convex_polygon
from cg2d.hull import (
    ConvexHull2D, classify_hull, convex_hull, describe_hull, hull_membership, polygon_area,
)
from cg2d.pointset import PointSet

__all__ = [
    "Pt", "EPS", "InvalidCoordinate", "points_from_xy", "unique_points",
    "cross", "orientation", "point_in_convex_polygon",
    "ConvexHull2D", "convex_hull", "classify_hull", "describe_hull",
    "hull_membership", "polygon_area",
    "PointSet", "__version__",
]
