# cg2d/predicates.py
from __future__ import annotations
from typing import Sequence

from .geom import Pt, EPS


def cross(a: Pt, b: Pt, c: Pt) -> float:
    """
    z-компонента (b - a) x (c - a).
      >0  a -> b -> c повертає ліворуч (CCW),
      <0  праворуч,
       0  колінеарні.
    Для цілих координат результат точний.
    """
    return (b.x - a.x)*(c.y - a.y) - (b.y - a.y)*(c.x - a.x)


def orientation(a: Pt, b: Pt, c: Pt, eps: float = 0.0) -> int:
    """Знак cross як -1 / 0 / 1; |cross| <= eps вважаємо колінеарністю."""
    v = cross(a, b, c)
    if v > eps:
        return 1
    if v < -eps:
        return -1
    return 0


def _on_segment(p: Pt, a: Pt, b: Pt, eps: float) -> bool:
    if abs(cross(a, b, p)) > eps:
        return False
    return (min(a.x, b.x) - eps <= p.x <= max(a.x, b.x) + eps
            and min(a.y, b.y) - eps <= p.y <= max(a.y, b.y) + eps)


def point_in_convex_polygon(p: Pt, polygon: Sequence[Pt], eps: float = EPS) -> bool:
    """
    Чи лежить p всередині або на межі опуклого CCW-многокутника.
    Вироджені випадки: 0 вершин не містить нічого, 1 містить лише саму точку, 2 дає відрізок.
    """
    n = len(polygon)
    if n == 0:
        return False
    if n == 1:
        q = polygon[0]
        return abs(p.x - q.x) <= eps and abs(p.y - q.y) <= eps
    if n == 2:
        return _on_segment(p, polygon[0], polygon[1], eps)
    # для CCW-обходу точка має бути не праворуч від жодного ребра
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        if cross(a, b, p) < -eps:
            return False
    return True
