from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Sequence

from .geom import Pt, EPS, require_finite, unique_points
from .predicates import cross, point_in_convex_polygon

logger = logging.getLogger(__name__)


# ---------------- Нормалізація ----------------
def normalize(points: Iterable[Pt]) -> List[Pt]:
    """
    Перевірка координат + дедуплікація (перше входження лишається).
    0 / 1 / 2 точки повертаються без змін, у порядку входу, навіть якщо вони збігаються.
    Від 3 точок дублікати прибираються; порядок входу зберігається.
    """
    pts = list(points)
    require_finite(pts)
    if len(pts) <= 2:
        return pts
    distinct = unique_points(pts)
    if len(distinct) != len(pts):
        logger.debug("dropped %d duplicate point(s)", len(pts) - len(distinct))
    return distinct


# ---------------- Monotone chain ----------------
def _half_chain(points: Iterable[Pt]) -> List[Pt]:
    """Один ланцюг: стек, знімаємо вершину, поки поворот не строго лівий."""
    chain: List[Pt] = []
    for p in points:
        while len(chain) >= 2 and cross(chain[-2], chain[-1], p) <= 0:
            chain.pop()
        chain.append(p)
    return chain


def monotone_chain(points: Sequence[Pt]) -> List[Pt]:
    """
    Внутрішній будівник: алгоритм Ендрю для >= 3 попарно різних точок.
    Тотальна точка входу (будь-яка кількість точок, дублікати) це convex_hull.

    Сортуємо за (x, y), будуємо нижній ланцюг зліва направо і верхній справа наліво.
    Останні точки ланцюгів дублюють перші точки одне одного (крайні точки), тож їх відкидаємо.
    Результат: CCW-обхід від найлівішої (потім найнижчої) точки.
    Умова `<= 0` викидає колінеарні точки всередині ребер: усі точки на одній прямій
    дають рівно два кінці.
    """
    if len(points) < 3:
        raise ValueError("Need at least 3 distinct points")
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    lower = _half_chain(ordered)
    upper = _half_chain(reversed(ordered))
    return lower[:-1] + upper[:-1]


# ---------------- Публічний API ----------------
def convex_hull(points: Iterable[Pt]) -> List[Pt]:
    """
    Повний пайплайн: нормалізація -> (тривіальний випадок або) monotone chain.

    0 / 1 / 2 точки входу повертаються як є, у порядку входу (без дедуплікації).
    Якщо після дедуплікації лишилось <= 2 різні точки, повертаються вони.
    Кидає InvalidCoordinate, якщо є NaN/±inf.
    """
    distinct = normalize(points)
    if len(distinct) <= 2:
        return distinct
    hull = monotone_chain(distinct)
    logger.debug("hull of %d point(s) has %d vertices", len(distinct), len(hull))
    return hull


def classify_hull(hull: Sequence[Pt]) -> str:
    n = len(hull)
    if n == 0:
        return "empty"
    if n == 1:
        return "point"
    if n == 2:
        return "segment"
    if n == 3:
        return "triangle"
    if n == 4:
        return "quadrilateral"
    return f"polygon({n})"


def describe_hull(hull: Sequence[Pt]) -> str:
    """Текст для відображення типу оболонки."""
    n = len(hull)
    if n == 0:
        return "No hull (empty set)"
    if n == 1:
        return "Point"
    if n == 2:
        return "Segment"
    if n == 3:
        return "Triangle"
    if n == 4:
        return "Quadrilateral"
    return f"Polygon ({n} vertices)"


def hull_membership(points: Iterable[Pt], hull: Iterable[Pt]) -> List[bool]:
    """Для кожної точки входу: чи є вона вершиною оболонки (за координатами, не за id)."""
    keys = {p.key() for p in hull}
    return [p.key() in keys for p in points]


def polygon_area(polygon: Sequence[Pt]) -> float:
    """Площа за формулою шнурка; для CCW додатна, для вироджених оболонок 0."""
    n = len(polygon)
    if n < 3:
        return 0.0
    s = 0.0
    for i in range(n):
        a = polygon[i]
        b = polygon[(i + 1) % n]
        s += a.x*b.y - b.x*a.y
    return 0.5 * s


class ConvexHull2D:
    """
    Опукла оболонка як об'єкт: знімок входу + обчислені вершини.

    Вхід: будь-яка кількість Pt (скінченні координати).
    Вершини рахуються один раз у конструкторі; об'єкт незмінний за змістом,
    при зміні множини точок будуємо новий.
    """

    def __init__(self, points: Iterable[Pt], eps: float = EPS):
        self.P: List[Pt] = list(points)  # знімок
        self.eps = eps
        self._hull: List[Pt] = convex_hull(self.P)

    def __len__(self) -> int:
        return len(self._hull)

    def vertices(self) -> List[Pt]:
        return self._hull[:]

    def label(self) -> str:
        return classify_hull(self._hull)

    def description(self) -> str:
        return describe_hull(self._hull)

    def membership(self) -> List[bool]:
        return hull_membership(self.P, self._hull)

    def area(self) -> float:
        return polygon_area(self._hull)

    def contains(self, p: Pt) -> bool:
        return point_in_convex_polygon(p, self._hull, self.eps)

    # ---------------- Діагностика ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - для >= 3 вершин жодна не повторюється (за координатами; 2 точки входу повертаються як є);
          - для >= 3 вершин кожен поворот строго лівий;
          - обхід починається з найлівішої (потім найнижчої) вершини;
          - кожна точка входу лежить усередині або на межі.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        h = self._hull
        n = len(h)

        counts: Dict[tuple, int] = {}
        for p in (h if n >= 3 else ()):
            counts[p.key()] = counts.get(p.key(), 0) + 1
        duplicates = [k for k, c in counts.items() if c > 1]

        bad_turns: List[int] = []
        if n >= 3:
            for i in range(n):
                if cross(h[i - 1], h[i], h[(i + 1) % n]) <= 0:
                    bad_turns.append(i)

        bad_start: List[tuple] = []
        if n >= 3:
            lowest = min(h, key=lambda p: (p.x, p.y))
            if h[0].key() != lowest.key():
                bad_start.append(h[0].key())

        outside = [p for p in self.P if not point_in_convex_polygon(p, h, self.eps)]

        return {
            "vertices": n,
            "label": classify_hull(h),
            "duplicate_vertices": duplicates,
            "bad_turns": bad_turns,
            "bad_start": bad_start,
            "outside_points": outside,
        }
