from __future__ import annotations
from dataclasses import dataclass, field
from math import isfinite
from typing import Hashable, Iterable, List, Optional, Tuple

EPS = 1e-9  # допуск лише для перевірок (contains/validate), не для побудови hull


class InvalidCoordinate(ValueError):
    """Нескінченна або NaN координата: порушення передумови, а не геометрія."""

    def __init__(self, point: "Pt"):
        self.point = point
        super().__init__(
            f"Point {point.id!r} has a non-finite coordinate: ({point.x}, {point.y})"
        )


@dataclass(frozen=True)
class Pt:
    """
    Точка на площині.
    id: ручка для викликача (наприклад, рядок у таблиці), на геометрію не впливає:
    рівність і хеш рахуються лише за (x, y).
    """
    x: float
    y: float
    id: Optional[Hashable] = field(default=None, compare=False)

    def __iter__(self):
        yield self.x; yield self.y

    def key(self) -> Tuple[float, float]:
        return (self.x, self.y)


def require_finite(points: Iterable[Pt]) -> None:
    """Кидає InvalidCoordinate на першій точці з NaN/±inf."""
    for p in points:
        if not (isfinite(p.x) and isfinite(p.y)):
            raise InvalidCoordinate(p)


def points_from_xy(coords: Iterable[Tuple[float, float]]) -> List[Pt]:
    """Пари (x, y) -> список Pt з id за порядковим номером (0, 1, 2, ...)."""
    return [Pt(x, y, i) for i, (x, y) in enumerate(coords)]


def unique_points(points: Iterable[Pt]) -> list[Pt]:
    """
    Дедуплікація за точною рівністю координат.
    Лишається перше входження (порядок входу зберігається), тож результат детермінований.
    """
    seen: dict[Tuple[float, float], Pt] = {}
    for p in points:
        k = p.key()
        if k not in seen:
            seen[k] = p
    return list(seen.values())
