# examples/plot_hull.py
from __future__ import annotations

import logging
import random
import sys

import matplotlib.pyplot as plt

from cg2d.geom import Pt, InvalidCoordinate
from cg2d.pointset import PointSet


def generate_random_points(n: int, size: float = 10.0):
    """
    Генерує n випадкових точок у квадраті [0,size]^2.
    """
    return [(random.uniform(0, size), random.uniform(0, size)) for _ in range(n)]


def parse_points_from_text(text: str):
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y або x, y.
    Повертає список (x,y) як float.
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue  # пропускаємо пусті строки і коментарі
        parts = line.replace(",", " ").split()
        if len(parts) != 2:
            raise ValueError(f"Line {lineno}: expected 2 numbers, got {len(parts)}")
        try:
            x, y = map(float, parts)
        except ValueError:
            raise ValueError(f"Line {lineno}: cannot parse numbers from '{line}'")
        points.append((x, y))
    return points


def plot_point_set(ax, points: list[Pt], hull: list[Pt], title: str) -> None:
    """
    Малює всі точки (вершини оболонки окремим стилем) і саму оболонку як замкнений контур.
    """
    ax.clear()
    hull_keys = {p.key() for p in hull}
    inner = [p for p in points if p.key() not in hull_keys]

    if inner:
        ax.scatter([p.x for p in inner], [p.y for p in inner], s=20, color="#6366F1", label="interior")
    if hull:
        # порядок оболонки = порядок малювання; замикаємо останню вершину на першу
        ring = hull + hull[:1]
        ax.plot([p.x for p in ring], [p.y for p in ring], color="#EF4444", linewidth=1.5)
        ax.scatter([p.x for p in hull], [p.y for p in hull], s=40, color="#EF4444", label="hull")

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(title)
    if points:
        ax.legend(loc="best")


def main(argv: list[str]) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if len(argv) > 1:
        with open(argv[1], encoding="utf-8") as f:
            raw = parse_points_from_text(f.read())
    else:
        raw = generate_random_points(30)

    ps = PointSet()
    for x, y in raw:
        try:
            ps.add(x, y)
        except InvalidCoordinate as e:
            logging.warning("skipped: %s", e)

    fig, ax = plt.subplots(figsize=(6, 6))
    plot_point_set(ax, list(ps.points), ps.hull, f"{ps.description}, {len(ps)} point(s)")
    plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
