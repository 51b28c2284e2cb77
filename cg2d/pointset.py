from __future__ import annotations
import logging
from itertools import count
from typing import Hashable, Iterable, Iterator, List, Optional, Tuple

from .geom import Pt
from .hull import convex_hull, classify_hull, describe_hull, hull_membership

logger = logging.getLogger(__name__)


class PointSet:
    """
    Сховище точок (додати / змінити / видалити) з кешованою оболонкою.

    Кожна мутація:
      - будує новий кортеж-знімок точок;
      - перераховує оболонку на цьому знімку;
      - лише після успіху фіксує і точки, і оболонку.
    Якщо перерахунок кинув InvalidCoordinate, стан не змінюється, а виняток іде далі.
    Не потокобезпечний: одна множина, один власник.
    """

    def __init__(self, points: Optional[Iterable[Pt]] = None):
        self._ids = count(1)
        self._points: Tuple[Pt, ...] = ()
        self._hull: List[Pt] = []
        self.version = 0
        initial = self._assign_ids(points) if points is not None else ()
        if initial:
            self._commit(initial)

    # ---------------- Стан ----------------
    @property
    def points(self) -> Tuple[Pt, ...]:
        return self._points

    @property
    def hull(self) -> List[Pt]:
        return self._hull[:]

    @property
    def label(self) -> str:
        return classify_hull(self._hull)

    @property
    def description(self) -> str:
        return describe_hull(self._hull)

    def membership(self) -> List[bool]:
        return hull_membership(self._points, self._hull)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Pt]:
        return iter(self._points)

    def __contains__(self, pid: Hashable) -> bool:
        return self._index(pid) is not None

    def get(self, pid: Hashable) -> Pt:
        i = self._index(pid)
        if i is None:
            raise KeyError(pid)
        return self._points[i]

    # ---------------- Мутації ----------------
    def add(self, x: float, y: float, pid: Optional[Hashable] = None) -> Pt:
        if pid is None:
            pid = self._next_id()
        elif pid in self:
            raise ValueError(f"Duplicate point id: {pid!r}")
        p = Pt(x, y, pid)
        self._commit(self._points + (p,))
        return p

    def edit(self, pid: Hashable, x: float, y: float) -> Pt:
        i = self._index(pid)
        if i is None:
            raise KeyError(pid)
        p = Pt(x, y, pid)
        self._commit(self._points[:i] + (p,) + self._points[i + 1:])
        return p

    def delete(self, pid: Hashable) -> Pt:
        i = self._index(pid)
        if i is None:
            raise KeyError(pid)
        old = self._points[i]
        self._commit(self._points[:i] + self._points[i + 1:])
        return old

    def clear(self) -> None:
        self._commit(())

    # ---------------- Внутрішні методи ----------------
    def _next_id(self, taken: Iterable[Hashable] = ()) -> str:
        while True:
            pid = f"p{next(self._ids)}"
            if pid not in self and pid not in taken:
                return pid

    def _assign_ids(self, points: Iterable[Pt]) -> Tuple[Pt, ...]:
        """Початковий набір: повтор id -> ValueError, точки без id отримують згенерований."""
        pts = list(points)
        taken: set = set()
        for p in pts:
            if p.id is None:
                continue
            if p.id in taken:
                raise ValueError(f"Duplicate point id: {p.id!r}")
            taken.add(p.id)
        out: List[Pt] = []
        for p in pts:
            if p.id is None:
                pid = self._next_id(taken)
                taken.add(pid)
                p = Pt(p.x, p.y, pid)
            out.append(p)
        return tuple(out)

    def _index(self, pid: Hashable) -> Optional[int]:
        for i, p in enumerate(self._points):
            if p.id == pid:
                return i
        return None

    def _commit(self, snapshot: Tuple[Pt, ...]) -> None:
        hull = convex_hull(snapshot)  # InvalidCoordinate -> нічого не фіксуємо
        self._points = snapshot
        self._hull = hull
        self.version += 1
        logger.debug("point set v%d: %d point(s), hull %s",
                     self.version, len(snapshot), classify_hull(hull))
