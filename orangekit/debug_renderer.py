"""A CPU-side buffer of coloured line vertices for debug drawing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = ["ColoredVertex", "DebugRenderer", "DEFAULT_CAPACITY"]

DEFAULT_CAPACITY = 250000

Point = tuple[float, float, float]
Color = tuple[float, float, float, float]

_GOLDEN = (1.0 + math.sqrt(5.0)) / 2.0

_ICOSAHEDRON_VERTICES: tuple[Point, ...] = (
    (-1.0, _GOLDEN, 0.0),
    (1.0, _GOLDEN, 0.0),
    (-1.0, -_GOLDEN, 0.0),
    (1.0, -_GOLDEN, 0.0),
    (0.0, -1.0, _GOLDEN),
    (0.0, 1.0, _GOLDEN),
    (0.0, -1.0, -_GOLDEN),
    (0.0, 1.0, -_GOLDEN),
    (_GOLDEN, 0.0, -1.0),
    (_GOLDEN, 0.0, 1.0),
    (-_GOLDEN, 0.0, -1.0),
    (-_GOLDEN, 0.0, 1.0),
)

_ICOSAHEDRON_FACES: tuple[tuple[int, int, int], ...] = (
    # Five faces around point 0
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    # Five adjacent faces
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    # Five faces around point 3
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    # Five adjacent faces
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
)

_OCTAGON_VERTICES: tuple[Point, ...] = (
    (0.0, 0.0, -1.0),
    (1.0, 0.0, -1.0),
    (1.0, 0.0, 0.0),
    (1.0, 0.0, 1.0),
    (0.0, 0.0, 1.0),
    (-1.0, 0.0, 1.0),
    (-1.0, 0.0, 0.0),
    (-1.0, 0.0, -1.0),
)


@dataclass(frozen=True)
class ColoredVertex:
    """One end of a debug line: a position and an RGBA colour."""

    pos: Point
    color: Color


def _point(values: Iterable[float]) -> Point:
    x, y, z = values
    return (float(x), float(y), float(z))


def _color(values: Iterable[float]) -> Color:
    r, g, b, a = values
    return (float(r), float(g), float(b), float(a))


class _SphereGeometry:
    """Vertices projected onto a sphere, with cached edge midpoints."""

    def __init__(self, radius: float) -> None:
        self.radius = radius
        self.points: list[Point] = []
        self._midpoints: dict[tuple[int, int], int] = {}

    def add(self, vert: Sequence[float]) -> int:
        x, y, z = vert
        length = math.sqrt(x * x + y * y + z * z)
        scale = self.radius / length
        self.points.append((x * scale, y * scale, z * scale))
        return len(self.points) - 1

    def middle(self, a: int, b: int) -> int:
        key = (min(a, b), max(a, b))
        cached = self._midpoints.get(key)
        if cached is not None:
            return cached
        p, q = self.points[a], self.points[b]
        index = self.add(tuple((u + v) / 2.0 for u, v in zip(p, q)))
        self._midpoints[key] = index
        return index

    def at(self, index: int, offset: Point) -> Point:
        p = self.points[index]
        return (p[0] + offset[0], p[1] + offset[1], p[2] + offset[2])


class DebugRenderer:
    """Collects line vertices up to a fixed capacity until cleared."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._vertices: list[ColoredVertex] = []

    def _add_line(self, a: Point, b: Point, color_a: Color, color_b: Color) -> None:
        # A line that does not fit is dropped silently.
        if len(self._vertices) + 2 > self._capacity:
            return
        self._vertices.append(ColoredVertex(a, color_a))
        self._vertices.append(ColoredVertex(b, color_b))

    def draw_line(
        self,
        start: Sequence[float],
        end: Sequence[float],
        start_color: Sequence[float],
        end_color: Sequence[float] | None = None,
    ) -> None:
        """Add a line; ``end_color`` defaults to ``start_color``."""
        first = _color(start_color)
        second = first if end_color is None else _color(end_color)
        self._add_line(_point(start), _point(end), first, second)

    def draw_sphere(
        self,
        level_of_detail: int,
        position: Sequence[float],
        radius: float,
        color: Sequence[float],
    ) -> None:
        """Add the edges of an icosphere subdivided ``level_of_detail`` times."""
        pos = _point(position)
        col = _color(color)
        geometry = _SphereGeometry(radius)
        for vert in _ICOSAHEDRON_VERTICES:
            geometry.add(vert)

        faces = list(_ICOSAHEDRON_FACES)
        for _ in range(level_of_detail):
            subfaces = []
            for v1, v2, v3 in faces:
                a = geometry.middle(v1, v2)
                b = geometry.middle(v2, v3)
                c = geometry.middle(v1, v3)
                subfaces.extend(((v1, a, c), (v2, b, a), (v3, c, b), (a, b, c)))
            faces = subfaces

        for v1, v2, v3 in faces:
            p1, p2, p3 = (geometry.at(i, pos) for i in (v1, v2, v3))
            self._add_line(p1, p2, col, col)
            self._add_line(p2, p3, col, col)
            self._add_line(p1, p3, col, col)

    def draw_circle(
        self,
        level_of_detail: int,
        position: Sequence[float],
        radius: float,
        color: Sequence[float],
    ) -> None:
        """Add a horizontal circle built from an octagon subdivided ``level_of_detail`` times."""
        pos = _point(position)
        col = _color(color)
        geometry = _SphereGeometry(radius)
        for vert in _OCTAGON_VERTICES:
            geometry.add(vert)

        count = len(_OCTAGON_VERTICES)
        edges = [(i, (i + 1) % count) for i in range(count)]
        for _ in range(level_of_detail):
            subedges = []
            for v1, v2 in edges:
                mid = geometry.middle(v1, v2)
                subedges.extend(((v1, mid), (mid, v2)))
            edges = subedges

        for v1, v2 in edges:
            self._add_line(geometry.at(v1, pos), geometry.at(v2, pos), col, col)

    def draw_aabb(
        self,
        center: Sequence[float],
        extents: Sequence[float],
        color: Sequence[float],
    ) -> None:
        """Add the twelve edges of an axis-aligned box."""
        cx, cy, cz = _point(center)
        ex, ey, ez = _point(extents)
        col = _color(color)

        trb = (cx + ex, cy + ey, cz + ez)
        tlb = (cx - ex, cy + ey, cz + ez)
        trf = (cx + ex, cy + ey, cz - ez)
        tlf = (cx - ex, cy + ey, cz - ez)
        brb = (cx + ex, cy - ey, cz + ez)
        blb = (cx - ex, cy - ey, cz + ez)
        brf = (cx + ex, cy - ey, cz - ez)
        blf = (cx - ex, cy - ey, cz - ez)

        edges = (
            # top square
            (trb, tlb), (tlb, tlf), (tlf, trf), (trf, trb),
            # left
            (tlf, blf), (blf, blb), (blb, tlb),
            # right
            (trf, brf), (brf, brb), (brb, trb),
            # bottom
            (blf, brf), (blb, brb),
        )
        for a, b in edges:
            self._add_line(a, b, col, col)

    def clear(self) -> None:
        """Drop every vertex."""
        self._vertices.clear()

    def vertices(self) -> list[ColoredVertex]:
        """The vertices drawn so far, two per line, in drawing order."""
        return list(self._vertices)

    def vertex_count(self) -> int:
        return len(self._vertices)

    def capacity(self) -> int:
        return self._capacity