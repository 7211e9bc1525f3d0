"""Scalar helpers, chunk-space conversions and a voxel raycast."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from orangekit.vectors import Vec3

__all__ = [
    "E",
    "PI",
    "PI_DIV_2",
    "PI_DIV_4",
    "clamp",
    "wrap",
    "sign",
    "decimal",
    "degrees_to_radians",
    "radians_to_degrees",
    "hash_key_from_chunk_position",
    "world_to_chunk_space",
    "chunk_to_world_space",
    "lerp",
    "cubic_s_curve",
    "quintic_s_curve",
    "raycast",
]

E = 2.71828182845904
PI = 3.14159265358979
PI_DIV_2 = 1.57079632679489
PI_DIV_4 = 0.78539816339744

_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1


def clamp(value, min_value, max_value):
    """Limit ``value`` to ``[min_value, max_value]``; the lower bound wins on conflict."""
    return max(min(value, max_value), min_value)


def wrap(value, low, high):
    """Fold a value that lies past one bound back in from the other bound."""
    if value < low:
        return high - (low - value)
    if value > high:
        return low + (value - high)
    return value


def sign(value) -> int:
    """Return -1, 0 or 1 according to the sign of ``value``."""
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def decimal(value: float) -> float:
    """The absolute fractional part of ``value``."""
    return abs(value - int(value))


def degrees_to_radians(degrees: float) -> float:
    return degrees * (PI / 180.0)


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / PI)


def hash_key_from_chunk_position(chunk_pos: Sequence[float]) -> int:
    """Pack a chunk position into a key unique for 16-bit coordinates."""
    x, y, z = (int(c) for c in chunk_pos)
    for c in (x, y, z):
        if not _INT16_MIN <= c <= _INT16_MAX:
            raise ValueError(f"chunk coordinate {c} does not fit in 16 bits")
    return (
        ((x << 32) & 0x0000FFFF00000000)
        | ((y << 16) & 0x00000000FFFF0000)
        | (z & 0x000000000000FFFF)
    )


def _chunk_axis(value: float, chunk_size: float) -> float:
    converted = value / chunk_size
    if converted < 0.0 and decimal(converted) != 0.0:
        converted -= 1.0
    return float(int(converted))


def world_to_chunk_space(pos: Sequence[float], chunk_size: float) -> Vec3:
    """The chunk that holds the world position ``pos``."""
    x, y, z = pos
    return Vec3(
        _chunk_axis(x, chunk_size),
        _chunk_axis(y, chunk_size),
        _chunk_axis(z, chunk_size),
    )


def chunk_to_world_space(pos: Sequence[float], chunk_size: float) -> Vec3:
    """The world position of the corner of chunk ``pos`` (whole numbers)."""
    x, y, z = pos
    return Vec3(x * chunk_size, y * chunk_size, z * chunk_size)


def lerp(a, b, ratio):
    return (b - a) * ratio + a


def _check_unit(x: float) -> None:
    if not 0.0 <= x <= 1.0:
        raise ValueError(f"{x} is outside [0, 1]")


def cubic_s_curve(x: float) -> float:
    """Smoothstep of ``x`` in ``[0, 1]``."""
    _check_unit(x)
    return x * x * (3.0 - 2.0 * x)


def quintic_s_curve(x: float) -> float:
    """Smootherstep of ``x`` in ``[0, 1]``."""
    _check_unit(x)
    return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)


def _unit_step(d: float, a: float, b: float, max_dist: float) -> float:
    if d == 0.0:
        return max_dist
    return math.sqrt(1.0 + (a / d) ** 2 + (b / d) ** 2)


def _initial_length(pos: float, direction: float, cell: float, unit: float) -> float:
    if direction < 0.0:
        if pos >= 0.0:
            return (pos - cell) * unit
        return (pos - (cell - 1.0)) * unit
    if pos >= 0.0:
        return (cell + 1.0 - pos) * unit
    return (cell - pos) * unit


def _voxel_axis(h: float) -> float:
    if int(h) != h and h < 0.0:
        return float(int(h - 1.0))
    return float(int(h))


def raycast(
    ray_pos: Sequence[float],
    ray_dir: Sequence[float],
    max_dist: float,
    check_hit: Callable[[Vec3], bool],
) -> Vec3 | None:
    """Walk voxel faces along a ray and return the first point whose voxel ``check_hit`` accepts."""
    px, py, pz = ray_pos
    dx, dy, dz = ray_dir
    pos = (px, py, pz)
    direction = (dx, dy, dz)

    unit = (
        _unit_step(dx, dy, dz, max_dist),
        _unit_step(dy, dx, dz, max_dist),
        _unit_step(dz, dx, dy, max_dist),
    )
    cells = [float(int(c)) for c in pos]
    lengths = [
        _initial_length(p, d, c, u) for p, d, c, u in zip(pos, direction, cells, unit)
    ]

    travelled = 0.0
    while travelled < max_dist:
        axis = min(range(3), key=lengths.__getitem__)
        travelled = lengths[axis]
        lengths[axis] += unit[axis]

        hit = [p + d * travelled for p, d in zip(pos, direction)]
        voxel = [_voxel_axis(h) for h in hit]

        # When the hit sits on a face, the voxel behind it depends on direction.
        for i in range(3):
            if hit[i] == voxel[i]:
                if direction[i] < 0:
                    voxel[i] -= 1.0
                break

        if check_hit(Vec3(*voxel)):
            return Vec3(*hit)

    return None