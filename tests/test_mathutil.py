import math

import pytest

from orangekit.mathutil import (
    PI,
    PI_DIV_2,
    PI_DIV_4,
    chunk_to_world_space,
    clamp,
    cubic_s_curve,
    decimal,
    degrees_to_radians,
    hash_key_from_chunk_position,
    lerp,
    quintic_s_curve,
    radians_to_degrees,
    raycast,
    sign,
    wrap,
    world_to_chunk_space,
)
from orangekit.vectors import Vec3


@pytest.mark.parametrize("value, low, high, expected", [(5, 0, 10, 5), (-1, 0, 10, 0), (11, 0, 10, 10)])
def test_clamp(value, low, high, expected):
    assert clamp(value, low, high) == expected


@pytest.mark.parametrize("d", [1, 2, 3])
def test_wrap_above_high(d):
    low, high = 0, 10
    assert wrap(high + d, low, high) == low + d


@pytest.mark.parametrize("d", [1, 2, 3])
def test_wrap_below_low(d):
    low, high = 0, 10
    assert wrap(low - d, low, high) == high - d


def test_wrap_inside_unchanged():
    assert wrap(4, 0, 10) == 4


@pytest.mark.parametrize("value, expected", [(-3.5, -1), (0, 0), (2, 1)])
def test_sign(value, expected):
    assert sign(value) == expected


def test_decimal_is_fraction_magnitude():
    assert decimal(-2.25) == 0.25
    assert decimal(7.0) == 0.0


def test_degrees_radians_constants():
    assert degrees_to_radians(180.0) == pytest.approx(PI)
    assert degrees_to_radians(90.0) == pytest.approx(PI_DIV_2)
    assert degrees_to_radians(45.0) == pytest.approx(PI_DIV_4)


@pytest.mark.parametrize("deg", [-270.0, 0.0, 33.3, 720.0])
def test_degrees_round_trip(deg):
    assert radians_to_degrees(degrees_to_radians(deg)) == pytest.approx(deg)


def test_hash_key_z_alone():
    assert hash_key_from_chunk_position((0, 0, 123)) == 123


def test_hash_key_negative_x_fills_mask():
    assert hash_key_from_chunk_position((-1, 0, 0)) == 0x0000FFFF00000000


def test_hash_keys_distinct():
    positions = [(x, y, z) for x in (-2, 0, 3) for y in (-1, 0, 5) for z in (-7, 0, 9)]
    keys = {hash_key_from_chunk_position(p) for p in positions}
    assert len(keys) == len(positions)


def test_hash_key_overflow_rejected():
    with pytest.raises(ValueError):
        hash_key_from_chunk_position((40000, 0, 0))


@pytest.mark.parametrize("pos", [(-1.0, 0.5, 17.0), (-16.0, 31.9, -33.5), (0.0, -0.25, 100.0)])
def test_world_to_chunk_contains_position(pos):
    size = 16
    chunk = world_to_chunk_space(pos, size)
    corner = chunk_to_world_space(chunk, size)
    for c, p in zip(corner, pos):
        assert c <= p < c + size


@pytest.mark.parametrize("chunk", [(-1, 0, 2), (3, -4, 0)])
def test_chunk_world_round_trip(chunk):
    size = 16
    world = chunk_to_world_space(chunk, size)
    assert world_to_chunk_space(world, size) == Vec3(*chunk)


def test_lerp_endpoints():
    assert lerp(2.0, 9.0, 0.0) == 2.0
    assert lerp(2.0, 9.0, 1.0) == 9.0


@pytest.mark.parametrize("curve", [cubic_s_curve, quintic_s_curve])
def test_s_curve_endpoints_and_symmetry(curve):
    assert curve(0.0) == 0.0
    assert curve(1.0) == 1.0
    for x in (0.1, 0.3, 0.45):
        assert curve(x) + curve(1.0 - x) == pytest.approx(1.0)


@pytest.mark.parametrize("curve", [cubic_s_curve, quintic_s_curve])
def test_s_curve_out_of_range(curve):
    with pytest.raises(ValueError):
        curve(1.5)


def test_raycast_positive_direction_hits_target_voxel():
    visited = []

    def check(voxel):
        visited.append(voxel)
        return voxel.x >= 3

    hit = raycast((0.5, 0.5, 0.5), (1.0, 0.0, 0.0), 10.0, check)
    assert hit is not None and visited[-1].x >= 3
    assert math.floor(hit.x) == visited[-1].x
    assert (hit.y, hit.z) == (0.5, 0.5)


def test_raycast_negative_direction_uses_voxel_behind_face():
    visited = []

    def check(voxel):
        visited.append(voxel)
        return voxel.x == -2

    hit = raycast((0.5, 0.5, 0.5), (-1.0, 0.0, 0.0), 10.0, check)
    assert hit is not None
    assert visited[-1].x == -2
    assert hit.x == visited[-1].x + 1
    assert all(v.x < 0.5 for v in visited)


def test_raycast_miss_returns_none():
    visited = []

    def check(voxel):
        visited.append(voxel)
        return False

    assert raycast((0.5, 0.5, 0.5), (0.0, 1.0, 0.0), 5.0, check) is None
    assert len(visited) >= 1