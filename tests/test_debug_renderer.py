import math

import pytest

from orangekit.debug_renderer import DEFAULT_CAPACITY, ColoredVertex, DebugRenderer

RED = (1.0, 0.0, 0.0, 1.0)
BLUE = (0.0, 0.0, 1.0, 1.0)


def _distance(a, b):
    return math.sqrt(sum((u - v) ** 2 for u, v in zip(a, b)))


def test_default_capacity_matches_source():
    assert DebugRenderer().capacity() == 250000
    assert DEFAULT_CAPACITY == DebugRenderer().capacity()


def test_draw_line_adds_two_vertices_with_colors():
    renderer = DebugRenderer()
    renderer.draw_line((0, 0, 0), (1, 2, 3), RED, BLUE)
    assert renderer.vertex_count() == 2
    assert renderer.vertices() == [
        ColoredVertex((0.0, 0.0, 0.0), RED),
        ColoredVertex((1.0, 2.0, 3.0), BLUE),
    ]


def test_draw_line_single_color_used_for_both_ends():
    renderer = DebugRenderer()
    renderer.draw_line((0, 0, 0), (1, 1, 1), RED)
    assert [v.color for v in renderer.vertices()] == [RED, RED]


def test_lines_beyond_capacity_are_dropped():
    renderer = DebugRenderer(capacity=4)
    for _ in range(5):
        renderer.draw_line((0, 0, 0), (1, 1, 1), RED)
    assert renderer.vertex_count() == renderer.capacity()


def test_clear_empties_buffer():
    renderer = DebugRenderer()
    renderer.draw_line((0, 0, 0), (1, 1, 1), RED)
    renderer.clear()
    assert renderer.vertex_count() == 0
    assert renderer.vertices() == []


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        DebugRenderer(capacity=-1)


def test_aabb_has_twelve_edges_on_the_box_corners():
    renderer = DebugRenderer()
    center = (1.0, 2.0, 3.0)
    extents = (0.5, 1.0, 2.0)
    renderer.draw_aabb(center, extents, RED)
    verts = renderer.vertices()
    assert len(verts) == 24
    for v in verts:
        for c, e, p in zip(center, extents, v.pos):
            assert abs(p - c) == pytest.approx(e)
    corners = {v.pos for v in verts}
    assert len(corners) == 8


@pytest.mark.parametrize("lod", [0, 1, 2])
def test_sphere_vertices_lie_on_radius(lod):
    renderer = DebugRenderer()
    center = (5.0, -2.0, 1.0)
    renderer.draw_sphere(lod, center, 3.0, BLUE)
    verts = renderer.vertices()
    assert verts
    assert len(verts) % 6 == 0
    for v in verts:
        assert _distance(v.pos, center) == pytest.approx(3.0)
        assert v.color == BLUE


def test_sphere_subdivision_quadruples_faces():
    coarse = DebugRenderer()
    coarse.draw_sphere(0, (0, 0, 0), 1.0, RED)
    fine = DebugRenderer()
    fine.draw_sphere(1, (0, 0, 0), 1.0, RED)
    assert fine.vertex_count() == 4 * coarse.vertex_count()


@pytest.mark.parametrize("lod", [0, 1, 3])
def test_circle_is_flat_and_on_radius(lod):
    renderer = DebugRenderer()
    center = (1.0, 4.0, -2.0)
    renderer.draw_circle(lod, center, 2.0, RED)
    verts = renderer.vertices()
    assert verts
    for v in verts:
        assert v.pos[1] == pytest.approx(center[1])
        assert _distance(v.pos, center) == pytest.approx(2.0)


def test_circle_subdivision_doubles_segments():
    coarse = DebugRenderer()
    coarse.draw_circle(0, (0, 0, 0), 1.0, RED)
    fine = DebugRenderer()
    fine.draw_circle(1, (0, 0, 0), 1.0, RED)
    assert fine.vertex_count() == 2 * coarse.vertex_count()


def test_circle_segments_connect_end_to_end():
    renderer = DebugRenderer()
    renderer.draw_circle(1, (0, 0, 0), 1.0, RED)
    verts = renderer.vertices()
    ends = [verts[i + 1].pos for i in range(0, len(verts), 2)]
    starts = [verts[i].pos for i in range(0, len(verts), 2)]
    assert starts[1:] == ends[:-1]
    assert ends[-1] == starts[0]