import pytest

from wireframe3d.point import PointError, PointRegistry
from wireframe3d.shapes import (
    BLUE,
    GREEN,
    RED,
    YELLOW,
    build_scene,
    cube_points,
    plane_points,
    tetrahedron_points,
)


def test_tetrahedron_labels_and_connections():
    points = tetrahedron_points()
    assert [p.label for p in points] == ["A", "B", "C", "D"]
    assert points[0].connections == ("B", "C", "D")
    assert points[3].connections == ()


def test_tetrahedron_every_pair_connected_once():
    points = tetrahedron_points()
    edges = {frozenset((p.label, c)) for p in points for c in p.connections}
    assert len(edges) == 6


def test_cube_has_twelve_unique_edges():
    points = cube_points()
    assert len(points) == 8
    edges = {frozenset((p.label, c)) for p in points for c in p.connections}
    assert len(edges) == 12


def test_cube_corners_are_symmetric():
    points = cube_points()
    for axis in range(3):
        assert sum(p.pos[axis] for p in points) == pytest.approx(0.0)
        assert {abs(p.pos[axis]) for p in points} == {1.5}


def test_plane_grid_size_and_bounds():
    points = plane_points()
    assert len(points) == 21 * 21
    assert all(-100 <= p.pos[0] <= 100 and p.pos[1] == 0 and -100 <= p.pos[2] <= 100 for p in points)
    assert points[0].label == "point_-100_-100"
    assert points[0].pos == (-100.0, 0.0, -100.0)


def test_plane_connections_reach_existing_neighbours():
    points = plane_points()
    labels = {p.label for p in points}
    assert all(c in labels for p in points for c in p.connections)
    last = points[-1]
    assert last.label == "point_100_100"
    assert last.connections == ()


def test_shared_registry_rejects_duplicates():
    registry = PointRegistry()
    cube_points(registry)
    assert "1" in registry
    with pytest.raises(PointError):
        cube_points(registry)


def test_default_registry_allows_repeat_calls():
    first = cube_points()
    second = cube_points()
    assert [p.label for p in first] == [p.label for p in second]


def test_build_scene_objects():
    scene = build_scene()
    assert set(scene) == {"tetrahedron", "cube1", "cube2", "plane"}
    assert scene["tetrahedron"].color == YELLOW
    assert scene["cube1"].color == RED
    assert scene["cube2"].color == BLUE
    assert scene["plane"].color == GREEN
    assert scene["plane"].show_points is False
    assert scene["cube1"].show_points is True
    assert scene["tetrahedron"].y == -20
    assert (scene["cube1"].hitbox.x, scene["cube1"].hitbox.y, scene["cube1"].hitbox.z) == (3.0, 3.0, 3.0)


def test_build_scene_is_repeatable_and_independent():
    first = build_scene()
    second = build_scene()
    first["cube1"].x = 50
    assert second["cube1"].x == 0
    assert first["cube2"].x == 0