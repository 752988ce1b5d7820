"""The built-in shapes and the demo scene made from them."""

from __future__ import annotations

from .hitbox import Hitbox
from .object import Color, Object
from .point import Point, PointRegistry
from .types import Position

YELLOW: Color = (255, 255, 0)
RED: Color = (255, 0, 0)
BLUE: Color = (0, 0, 255)
GREEN: Color = (0, 255, 0)

PLANE_EXTENT = 100
PLANE_STEP = 10


def _registry(registry: PointRegistry | None) -> PointRegistry:
    return PointRegistry() if registry is None else registry


def tetrahedron_points(registry: PointRegistry | None = None) -> list[Point]:
    """The four vertices of the tetrahedron, each connected to the others."""
    reg = _registry(registry)
    return [
        Point("A", (-10.0, -3.0, -5.78), ["B", "C", "D"], registry=reg),
        Point("B", (10.0, -3.0, -5.78), ["C", "D"], registry=reg),
        Point("C", (0.0, -3.0, 11.55), ["D"], registry=reg),
        Point("D", (0.0, -18.0, 0.0), registry=reg),
    ]


def cube_points(registry: PointRegistry | None = None) -> list[Point]:
    """The eight corners of a cube of side 3 centred on the origin."""
    reg = _registry(registry)
    return [
        Point("1", (-1.5, -1.5, -1.5), ["2", "4", "5"], registry=reg),
        Point("2", (1.5, -1.5, -1.5), ["3", "6"], registry=reg),
        Point("3", (1.5, 1.5, -1.5), ["4", "7"], registry=reg),
        Point("4", (-1.5, 1.5, -1.5), ["1", "8"], registry=reg),
        Point("5", (-1.5, -1.5, 1.5), ["6", "8"], registry=reg),
        Point("6", (1.5, -1.5, 1.5), ["7"], registry=reg),
        Point("7", (1.5, 1.5, 1.5), ["8"], registry=reg),
        Point("8", (-1.5, 1.5, 1.5), registry=reg),
    ]


def _plane_label(x: int, z: int) -> str:
    return f"point_{x}_{z}"


def plane_points(registry: PointRegistry | None = None) -> list[Point]:
    """A flat grid on y = 0, each vertex connected to its +x and +z neighbours."""
    reg = _registry(registry)
    coords = range(-PLANE_EXTENT, PLANE_EXTENT + 1, PLANE_STEP)
    points = []
    for x in coords:
        for z in coords:
            connections = []
            if x + PLANE_STEP <= PLANE_EXTENT:
                connections.append(_plane_label(x + PLANE_STEP, z))
            if z + PLANE_STEP <= PLANE_EXTENT:
                connections.append(_plane_label(x, z + PLANE_STEP))
            points.append(Point(_plane_label(x, z), (x, 0, z), connections, registry=reg))
    return points


def build_scene() -> dict[str, Object]:
    """Create the demo objects: a tetrahedron, two cubes and a ground plane."""
    registry = PointRegistry()
    cube = cube_points(registry)
    return {
        "tetrahedron": Object(
            tetrahedron_points(registry), Position(0, -20, 0), Hitbox(4.0, 4.0, 4.0), YELLOW
        ),
        "cube1": Object(cube, Position(0, 0, 0), Hitbox(3.0, 3.0, 3.0), RED),
        "cube2": Object(cube, Position(0, 0, 0), Hitbox(3.0, 3.0, 3.0), BLUE),
        "plane": Object(plane_points(registry), Position(0, 0, 0), Hitbox(), GREEN, False),
    }