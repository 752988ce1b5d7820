"""Wireframe objects: placement, collision and perspective projection."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

import pygame

from .hitbox import Hitbox
from .point import Point, Vector3
from .types import Camera, Position, Rotation

Color = tuple[int, int, int]
Vector2 = tuple[float, float]

WHITE: Color = (255, 255, 255)
_POINT_RADIUS = 3


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * math.pi / 180.0


def _rotate_local(local: Iterable[float], rotation: Rotation) -> Vector3:
    """Apply an object's yaw, pitch and roll (in degrees) to a local vertex."""
    x, y, z = local
    yaw = degrees_to_radians(rotation.yaw)
    pitch = degrees_to_radians(rotation.pitch)
    roll = degrees_to_radians(rotation.roll)

    x, z = x * math.cos(yaw) - z * math.sin(yaw), x * math.sin(yaw) + z * math.cos(yaw)
    y, z = y * math.cos(pitch) - z * math.sin(pitch), y * math.sin(pitch) + z * math.cos(pitch)
    x, y = x * math.cos(roll) - y * math.sin(roll), x * math.sin(roll) + y * math.cos(roll)
    return x, y, z


def _to_camera_space(world: Vector3, camera: Camera) -> Vector3:
    """Express a world-space point relative to the camera (angles in radians)."""
    view = camera.pos
    x = world[0] - view.x
    y = world[1] - view.y
    z = world[2] - view.z

    yaw = -view.rotation.yaw
    x, z = x * math.cos(yaw) + z * math.sin(yaw), -x * math.sin(yaw) + z * math.cos(yaw)

    pitch = -view.rotation.pitch
    y, z = y * math.cos(pitch) - z * math.sin(pitch), y * math.sin(pitch) + z * math.cos(pitch)

    roll = -view.rotation.roll
    x, y = x * math.cos(roll) - y * math.sin(roll), x * math.sin(roll) + y * math.cos(roll)
    return x, y, z


def transform_point(local: Iterable[float], position: Position, camera: Camera) -> Vector3:
    """Map a vertex given relative to ``position`` into camera space."""
    x, y, z = _rotate_local(local, position.rotation)
    world = (x + position.x, y + position.y, z + position.z)
    return _to_camera_space(world, camera)


def project(camera_point: Vector3, camera: Camera, width: int, height: int) -> Vector2 | None:
    """Project a camera-space point to screen coordinates, or None if clipped."""
    x, y, z = camera_point
    depth = z + camera.near_plane
    if depth <= 0:
        return None
    return (
        camera.fov * x / depth + width // 2,
        camera.fov * y / depth + height // 2,
    )


class Object:
    """A wireframe made of labelled points, placed in the world."""

    def __init__(
        self,
        points: Iterable[Point],
        pos: Position,
        hitbox: Hitbox | None = None,
        color: Color = WHITE,
        show_points: bool = True,
    ) -> None:
        self.points = list(points)
        self.pos = pos
        self.hitbox = Hitbox() if hitbox is None else hitbox
        self.color = color
        self.show_points = show_points

    @property
    def pos(self) -> Position:
        """Centre position and orientation of the object."""
        return self._pos

    @pos.setter
    def pos(self, value: Position) -> None:
        self._pos = Position(
            value.x,
            value.y,
            value.z,
            Rotation(value.rotation.pitch, value.rotation.roll, value.rotation.yaw),
        )

    @property
    def x(self) -> float:
        return self._pos.x

    @x.setter
    def x(self, value: float) -> None:
        self._pos.x = value

    @property
    def y(self) -> float:
        return self._pos.y

    @y.setter
    def y(self, value: float) -> None:
        self._pos.y = value

    @property
    def z(self) -> float:
        return self._pos.z

    @z.setter
    def z(self, value: float) -> None:
        self._pos.z = value

    @property
    def rotation(self) -> Rotation:
        return self._pos.rotation

    def move(self, delta: Position) -> None:
        """Add every component of ``delta`` to the object's position."""
        self._pos = self._pos.shifted(delta)

    def collides_with(self, other: Object) -> bool:
        """Whether the two objects' box hitboxes overlap or touch."""
        pairs = (
            (self.x, other.x, self.hitbox.x, other.hitbox.x),
            (self.y, other.y, self.hitbox.y, other.hitbox.y),
            (self.z, other.z, self.hitbox.z, other.hitbox.z),
        )
        return all(
            abs(mine - theirs) <= my_size / 2 + their_size / 2
            for mine, theirs, my_size, their_size in pairs
        )

    def set_color(self, color: Color = WHITE) -> None:
        """Set the colour of the object's edges."""
        self.color = color

    def _project(self, point: Point, camera: Camera, size: tuple[int, int]) -> Vector2 | None:
        width, height = size
        return project(transform_point(point.pos, self._pos, camera), camera, width, height)

    def project_points(self, camera: Camera, size: tuple[int, int]) -> list[Vector2]:
        """Screen positions of every vertex in front of the camera."""
        projected = (self._project(point, camera, size) for point in self.points)
        return [screen for screen in projected if screen is not None]

    def _edges(self) -> Iterator[tuple[Point, Point]]:
        for point in self.points:
            for label in point.connections:
                target = next((p for p in self.points if p.label == label), None)
                if target is not None:
                    yield point, target

    def project_edges(
        self, camera: Camera, size: tuple[int, int]
    ) -> list[tuple[Vector2, Vector2]]:
        """Screen segments for every edge whose both ends are in front of the camera."""
        segments = []
        for start, end in self._edges():
            a = self._project(start, camera, size)
            b = self._project(end, camera, size)
            if a is not None and b is not None:
                segments.append((a, b))
        return segments

    def draw(self, surface: pygame.Surface, camera: Camera) -> None:
        """Render the vertices (if shown) and edges onto ``surface``."""
        size = surface.get_size()
        if self.show_points:
            for x, y in self.project_points(camera, size):
                pygame.draw.circle(surface, WHITE, (x, y), _POINT_RADIUS)
        for a, b in self.project_edges(camera, size):
            pygame.draw.line(surface, self.color, a, b)

    def __repr__(self) -> str:
        return f"Object(points={len(self.points)}, pos={self._pos!r}, color={self.color!r})"