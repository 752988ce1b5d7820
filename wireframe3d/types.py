"""Basic value types: rotations, positions and the camera."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Rotation:
    """Euler angles of an object or camera."""

    pitch: float = 0.0
    roll: float = 0.0
    yaw: float = 0.0


@dataclass
class Position:
    """A location in world space together with an orientation."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    rotation: Rotation = field(default_factory=Rotation)

    def shifted(self, delta: Position) -> Position:
        """Return a new position with every component of ``delta`` added."""
        return Position(
            self.x + delta.x,
            self.y + delta.y,
            self.z + delta.z,
            Rotation(
                pitch=self.rotation.pitch + delta.rotation.pitch,
                roll=self.rotation.roll + delta.rotation.roll,
                yaw=self.rotation.yaw + delta.rotation.yaw,
            ),
        )


@dataclass
class Camera:
    """The viewer: its position, field-of-view scale and near plane."""

    pos: Position = field(default_factory=Position)
    fov: float = 600.0
    near_plane: float = 3.0