"""Axis-aligned hitboxes."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


class HitboxType(enum.Enum):
    """Kind of hitbox; only the box kind takes part in collisions."""

    DEFAULT = enum.auto()
    SPHERE = enum.auto()
    CUSTOM = enum.auto()


@dataclass
class Hitbox:
    """A box of the given extents centred on its object."""

    x: float = 1.0
    y: float = 1.0
    z: float = 1.0
    kind: HitboxType = HitboxType.DEFAULT
    points: list[Any] = field(default_factory=list)

    def set_points(self, points: Iterable[Any]) -> None:
        """Store the points that outline a custom hitbox."""
        self.points = list(points)