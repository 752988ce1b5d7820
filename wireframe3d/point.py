"""Labelled vertices and the registry that keeps their labels unique."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

Vector3 = tuple[float, float, float]


class PointError(ValueError):
    """Raised for an empty or duplicate label or a repeated connection."""


class PointRegistry:
    """Maps labels to points; a label may be registered only once."""

    def __init__(self) -> None:
        self._points: dict[str, Point] = {}

    def register(self, point: Point) -> None:
        """Add ``point``; raise PointError if its label is taken."""
        if point.label in self._points:
            raise PointError("Point already exists")
        self._points[point.label] = point

    def clear(self) -> None:
        """Forget every registered point."""
        self._points.clear()

    def __contains__(self, label: object) -> bool:
        return label in self._points

    def __getitem__(self, label: str) -> Point:
        return self._points[label]

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[str]:
        return iter(self._points)


_shared_registry = PointRegistry()


def _as_vector(pos: Iterable[float]) -> Vector3:
    values = tuple(float(c) for c in pos)
    if len(values) != 3:
        raise ValueError(f"position needs 3 components, got {len(values)}")
    return values  # type: ignore[return-value]


class Point:
    """A vertex relative to its object's centre, with edges to other labels."""

    def __init__(
        self,
        label: str,
        pos: Iterable[float],
        connections: Iterable[str | Point] = (),
        *,
        registry: PointRegistry | None = None,
    ) -> None:
        if not label:
            raise PointError("Point label cannot be empty")
        self.label = label
        self._pos = _as_vector(pos)
        self._connections: dict[str, None] = {}
        (_shared_registry if registry is None else registry).register(self)
        self.add_connections(connections)

    @property
    def pos(self) -> Vector3:
        """Position relative to the owning object's centre."""
        return self._pos

    @pos.setter
    def pos(self, value: Iterable[float]) -> None:
        self._pos = _as_vector(value)

    @property
    def connections(self) -> tuple[str, ...]:
        """Labels this point has edges to, in the order they were added."""
        return tuple(self._connections)

    def add_connection(self, target: str | Point) -> None:
        """Connect to a label or point; raise PointError if already connected."""
        label = target.label if isinstance(target, Point) else target
        if label in self._connections:
            raise PointError("Point already connected")
        self._connections[label] = None

    def add_connections(self, targets: Iterable[str | Point]) -> None:
        """Connect to each target in turn."""
        for target in targets:
            self.add_connection(target)

    def __repr__(self) -> str:
        return f"Point({self.label!r}, {self._pos!r}, {list(self._connections)!r})"