"""Geometry primitives derived from GPX entities.

Coordinates follow the GeoJSON convention: x is longitude, y is latitude.
LineStrings with zero or one point are allowed, since a GPX segment can hold
any number of points.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple, Protocol, Union, overload

from geopy.distance import geodesic


class Point(NamedTuple):
    """A geographic position in degrees."""

    x: float  # longitude
    y: float  # latitude

    @property
    def lon(self) -> float:
        return self.x

    @property
    def lat(self) -> float:
        return self.y

    @property
    def __geo_interface__(self) -> dict:
        return {"type": "Point", "coordinates": [self.x, self.y]}


class LineString:
    """An ordered, immutable sequence of points."""

    __slots__ = ("_points",)

    def __init__(self, points: Iterable[Point | tuple[float, float]] = ()):
        self._points = tuple(Point(*pt) for pt in points)

    @property
    def points(self) -> tuple[Point, ...]:
        return self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    @overload
    def __getitem__(self, index: int) -> Point: ...

    @overload
    def __getitem__(self, index: slice) -> LineString: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return LineString(self._points[index])
        return self._points[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LineString):
            return self._points == other._points
        if isinstance(other, Point):
            return False
        if isinstance(other, (list, tuple)):
            if not all(isinstance(pt, (list, tuple)) for pt in other):
                return False
            return list(self._points) == [tuple(pt) for pt in other]
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._points)

    def __repr__(self) -> str:
        return f"LineString({list(self._points)!r})"

    @property
    def __geo_interface__(self) -> dict:
        return {
            "type": "LineString",
            "coordinates": [[pt.x, pt.y] for pt in self._points],
        }


class MultiLineString:
    """An ordered, immutable collection of linestrings."""

    __slots__ = ("_lines",)

    def __init__(self, lines: Iterable[LineString | Iterable[tuple[float, float]]] = ()):
        self._lines = tuple(
            line if isinstance(line, LineString) else LineString(line) for line in lines
        )

    @property
    def lines(self) -> tuple[LineString, ...]:
        return self._lines

    def __iter__(self) -> Iterator[LineString]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> LineString:
        return self._lines[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MultiLineString):
            return self._lines == other._lines
        if isinstance(other, Point):
            return False
        if isinstance(other, (list, tuple)):
            return len(self._lines) == len(other) and all(
                mine == theirs for mine, theirs in zip(self._lines, other)
            )
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._lines)

    def __repr__(self) -> str:
        return f"MultiLineString({[list(line) for line in self._lines]!r})"

    @property
    def __geo_interface__(self) -> dict:
        return {
            "type": "MultiLineString",
            "coordinates": [
                [[pt.x, pt.y] for pt in line] for line in self._lines
            ],
        }


Geometry = Union[Point, LineString, MultiLineString]


class GeometryConvertible(Protocol):
    """Anything that can project itself into a Geometry."""

    def to_geometry(self) -> Geometry: ...


def to_geometry(entity: GeometryConvertible) -> Geometry:
    """Convert a Waypoint, TrackSegment or Track into its generic geometry."""
    return entity.to_geometry()


def _line_length(line: LineString) -> float:
    total = 0.0
    for p1, p2 in zip(line, line[1:]):
        total += geodesic((p1.lat, p1.lon), (p2.lat, p2.lon)).meters
    return total


def geodesic_length(geometry: Geometry) -> float:
    """Length of a geometry in meters.

    Parts of a MultiLineString are measured separately and summed; the gap
    between the end of one part and the start of the next is not counted.
    """
    if isinstance(geometry, Point):
        return 0.0
    if isinstance(geometry, LineString):
        return _line_length(geometry)
    if isinstance(geometry, MultiLineString):
        return sum(_line_length(line) for line in geometry)
    raise TypeError(f"Unsupported geometry type: {type(geometry).__name__}")
