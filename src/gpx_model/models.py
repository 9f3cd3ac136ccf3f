from dataclasses import dataclass, field
from datetime import datetime

from gpx_model.errors import MissingPointError
from gpx_model.geometry import LineString, MultiLineString, Point


@dataclass
class Link:
    """A link to an external resource (web page, photo, video clip, ...)."""

    href: str = ""
    text: str | None = None
    type: str | None = None  # MIME type, e.g. image/jpeg


@dataclass
class Person:
    """A person or organization."""

    name: str | None = None
    email: str | None = None
    link: Link | None = None


@dataclass
class Waypoint:
    """A waypoint, point of interest, or named feature on a map.

    ``position`` is optional so loaders can fill a waypoint incrementally, but
    geometry can only be derived once it is set: see ``point()``.
    """

    position: Point | None = None
    elevation: float | None = None  # meters
    time: datetime | None = None  # UTC
    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None  # e.g. "Garmin eTrex"
    links: list[Link] = field(default_factory=list)
    symbol: str | None = None
    type: str | None = None

    def point(self) -> Point:
        """Return the geographic point of the waypoint.

        Raises:
            MissingPointError: if the waypoint has no position.
        """
        if self.position is None:
            raise MissingPointError(self.name)
        return self.position

    def to_geometry(self) -> Point:
        return self.point()


@dataclass
class TrackSegment:
    """A continuous span of track points.

    Where GPS reception was lost or the receiver was turned off, a track starts
    a new segment.
    """

    points: list[Waypoint] = field(default_factory=list)

    def linestring(self) -> LineString:
        """Return the points of the segment as a linestring, in order."""
        return LineString(wpt.point() for wpt in self.points)

    def to_geometry(self) -> LineString:
        return self.linestring()


@dataclass
class Track:
    """An ordered list of segments describing a path."""

    name: str | None = None
    comment: str | None = None
    description: str | None = None
    source: str | None = None
    links: list[Link] = field(default_factory=list)
    type: str | None = None
    segments: list[TrackSegment] = field(default_factory=list)

    def multilinestring(self) -> MultiLineString:
        """Return one linestring per segment, in segment order."""
        return MultiLineString(seg.linestring() for seg in self.segments)

    def to_geometry(self) -> MultiLineString:
        return self.multilinestring()


@dataclass
class Metadata:
    """Information about the GPX file, its author, and keywords."""

    name: str | None = None
    description: str | None = None
    author: Person | None = None
    links: list[Link] = field(default_factory=list)
    time: datetime | None = None  # UTC creation time
    keywords: str | None = None


@dataclass
class Document:
    """The root of a GPX file.

    An empty ``version`` means the source did not declare one.
    """

    version: str = ""
    metadata: Metadata | None = None
    tracks: list[Track] = field(default_factory=list)
