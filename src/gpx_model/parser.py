"""Build the document model from GPX files parsed by gpxpy."""

import logging
from datetime import datetime, timezone

import gpxpy
import gpxpy.gpx

from gpx_model.geometry import Point
from gpx_model.models import (
    Document,
    Link,
    Metadata,
    Person,
    Track,
    TrackSegment,
    Waypoint,
)

logger = logging.getLogger(__name__)


def _text(value: str | None) -> str | None:
    """Map empty strings to None so absence stays absence."""
    if value is None:
        return None
    return value if value != "" else None


def _utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None or value.utcoffset() is None:
        logger.debug("Naive timestamp %s, assuming UTC", value.isoformat())
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _links(href: str | None, text: str | None, type_: str | None) -> list[Link]:
    if not href:
        return []
    return [Link(href=href, text=_text(text), type=_text(type_))]


def _waypoint(pt: gpxpy.gpx.GPXTrackPoint) -> Waypoint:
    position = None
    if pt.longitude is not None and pt.latitude is not None:
        position = Point(float(pt.longitude), float(pt.latitude))
    return Waypoint(
        position=position,
        elevation=pt.elevation,
        time=_utc(pt.time),
        name=_text(pt.name),
        comment=_text(pt.comment),
        description=_text(pt.description),
        source=_text(pt.source),
        links=_links(pt.link, pt.link_text, pt.link_type),
        symbol=_text(pt.symbol),
        type=_text(pt.type),
    )


def _track(trk: gpxpy.gpx.GPXTrack) -> Track:
    return Track(
        name=_text(trk.name),
        comment=_text(trk.comment),
        description=_text(trk.description),
        source=_text(trk.source),
        links=_links(trk.link, trk.link_text, trk.link_type),
        type=_text(trk.type),
        segments=[
            TrackSegment(points=[_waypoint(pt) for pt in seg.points])
            for seg in trk.segments
        ],
    )


def _metadata(gpx: gpxpy.gpx.GPX) -> Metadata | None:
    author = None
    if gpx.author_name or gpx.author_email or gpx.author_link:
        author_links = _links(gpx.author_link, gpx.author_link_text, gpx.author_link_type)
        author = Person(
            name=_text(gpx.author_name),
            email=_text(gpx.author_email),
            link=author_links[0] if author_links else None,
        )

    metadata = Metadata(
        name=_text(gpx.name),
        description=_text(gpx.description),
        author=author,
        links=_links(gpx.link, gpx.link_text, gpx.link_type),
        time=_utc(gpx.time),
        keywords=_text(gpx.keywords),
    )
    if metadata == Metadata():
        return None
    return metadata


def from_gpxpy(gpx: gpxpy.gpx.GPX) -> Document:
    """Convert a parsed gpxpy document into a Document.

    Track, segment, point and link order is kept as it appears in the source.
    """
    doc = Document(
        version=gpx.version or "",
        metadata=_metadata(gpx),
        tracks=[_track(trk) for trk in gpx.tracks],
    )
    logger.debug(
        "Loaded GPX %s: %d tracks, %d segments, %d points",
        doc.version or "(unknown version)",
        len(doc.tracks),
        sum(len(trk.segments) for trk in doc.tracks),
        sum(len(seg.points) for trk in doc.tracks for seg in trk.segments),
    )
    return doc


def parse_gpx_string(xml: str) -> Document:
    """Parse GPX XML text and return a Document."""
    return from_gpxpy(gpxpy.parse(xml))


def parse_gpx(filepath: str) -> Document:
    """Parse a GPX file and return a Document."""
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)
    return from_gpxpy(gpx)
