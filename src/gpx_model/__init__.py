"""GPX Model - GPX document model with derived track geometry."""

from gpx_model.errors import MissingPointError
from gpx_model.geometry import (
    Geometry,
    LineString,
    MultiLineString,
    Point,
    geodesic_length,
    to_geometry,
)
from gpx_model.models import (
    Document,
    Link,
    Metadata,
    Person,
    Track,
    TrackSegment,
    Waypoint,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Geometry",
    "LineString",
    "Link",
    "Metadata",
    "MissingPointError",
    "MultiLineString",
    "Person",
    "Point",
    "Track",
    "TrackSegment",
    "Waypoint",
    "geodesic_length",
    "to_geometry",
]
