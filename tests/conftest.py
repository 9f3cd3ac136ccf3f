import os

import pytest

from gpx_model.geometry import Point
from gpx_model.models import Document, Track, TrackSegment, Waypoint

SAMPLE_GPX_PATH = os.path.join(
    os.path.dirname(__file__), "functional", "data", "sample_track.gpx"
)


@pytest.fixture
def two_segment_track():
    """Segment A with two points, segment B with one."""
    return Track(
        name="Waterfront",
        segments=[
            TrackSegment(
                points=[
                    Waypoint(position=Point(-122.4, 37.8)),
                    Waypoint(position=Point(-122.41, 37.81)),
                ]
            ),
            TrackSegment(points=[Waypoint(position=Point(-122.42, 37.82))]),
        ],
    )


@pytest.fixture
def sample_document(two_segment_track):
    return Document(version="1.1", tracks=[two_segment_track])
