import pytest

from gpx_model.errors import MissingPointError
from gpx_model.geometry import LineString, MultiLineString, Point, to_geometry
from gpx_model.models import (
    Document,
    Link,
    Metadata,
    Person,
    Track,
    TrackSegment,
    Waypoint,
)


class TestDefaults:
    def test_document(self):
        doc = Document()
        assert doc.version == ""
        assert doc.metadata is None
        assert doc.tracks == []

    def test_metadata(self):
        meta = Metadata()
        assert meta.name is None
        assert meta.description is None
        assert meta.author is None
        assert meta.links == []
        assert meta.time is None
        assert meta.keywords is None

    def test_track(self):
        track = Track()
        assert track.name is None
        assert track.comment is None
        assert track.description is None
        assert track.source is None
        assert track.links == []
        assert track.type is None
        assert track.segments == []

    def test_segment(self):
        assert TrackSegment().points == []

    def test_waypoint(self):
        wpt = Waypoint()
        assert wpt.position is None
        assert wpt.elevation is None
        assert wpt.time is None
        assert wpt.name is None
        assert wpt.comment is None
        assert wpt.description is None
        assert wpt.source is None
        assert wpt.links == []
        assert wpt.symbol is None
        assert wpt.type is None

    def test_person(self):
        person = Person()
        assert person.name is None
        assert person.email is None
        assert person.link is None

    def test_link(self):
        link = Link()
        assert link.href == ""
        assert link.text is None
        assert link.type is None

    def test_list_fields_not_shared(self):
        a, b = Track(), Track()
        a.segments.append(TrackSegment())
        assert b.segments == []


class TestWaypointPoint:
    def test_returns_position(self):
        wpt = Waypoint(position=Point(-122.4, 37.8), elevation=10.0)
        assert wpt.point() == Point(-122.4, 37.8)
        assert wpt.point().lon == -122.4
        assert wpt.point().lat == 37.8

    def test_missing_position_raises(self):
        with pytest.raises(MissingPointError):
            Waypoint().point()

    def test_missing_position_never_defaults(self):
        wpt = Waypoint(elevation=0.0, name="origin")
        with pytest.raises(MissingPointError, match="origin"):
            wpt.point()

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Waypoint().to_geometry()


class TestLinestring:
    def test_empty_segment(self):
        line = TrackSegment().linestring()
        assert len(line) == 0
        assert line == LineString()

    def test_single_point(self):
        seg = TrackSegment(points=[Waypoint(position=Point(1.0, 2.0))])
        assert seg.linestring() == [(1.0, 2.0)]

    def test_order_and_values_preserved(self):
        coords = [(float(i), float(-i)) for i in range(10)]
        seg = TrackSegment(points=[Waypoint(position=Point(*c)) for c in coords])
        line = seg.linestring()
        assert len(line) == 10
        assert list(line) == coords

    def test_idempotent(self, two_segment_track):
        seg = two_segment_track.segments[0]
        assert seg.linestring() == seg.linestring()

    def test_does_not_mutate_segment(self, two_segment_track):
        seg = two_segment_track.segments[0]
        before = list(seg.points)
        seg.linestring()
        assert seg.points == before

    def test_missing_point_propagates(self):
        seg = TrackSegment(points=[Waypoint(position=Point(1.0, 2.0)), Waypoint()])
        with pytest.raises(MissingPointError):
            seg.linestring()


class TestMultilinestring:
    def test_empty_track(self):
        mls = Track().multilinestring()
        assert len(mls) == 0
        assert mls == MultiLineString()

    def test_example_track(self, two_segment_track):
        assert two_segment_track.multilinestring() == [
            [(-122.4, 37.8), (-122.41, 37.81)],
            [(-122.42, 37.82)],
        ]

    def test_one_line_per_segment(self, two_segment_track):
        mls = two_segment_track.multilinestring()
        assert len(mls) == len(two_segment_track.segments)
        for line, seg in zip(mls, two_segment_track.segments):
            assert line == seg.linestring()

    def test_idempotent(self, two_segment_track):
        assert two_segment_track.multilinestring() == two_segment_track.multilinestring()

    def test_empty_segments_kept(self):
        track = Track(segments=[TrackSegment(), TrackSegment()])
        mls = track.multilinestring()
        assert len(mls) == 2
        assert all(len(line) == 0 for line in mls)


class TestToGeometry:
    def test_waypoint(self):
        geom = to_geometry(Waypoint(position=Point(3.0, 4.0)))
        assert isinstance(geom, Point)
        assert geom == Point(3.0, 4.0)

    def test_segment(self, two_segment_track):
        geom = to_geometry(two_segment_track.segments[0])
        assert isinstance(geom, LineString)
        assert len(geom) == 2

    def test_track(self, two_segment_track):
        geom = to_geometry(two_segment_track)
        assert isinstance(geom, MultiLineString)
        assert geom == two_segment_track.multilinestring()

    def test_entities_interchangeable(self, two_segment_track):
        entities = [
            two_segment_track.segments[1].points[0],
            two_segment_track.segments[1],
            two_segment_track,
        ]
        types = [type(to_geometry(e)) for e in entities]
        assert types == [Point, LineString, MultiLineString]


class TestDocument:
    def test_example_document(self, sample_document):
        assert sample_document.version == "1.1"
        assert sample_document.tracks[0].multilinestring() == [
            [(-122.4, 37.8), (-122.41, 37.81)],
            [(-122.42, 37.82)],
        ]
