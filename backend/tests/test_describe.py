from __future__ import annotations

import json

import pytest

from geo.errors import MercatorRangeError
from geo.types import BoundingBox, GeoPoint
from selection.describe import describe_bbox, describe_point
from selection.types import BboxOutput, QuadkeyOutput, parse_selection_output


def test_describe_point_fills_every_copyable_field():
    out = describe_point(45.0, 10.0, 5)
    assert out.kind == "quadkey"
    assert out.quadkey == "12022"
    assert out.tileText == "5/16/11"
    assert out.latLonText == "45.000000,10.000000"
    assert (out.zoom, out.x, out.y) == (5, 16, 11)

    west, south, east, north = (float(v) for v in out.bboxString.split(","))
    assert out.bboxString.split(",")[0] == "0.000000"
    assert out.bboxString.split(",")[2] == "11.250000"
    assert south < 45.0 < north
    assert west < 10.0 < east

    assert out.wkt.startswith("POLYGON((0.0 ")
    assert json.loads(out.geojson)["type"] == "Polygon"


def test_describe_point_shows_normalized_longitude():
    wrapped = describe_point(45.0, 370.0, 5)
    assert wrapped.latLonText == "45.000000,10.000000"
    assert wrapped.quadkey == describe_point(45.0, 10.0, 5).quadkey


def test_describe_point_respects_decimals():
    out = describe_point(45.123456789, 10.0, 5, decimals=3)
    assert out.latLonText == "45.123,10.000"
    assert out.bboxString.split(",")[0] == "0.000"


def test_describe_point_rejects_polar_clicks():
    with pytest.raises(MercatorRangeError):
        describe_point(87.0, 0.0, 4)


def test_describe_bbox():
    bbox = BoundingBox.from_corners(GeoPoint(lat=50.0, lon=14.3), GeoPoint(lat=50.1, lon=14.5))
    out = describe_bbox(bbox)
    assert out.kind == "bbox"
    assert out.bboxString == "14.300000,50.000000,14.500000,50.100000"
    assert out.wkt == "POLYGON((14.3 50.0, 14.5 50.0, 14.5 50.1, 14.3 50.1, 14.3 50.0))"
    assert len(json.loads(out.geojson)["coordinates"][0]) == 5


def test_selection_outputs_parse_by_kind():
    q = describe_point(45.0, 10.0, 5)
    b = describe_bbox(BoundingBox.from_corners(GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=1.0, lon=1.0)))

    assert isinstance(parse_selection_output(q.model_dump()), QuadkeyOutput)
    assert isinstance(parse_selection_output(b.model_dump()), BboxOutput)
    assert parse_selection_output(q.model_dump()) == q
