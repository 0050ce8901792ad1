from __future__ import annotations

from geo.types import BoundingBox, GeoPoint
from render.build_map import build_selection_plot
from render.traces import _rgba
from render.view import fit_view_to_bounds
from selection.controller import SelectionController
from settings.types import AppSettings


def test_tile_selection_draws_rectangle_and_fits_view():
    settings = AppSettings()
    c = SelectionController(settings)
    c.set_zoom(5)
    upd = c.click(45.0, 10.0)

    payload = build_selection_plot(upd, settings=settings, view_zoom=3.0)
    assert set(payload.keys()) == {"data", "layout"}
    (trace,) = payload["data"]
    assert trace["type"] == "scattermapbox"
    assert trace["fill"] == "toself"
    assert len(trace["lon"]) == 5
    assert trace["lon"][0] == trace["lon"][-1]
    assert trace["line"]["color"] == settings.styles.tile.color

    mapbox = payload["layout"]["mapbox"]
    # Never more than two levels past the tile zoom when the map is further out.
    assert 3.0 < mapbox["zoom"] <= 7.0
    assert 0.0 < mapbox["center"]["lon"] < 11.25

    meta = payload["layout"]["meta"]
    assert meta["mode"] == "quadkey"
    assert meta["selection"]["kind"] == "quadkey"
    assert meta["selection"]["quadkey"] == "12022"


def test_bbox_drawing_steps_render_marker_preview_and_box():
    settings = AppSettings()
    c = SelectionController(settings)
    start = build_selection_plot(c.set_mode("bbox"), settings=settings)
    assert start["data"] == []
    assert start["layout"]["meta"]["instruction"] == "Click to start drawing a bounding box"
    assert start["layout"]["mapbox"]["center"] == {"lat": 45.933841, "lon": 46.408825}

    marker = build_selection_plot(c.click(50.1, 14.5), settings=settings, view_zoom=11.0)
    (m,) = marker["data"]
    assert m["mode"] == "markers"
    assert m["lat"] == [50.1]
    assert marker["layout"]["mapbox"]["zoom"] == 11.0
    assert marker["layout"]["meta"]["state"] == "drawing_bbox"

    preview = build_selection_plot(c.move(50.0, 14.3), settings=settings)
    (p,) = preview["data"]
    assert p["opacity"] < 1.0
    assert "preview" in p["name"].lower()

    done = build_selection_plot(c.click(50.0, 14.3), settings=settings)
    (b,) = done["data"]
    assert b["opacity"] == 1.0
    assert b["fillcolor"] == "rgba(0, 124, 255, 0.1)"
    assert done["layout"]["meta"]["selection"]["kind"] == "bbox"
    assert done["layout"]["meta"]["state"] == "idle"


def test_fit_view_to_bounds_caps_zoom():
    bbox = BoundingBox.from_corners(GeoPoint(lat=50.0, lon=14.0), GeoPoint(lat=50.001, lon=14.001))
    _center, zoom = fit_view_to_bounds(bbox, viewport={"width": 800, "height": 600}, max_zoom=12)
    assert zoom == 12.0
    _center, zoom_free = fit_view_to_bounds(bbox, viewport={"width": 800, "height": 600})
    assert zoom_free > 12.0


def test_rgba_passthrough_for_named_colors():
    assert _rgba("#ff7800", 0.5) == "rgba(255, 120, 0, 0.5)"
    assert _rgba("orange", 0.5) == "orange"


def test_fit_view_centers_box_across_antimeridian():
    wrapped = BoundingBox(southwest=GeoPoint(lat=-10.0, lon=170.0), northeast=GeoPoint(lat=10.0, lon=-170.0))
    plain = BoundingBox(southwest=GeoPoint(lat=-10.0, lon=0.0), northeast=GeoPoint(lat=10.0, lon=20.0))

    center, zoom = fit_view_to_bounds(wrapped, viewport={"width": 800, "height": 600})
    _plain_center, plain_zoom = fit_view_to_bounds(plain, viewport={"width": 800, "height": 600})
    assert center["lon"] == -180.0
    assert center["lat"] == 0.0
    # Same 20 degree extent as the plain box, not a sliver that needs a street-level zoom.
    assert zoom == plain_zoom
    assert zoom < 6.0
