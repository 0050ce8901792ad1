from __future__ import annotations

from geo.formats import (
    bounds_to_bbox_string,
    bounds_to_geojson,
    bounds_to_wkt,
    format_lat_lon,
    format_tile,
)
from geo.tiles import normalize_longitude
from geo.types import BoundingBox, TileCoordinate
from selection.types import BboxOutput, QuadkeyOutput


def describe_point(lat: float, lon: float, zoom: int, *, decimals: int = 6) -> QuadkeyOutput:
    """
    Tile lookup for a clicked point.

    The tile comes from the raw longitude (x wraps on its own); the lat/lon text shows
    the normalized longitude so panned-around-the-world clicks read sensibly.
    """
    tile = TileCoordinate.from_lat_lon(lat, lon, zoom)
    bounds = tile.bounds()
    return QuadkeyOutput(
        quadkey=tile.quadkey(),
        latLonText=format_lat_lon(lat, normalize_longitude(lon), decimals=decimals),
        tileText=format_tile(tile),
        bboxString=bounds_to_bbox_string(bounds, decimals=decimals),
        wkt=bounds_to_wkt(bounds),
        geojson=bounds_to_geojson(bounds),
        zoom=tile.zoom,
        x=tile.x,
        y=tile.y,
    )


def describe_bbox(bbox: BoundingBox, *, decimals: int = 6) -> BboxOutput:
    return BboxOutput(
        bboxString=bounds_to_bbox_string(bbox, decimals=decimals),
        wkt=bounds_to_wkt(bbox),
        geojson=bounds_to_geojson(bbox),
    )
