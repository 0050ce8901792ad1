from __future__ import annotations

import json

from shapely.geometry import Polygon

from geo.types import BoundingBox, TileCoordinate


def _num(v: float, precision: int | None) -> str:
    if precision is None:
        return repr(float(v))
    return f"{float(v):.{int(precision)}f}"


def bounds_to_wkt(bbox: BoundingBox, *, precision: int | None = None) -> str:
    """
    Closed 5-point WKT polygon in (lon lat) order: SW, SE, NE, NW, SW.

    precision=None keeps full float precision (shortest round-tripping repr).
    """
    coords = ", ".join(f"{_num(lon, precision)} {_num(lat, precision)}" for lon, lat in bbox.ring())
    return f"POLYGON(({coords}))"


def bounds_to_geojson(bbox: BoundingBox) -> str:
    """
    RFC 7946 Polygon geometry as compact JSON text.
    """
    ring = [[lon, lat] for lon, lat in bbox.ring()]
    return json.dumps({"type": "Polygon", "coordinates": [ring]}, separators=(",", ":"))


def bounds_to_bbox_string(bbox: BoundingBox, *, decimals: int = 6) -> str:
    # minLon,minLat,maxLon,maxLat
    return ",".join(
        f"{v:.{decimals}f}" for v in (bbox.west, bbox.south, bbox.east, bbox.north)
    )


def bounds_to_polygon(bbox: BoundingBox) -> Polygon:
    return Polygon(bbox.ring())


def format_lat_lon(lat: float, lon: float, *, decimals: int = 6) -> str:
    return f"{lat:.{decimals}f},{lon:.{decimals}f}"


def format_tile(tile: TileCoordinate) -> str:
    return tile.zxy
