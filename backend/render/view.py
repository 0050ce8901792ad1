from __future__ import annotations

import math

from geo.tiles import MAX_MERCATOR_LAT, normalize_longitude
from geo.types import BoundingBox

TILE_PX = 256


def fit_view_to_bounds(
    bbox: BoundingBox,
    *,
    viewport: dict[str, int] | None,
    padding_px: int = 50,
    max_zoom: float | None = None,
) -> tuple[dict[str, float], float]:
    """
    Center + zoom that fit the box into the viewport, like Leaflet's fitBounds
    with padding=[p, p] and maxZoom. Boxes wrapping the antimeridian are centered
    on their middle, not on the far side of the globe.
    """
    center = {
        "lon": normalize_longitude(bbox.west + bbox.lon_span / 2.0),
        "lat": (bbox.south + bbox.north) / 2.0,
    }

    width = int((viewport or {}).get("width") or 900)
    height = int((viewport or {}).get("height") or 600)
    width = max(1, width - 2 * padding_px)
    height = max(1, height - 2 * padding_px)

    zoom = max(0.0, bbox_to_zoom(bbox, width=width, height=height))
    if max_zoom is not None:
        zoom = min(zoom, float(max_zoom))
    return center, zoom


def _mercator_y(lat: float) -> float:
    lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, lat))
    lat_rad = math.radians(lat)
    return math.log(math.tan(lat_rad) + 1.0 / math.cos(lat_rad))


def bbox_to_zoom(bbox: BoundingBox, *, width: int, height: int) -> float:
    """
    Largest zoom at which the box still fits width x height px of 256 px tiles.
    """
    # Share of the full world square covered along each axis.
    x_frac = max(bbox.lon_span / 360.0, 1e-9)
    y_frac = max((_mercator_y(bbox.north) - _mercator_y(bbox.south)) / (2.0 * math.pi), 1e-9)

    zoom_x = math.log2(width / (TILE_PX * x_frac))
    zoom_y = math.log2(height / (TILE_PX * y_frac))
    return float(min(zoom_x, zoom_y))
