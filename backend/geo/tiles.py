from __future__ import annotations

import math

from geo.errors import MercatorRangeError, TileMathError
from geo.types import BoundingBox, GeoPoint, TileCoordinate
from geo.validate import check_finite, check_latitude, check_tile, check_zoom


# atan(sinh(pi)): the latitude of the top edge of tile row 0.
MAX_MERCATOR_LAT = 85.0511287798066

DEFAULT_MAX_TILES = 4096


def normalize_longitude(lon: float) -> float:
    """
    Wrap any finite longitude into [-180, 180).
    """
    v = check_finite(lon, "longitude")
    return ((v + 180.0) % 360.0 + 360.0) % 360.0 - 180.0


def _tile_x(lon: float, n: int) -> int:
    return int(math.floor((lon + 180.0) / 360.0 * n))


def _tile_y(lat: float, n: int) -> int:
    lat_rad = math.radians(lat)
    return int(
        math.floor(
            (1.0 - math.log(math.tan(lat_rad) + (1.0 / math.cos(lat_rad))) / math.pi)
            / 2.0
            * n
        )
    )


def lat_lon_to_tile(lat: float, lon: float, zoom: int) -> tuple[int, int]:
    """
    Convert lat/lon in EPSG:4326 to slippy tile (x, y) at zoom.

    Longitude wraps (x is taken mod 2**zoom). Latitude does not: Web Mercator only covers
    |lat| < ~85.0511, and points outside that band raise MercatorRangeError instead of
    being clamped onto the edge row. The same applies right at the band edge when
    floating point rounding lands y outside [0, 2**zoom).
    """
    z = check_zoom(zoom)
    lat = check_latitude(lat, inclusive=False)
    lon = check_finite(lon, "longitude")
    n = 2**z

    if abs(lat) > MAX_MERCATOR_LAT:
        raise MercatorRangeError(
            f"latitude {lat} is outside the Web Mercator range (+/-{MAX_MERCATOR_LAT})"
        )

    x = _tile_x(lon, n) % n
    y = _tile_y(lat, n)
    if not 0 <= y < n:
        raise MercatorRangeError(
            f"latitude {lat} maps to tile row {y}, outside [0, {n}) at zoom {z}"
        )
    return x, y


def _lat_from_tile_y(tile_y: int, n: int) -> float:
    # https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames
    t = math.pi * (1.0 - 2.0 * tile_y / n)
    return math.degrees(math.atan(math.sinh(t)))


def tile_to_bounds(x: int, y: int, zoom: int) -> tuple[GeoPoint, GeoPoint]:
    """
    Corners of slippy tile z/x/y: (corner at (x, y), corner at (x+1, y+1)).

    Tile y grows southward, so the first point is the north-west corner and the
    second the south-east one. Use tile_bbox() for a normalized BoundingBox.
    """
    x, y, z = check_tile(x, y, zoom)
    n = 2**z

    lon_left = x / n * 360.0 - 180.0
    lon_right = (x + 1) / n * 360.0 - 180.0
    lat_top = _lat_from_tile_y(y, n)
    lat_bottom = _lat_from_tile_y(y + 1, n)

    return GeoPoint(lat=lat_top, lon=lon_left), GeoPoint(lat=lat_bottom, lon=lon_right)


def tile_bbox(x: int, y: int, zoom: int) -> BoundingBox:
    return BoundingBox.from_corners(*tile_to_bounds(x, y, zoom))


def tiles_for_bbox(
    zoom: int, bbox: BoundingBox, *, max_tiles: int = DEFAULT_MAX_TILES
) -> list[TileCoordinate]:
    """
    List of slippy tiles covering the bbox, x-major.

    The box is clipped to the Web Mercator latitude band first. Columns wrap across the
    antimeridian, whether east runs past 180 or east < west. Raises TileMathError rather
    than enumerating more than max_tiles tiles.
    """
    z = check_zoom(zoom)
    n = 2**z

    north = min(MAX_MERCATOR_LAT, bbox.north)
    south = max(-MAX_MERCATOR_LAT, bbox.south)
    if south > north:
        return []

    x0 = _tile_x(bbox.west, n)
    x1 = _tile_x(bbox.west + bbox.lon_span, n)
    if x1 - x0 + 1 >= n:
        xs = list(range(n))
    else:
        xs = [x % n for x in range(x0, x1 + 1)]

    # Clamp rows: the clipped band edges may round one row outside the grid.
    y0 = max(0, min(n - 1, _tile_y(north, n)))
    y1 = max(0, min(n - 1, _tile_y(south, n)))

    count = len(xs) * (y1 - y0 + 1)
    if count > max_tiles:
        raise TileMathError(
            f"bbox covers {count} tiles at zoom {z}, more than max_tiles={max_tiles}"
        )

    return [TileCoordinate(x=x, y=y, zoom=z) for x in xs for y in range(y0, y1 + 1)]
