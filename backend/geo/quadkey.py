from __future__ import annotations

from geo.errors import InvalidQuadkeyError
from geo.tiles import DEFAULT_MAX_TILES, lat_lon_to_tile, tiles_for_bbox
from geo.types import BoundingBox, TileCoordinate
from geo.validate import MAX_ZOOM, check_tile


def tile_to_quadkey(x: int, y: int, zoom: int) -> str:
    """
    Bing-style quadkey for slippy tile z/x/y.

    One base-4 digit per zoom level, most significant tile bit first:
    digit = (x bit set) + 2 * (y bit set). Zoom 0 is the empty string.
    """
    x, y, z = check_tile(x, y, zoom)
    digits: list[str] = []
    for i in range(z, 0, -1):
        mask = 1 << (i - 1)
        digit = 0
        if x & mask:
            digit += 1
        if y & mask:
            digit += 2
        digits.append(str(digit))
    return "".join(digits)


def quadkey_to_tile(quadkey: str) -> TileCoordinate:
    if not isinstance(quadkey, str):
        raise InvalidQuadkeyError(f"quadkey must be a string, got {quadkey!r}")
    z = len(quadkey)
    if z > MAX_ZOOM:
        raise InvalidQuadkeyError(f"quadkey is longer than {MAX_ZOOM} digits: {quadkey!r}")

    x = y = 0
    for i, ch in enumerate(quadkey):
        mask = 1 << (z - i - 1)
        if ch == "0":
            continue
        if ch == "1":
            x |= mask
        elif ch == "2":
            y |= mask
        elif ch == "3":
            x |= mask
            y |= mask
        else:
            raise InvalidQuadkeyError(f"invalid quadkey digit {ch!r} in {quadkey!r}")
    return TileCoordinate(x=x, y=y, zoom=z)


def lat_lon_to_quadkey(lat: float, lon: float, zoom: int) -> str:
    x, y = lat_lon_to_tile(lat, lon, zoom)
    return tile_to_quadkey(x, y, zoom)


def quadkeys_for_bbox(
    zoom: int, bbox: BoundingBox, *, max_tiles: int = DEFAULT_MAX_TILES
) -> list[str]:
    return [t.quadkey() for t in tiles_for_bbox(zoom, bbox, max_tiles=max_tiles)]
