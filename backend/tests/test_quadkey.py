from __future__ import annotations

import pytest

from geo.errors import InvalidQuadkeyError, InvalidTileError
from geo.quadkey import (
    lat_lon_to_quadkey,
    quadkey_to_tile,
    quadkeys_for_bbox,
    tile_to_quadkey,
)
from geo.types import BoundingBox, GeoPoint, TileCoordinate


def test_tile_to_quadkey_has_one_digit_per_zoom_level():
    assert tile_to_quadkey(0, 0, 0) == ""
    assert tile_to_quadkey(0, 0, 2) == "00"
    assert tile_to_quadkey(3, 3, 2) == "33"
    assert tile_to_quadkey(1, 0, 1) == "1"
    assert tile_to_quadkey(0, 1, 1) == "2"


def test_tile_to_quadkey_is_msb_first():
    # x=011, y=101 -> (0+2)(1+0)(1+2)
    assert tile_to_quadkey(3, 5, 3) == "213"


def test_quadkey_decodes_back_to_tile():
    assert quadkey_to_tile("213") == TileCoordinate(x=3, y=5, zoom=3)
    assert quadkey_to_tile("") == TileCoordinate(x=0, y=0, zoom=0)

    z = 3
    for x in range(2**z):
        for y in range(2**z):
            assert quadkey_to_tile(tile_to_quadkey(x, y, z)) == TileCoordinate(x=x, y=y, zoom=z)


def test_lat_lon_to_quadkey():
    # Tile 5/16/11
    assert lat_lon_to_quadkey(45.0, 10.0, 5) == "12022"
    assert TileCoordinate.from_lat_lon(45.0, 10.0, 5).quadkey() == "12022"
    assert TileCoordinate.from_quadkey("12022").zxy == "5/16/11"


def test_invalid_tiles_and_quadkeys_are_rejected():
    with pytest.raises(InvalidTileError):
        tile_to_quadkey(4, 0, 2)
    with pytest.raises(InvalidTileError):
        tile_to_quadkey(0, -1, 2)
    with pytest.raises(InvalidQuadkeyError):
        quadkey_to_tile("0124")
    with pytest.raises(InvalidQuadkeyError):
        quadkey_to_tile("0" * 31)
    with pytest.raises(InvalidQuadkeyError):
        quadkey_to_tile(123)  # type: ignore[arg-type]


def test_quadkeys_for_bbox_share_parent_prefix():
    bbox = BoundingBox.from_corners(
        GeoPoint(lat=50.0, lon=14.3),
        GeoPoint(lat=50.1, lon=14.5),
    )
    parent = lat_lon_to_quadkey(50.05, 14.4, 8)
    keys = quadkeys_for_bbox(12, bbox)
    assert keys
    assert len(set(keys)) == len(keys)
    assert all(len(k) == 12 for k in keys)
    assert all(k.startswith(parent) for k in keys)
