from __future__ import annotations

from dataclasses import dataclass

from geo.errors import InvalidCoordinateError
from geo.validate import check_finite, check_latitude, check_tile


@dataclass(frozen=True)
class GeoPoint:
    """
    WGS84 point in degrees. Longitude is kept as given (not normalized).
    """

    lat: float
    lon: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "lat", check_latitude(self.lat))
        object.__setattr__(self, "lon", check_finite(self.lon, "longitude"))


@dataclass(frozen=True)
class TileCoordinate:
    """
    Slippy-map tile index (z/x/y, OSM scheme: y grows southward).
    """

    x: int
    y: int
    zoom: int

    def __post_init__(self) -> None:
        x, y, z = check_tile(self.x, self.y, self.zoom)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "zoom", z)

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float, zoom: int) -> "TileCoordinate":
        from geo.tiles import lat_lon_to_tile

        x, y = lat_lon_to_tile(lat, lon, zoom)
        return cls(x=x, y=y, zoom=zoom)

    @classmethod
    def from_quadkey(cls, quadkey: str) -> "TileCoordinate":
        from geo.quadkey import quadkey_to_tile

        return quadkey_to_tile(quadkey)

    @property
    def zxy(self) -> str:
        return f"{self.zoom}/{self.x}/{self.y}"

    def quadkey(self) -> str:
        from geo.quadkey import tile_to_quadkey

        return tile_to_quadkey(self.x, self.y, self.zoom)

    def corners(self) -> tuple[GeoPoint, GeoPoint]:
        from geo.tiles import tile_to_bounds

        return tile_to_bounds(self.x, self.y, self.zoom)

    def bounds(self) -> "BoundingBox":
        return BoundingBox.from_corners(*self.corners())


@dataclass(frozen=True)
class BoundingBox:
    """
    Lon/lat box given by its south-west and north-east corners.

    Convention used throughout this repo:
    - south <= north is enforced
    - west/east are taken as given; a box is never split at the antimeridian
    """

    southwest: GeoPoint
    northeast: GeoPoint

    def __post_init__(self) -> None:
        if self.southwest.lat > self.northeast.lat:
            raise InvalidCoordinateError(
                f"south ({self.southwest.lat}) must not exceed north ({self.northeast.lat})"
            )

    @classmethod
    def from_corners(cls, a: GeoPoint, b: GeoPoint) -> "BoundingBox":
        """
        Box spanned by any two opposite corners (e.g. the two clicks of a drag).
        """
        return cls(
            southwest=GeoPoint(lat=min(a.lat, b.lat), lon=min(a.lon, b.lon)),
            northeast=GeoPoint(lat=max(a.lat, b.lat), lon=max(a.lon, b.lon)),
        )

    @property
    def south(self) -> float:
        return self.southwest.lat

    @property
    def west(self) -> float:
        return self.southwest.lon

    @property
    def north(self) -> float:
        return self.northeast.lat

    @property
    def east(self) -> float:
        return self.northeast.lon

    @property
    def lon_span(self) -> float:
        """
        Eastward extent in degrees; a box with east < west wraps the antimeridian.
        """
        span = self.east - self.west
        if span < 0.0:
            span += 360.0
        return span

    def ring(self) -> list[tuple[float, float]]:
        """
        Closed (lon, lat) ring SW -> SE -> NE -> NW -> SW (counter-clockwise).
        """
        return [
            (self.west, self.south),
            (self.east, self.south),
            (self.east, self.north),
            (self.west, self.north),
            (self.west, self.south),
        ]
