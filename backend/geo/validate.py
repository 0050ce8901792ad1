from __future__ import annotations

import math
import operator

from geo.errors import InvalidCoordinateError, InvalidTileError, InvalidZoomError

# Beyond this, tile indices no longer fit the float mantissa used by the projection math.
MAX_ZOOM = 30


def check_zoom(zoom: int) -> int:
    if isinstance(zoom, bool):
        raise InvalidZoomError(f"zoom must be an integer, got {zoom!r}")
    try:
        z = operator.index(zoom)
    except TypeError:
        raise InvalidZoomError(f"zoom must be an integer, got {zoom!r}") from None
    if z < 0 or z > MAX_ZOOM:
        raise InvalidZoomError(f"zoom must be within [0, {MAX_ZOOM}], got {z}")
    return z


def check_finite(value: float, name: str) -> float:
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(v):
        raise InvalidCoordinateError(f"{name} must be finite, got {value!r}")
    return v


def check_latitude(lat: float, *, inclusive: bool = True) -> float:
    """
    Validate a WGS84 latitude.

    inclusive=False rejects the poles themselves, where the Mercator formulas divide by zero.
    """
    v = check_finite(lat, "latitude")
    if inclusive and not -90.0 <= v <= 90.0:
        raise InvalidCoordinateError(f"latitude must be within [-90, 90], got {v}")
    if not inclusive and not -90.0 < v < 90.0:
        raise InvalidCoordinateError(f"latitude must be within (-90, 90), got {v}")
    return v


def check_tile(x: int, y: int, zoom: int) -> tuple[int, int, int]:
    z = check_zoom(zoom)
    n = 1 << z
    out: list[int] = []
    for name, value in (("x", x), ("y", y)):
        if isinstance(value, bool):
            raise InvalidTileError(f"tile {name} must be an integer, got {value!r}")
        try:
            v = operator.index(value)
        except TypeError:
            raise InvalidTileError(f"tile {name} must be an integer, got {value!r}") from None
        if not 0 <= v < n:
            raise InvalidTileError(f"tile {name} must be within [0, {n}) at zoom {z}, got {v}")
        out.append(v)
    return out[0], out[1], z
