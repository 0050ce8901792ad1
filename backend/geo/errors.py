from __future__ import annotations


class TileMathError(ValueError):
    """
    Base class for inputs outside the domain of the tile/quadkey functions.
    """


class InvalidZoomError(TileMathError):
    pass


class InvalidCoordinateError(TileMathError):
    pass


class MercatorRangeError(InvalidCoordinateError):
    """
    Latitude cannot be represented in Web Mercator (|lat| beyond ~85.0511 degrees).
    """


class InvalidTileError(TileMathError):
    pass


class InvalidQuadkeyError(TileMathError):
    pass
