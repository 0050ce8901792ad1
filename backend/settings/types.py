from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from geo.validate import MAX_ZOOM


class ViewCenter(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lon: float


class DefaultView(BaseModel):
    center: ViewCenter = Field(default_factory=lambda: ViewCenter(lat=45.933841, lon=46.408825))
    zoom: float = Field(default=5.0, ge=0.0, le=24.0)


class TileZoomRange(BaseModel):
    """
    Tile zoom levels offered to the user for quadkey lookups.
    """

    min: int = Field(default=1, ge=0, le=MAX_ZOOM)
    max: int = Field(default=23, ge=0, le=MAX_ZOOM)
    default: int = Field(default=10, ge=0, le=MAX_ZOOM)

    @model_validator(mode="after")
    def _check_order(self) -> "TileZoomRange":
        if not self.min <= self.default <= self.max:
            raise ValueError(
                f"tileZoom must satisfy min <= default <= max, got {self.min}/{self.default}/{self.max}"
            )
        return self

    def contains(self, zoom: int) -> bool:
        return self.min <= zoom <= self.max


class ShapeStyle(BaseModel):
    color: str
    weight: int = Field(default=2, ge=0)
    fillOpacity: float = Field(default=0.2, ge=0.0, le=1.0)
    # Start marker radius in px; ignored for rectangles.
    radius: int = Field(default=5, ge=1)


class SelectionStyles(BaseModel):
    tile: ShapeStyle = Field(default_factory=lambda: ShapeStyle(color="#ff7800", weight=2))
    bbox: ShapeStyle = Field(
        default_factory=lambda: ShapeStyle(color="#007cff", weight=2, fillOpacity=0.1)
    )
    startMarker: ShapeStyle = Field(
        default_factory=lambda: ShapeStyle(color="#007cff", fillOpacity=0.8, radius=5)
    )


class AppSettings(BaseModel):
    defaultView: DefaultView = Field(default_factory=DefaultView)
    tileZoom: TileZoomRange = Field(default_factory=TileZoomRange)
    # Decimals for the lat/lon and bbox text outputs.
    coordinateDecimals: int = Field(default=6, ge=0, le=15)
    fitPaddingPx: int = Field(default=50, ge=0)
    mapStyle: str = "open-street-map"
    styles: SelectionStyles = Field(default_factory=SelectionStyles)
    logLevel: str = "INFO"
