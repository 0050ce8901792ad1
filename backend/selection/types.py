from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from geo.types import BoundingBox, GeoPoint


class SelectionMode(str, Enum):
    quadkey = "quadkey"
    bbox = "bbox"


class DrawState(str, Enum):
    idle = "idle"
    drawing_bbox = "drawing_bbox"


class QuadkeyOutput(BaseModel):
    """
    Everything shown for a single-click tile lookup; each text field is copy-pasteable.
    """

    kind: Literal["quadkey"] = "quadkey"
    quadkey: str
    latLonText: str
    tileText: str
    bboxString: str
    wkt: str
    geojson: str
    zoom: int = Field(ge=0)
    x: int = Field(ge=0)
    y: int = Field(ge=0)


class BboxOutput(BaseModel):
    kind: Literal["bbox"] = "bbox"
    bboxString: str
    wkt: str
    geojson: str


SelectionOutput = Annotated[Union[QuadkeyOutput, BboxOutput], Field(discriminator="kind")]

_OUTPUT_ADAPTER: TypeAdapter[QuadkeyOutput | BboxOutput] = TypeAdapter(SelectionOutput)


def parse_selection_output(data: dict[str, Any]) -> QuadkeyOutput | BboxOutput:
    return _OUTPUT_ADAPTER.validate_python(data)


@dataclass(frozen=True)
class SelectionUpdate:
    """
    What the map widget should show after a controller event.

    At most one shape is set: the tile rectangle, the (preview) bbox, or the
    start marker of a bbox being drawn.
    """

    mode: SelectionMode
    state: DrawState
    instruction: str | None = None
    output: QuadkeyOutput | BboxOutput | None = None
    tile_bounds: BoundingBox | None = None
    tile_zoom: int | None = None
    bbox: BoundingBox | None = None
    preview: bool = False
    start: GeoPoint | None = None
