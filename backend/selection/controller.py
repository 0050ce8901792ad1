from __future__ import annotations

import logging

from geo.errors import InvalidZoomError
from geo.tiles import tile_bbox
from geo.types import BoundingBox, GeoPoint
from geo.validate import check_zoom
from selection.describe import describe_bbox, describe_point
from selection.types import DrawState, SelectionMode, SelectionUpdate
from settings.types import AppSettings

logger = logging.getLogger(__name__)


INSTRUCTIONS: dict[str, str] = {
    "quadkey": "Click on the map to get the quadkey",
    "bbox": "Click to start drawing a bounding box",
    "bbox_finish": "Click again to finish drawing the bounding box",
}


class SelectionController:
    """
    Click/move state machine for one map widget.

    States:
    - idle: no drawing in progress
    - drawing_bbox: first corner placed, waiting for the second click

    Only bbox mode ever leaves idle. Failed events (invalid coordinates) raise and leave
    the state untouched.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        self.settings = settings or AppSettings()
        self.mode = SelectionMode.quadkey
        self.state = DrawState.idle
        self.zoom = self.settings.tileZoom.default
        self._start: GeoPoint | None = None

    @property
    def start(self) -> GeoPoint | None:
        return self._start

    def _update(self, **kwargs) -> SelectionUpdate:
        return SelectionUpdate(mode=self.mode, state=self.state, **kwargs)

    def set_mode(self, mode: SelectionMode | str) -> SelectionUpdate:
        m = SelectionMode(mode)
        if m != self.mode:
            logger.debug("mode %s -> %s", self.mode.value, m.value)
        self.mode = m
        self.reset()
        return self._update(instruction=INSTRUCTIONS[m.value])

    def set_zoom(self, zoom: int) -> None:
        z = check_zoom(zoom)
        rng = self.settings.tileZoom
        if not rng.contains(z):
            raise InvalidZoomError(f"tile zoom must be within [{rng.min}, {rng.max}], got {z}")
        self.zoom = z

    def reset(self) -> None:
        if self.state != DrawState.idle:
            logger.debug("bbox drawing cancelled")
        self.state = DrawState.idle
        self._start = None

    def _require_start(self) -> GeoPoint:
        if self._start is None:
            raise RuntimeError(f"no start corner recorded in state {self.state.value}")
        return self._start

    def click(self, lat: float, lon: float) -> SelectionUpdate:
        if self.mode == SelectionMode.quadkey:
            return self._click_quadkey(lat, lon)
        if self.state == DrawState.idle:
            return self._start_bbox(lat, lon)
        return self._finish_bbox(lat, lon)

    def move(self, lat: float, lon: float) -> SelectionUpdate | None:
        """
        Live preview of the box while the second corner is not placed yet.
        """
        if self.mode != SelectionMode.bbox or self.state != DrawState.drawing_bbox:
            return None
        start = self._require_start()
        bbox = BoundingBox.from_corners(start, GeoPoint(lat=lat, lon=lon))
        return self._update(bbox=bbox, preview=True)

    def _click_quadkey(self, lat: float, lon: float) -> SelectionUpdate:
        decimals = self.settings.coordinateDecimals
        output = describe_point(lat, lon, self.zoom, decimals=decimals)
        bounds = tile_bbox(output.x, output.y, output.zoom)
        logger.debug("quadkey %s at %s", output.quadkey, output.tileText)
        return self._update(output=output, tile_bounds=bounds, tile_zoom=output.zoom)

    def _start_bbox(self, lat: float, lon: float) -> SelectionUpdate:
        start = GeoPoint(lat=lat, lon=lon)
        self._start = start
        self.state = DrawState.drawing_bbox
        logger.debug("bbox drawing started at %s,%s", start.lat, start.lon)
        return self._update(instruction=INSTRUCTIONS["bbox_finish"], start=start)

    def _finish_bbox(self, lat: float, lon: float) -> SelectionUpdate:
        start = self._require_start()
        bbox = BoundingBox.from_corners(start, GeoPoint(lat=lat, lon=lon))
        output = describe_bbox(bbox, decimals=self.settings.coordinateDecimals)
        self.state = DrawState.idle
        self._start = None
        logger.debug("bbox drawn: %s", output.bboxString)
        return self._update(output=output, bbox=bbox)
