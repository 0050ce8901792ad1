from __future__ import annotations

import logging
from typing import Any

from render.traces import trace_rectangle, trace_start_marker
from render.view import fit_view_to_bounds
from selection.types import SelectionUpdate
from settings.types import AppSettings

logger = logging.getLogger(__name__)


def build_selection_plot(
    update: SelectionUpdate,
    *,
    settings: AppSettings,
    view_center: dict[str, float] | None = None,
    view_zoom: float | None = None,
    viewport: dict[str, int] | None = None,
) -> dict[str, Any]:
    """
    Plotly mapbox payload ({"data", "layout"}) for a controller update.

    Tile lookups re-fit the view around the tile, never zooming in more than two levels
    past the tile zoom unless the map is already closer. Bbox drawing keeps the view.
    """
    styles = settings.styles
    traces: list[dict[str, Any]] = []

    center = dict(view_center) if view_center else settings.defaultView.center.model_dump()
    zoom = float(view_zoom) if view_zoom is not None else settings.defaultView.zoom

    if update.tile_bounds is not None:
        traces.append(trace_rectangle(update.tile_bounds, styles.tile, name="Tile"))
        tile_zoom = update.tile_zoom if update.tile_zoom is not None else 0
        max_zoom = max(tile_zoom + 2, view_zoom if view_zoom is not None else 0.0)
        center, zoom = fit_view_to_bounds(
            update.tile_bounds,
            viewport=viewport,
            padding_px=settings.fitPaddingPx,
            max_zoom=max_zoom,
        )
    elif update.bbox is not None:
        traces.append(
            trace_rectangle(
                update.bbox,
                styles.bbox,
                name="Bounding box (preview)" if update.preview else "Bounding box",
                preview=update.preview,
            )
        )
    elif update.start is not None:
        traces.append(trace_start_marker(update.start, styles.startMarker))

    meta: dict[str, Any] = {
        "mode": update.mode.value,
        "state": update.state.value,
    }
    if update.instruction:
        meta["instruction"] = update.instruction
    if update.output is not None:
        meta["selection"] = update.output.model_dump()

    logger.debug("selection plot: %d trace(s), zoom %.2f", len(traces), zoom)
    return {
        "data": traces,
        "layout": {
            "mapbox": {"center": center, "zoom": zoom, "style": settings.mapStyle},
            "margin": {"l": 0, "r": 0, "t": 0, "b": 0},
            "showlegend": False,
            "meta": meta,
        },
    }
