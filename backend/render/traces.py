from __future__ import annotations

from typing import Any

from geo.types import BoundingBox, GeoPoint
from settings.types import ShapeStyle


def _rgba(color: str, alpha: float) -> str:
    """
    "#rrggbb" -> "rgba(r, g, b, alpha)"; anything else is passed through.
    """
    c = (color or "").strip()
    if len(c) == 7 and c.startswith("#"):
        try:
            r, g, b = (int(c[i : i + 2], 16) for i in (1, 3, 5))
        except ValueError:
            return c
        return f"rgba({r}, {g}, {b}, {alpha:g})"
    return c


def trace_rectangle(
    bbox: BoundingBox, style: ShapeStyle, *, name: str, preview: bool = False
) -> dict[str, Any]:
    ring = bbox.ring()
    return {
        "type": "scattermapbox",
        "name": name,
        "lon": [lon for lon, _lat in ring],
        "lat": [lat for _lon, lat in ring],
        "mode": "lines",
        "fill": "toself",
        "fillcolor": _rgba(style.color, style.fillOpacity),
        "line": {"color": style.color, "width": style.weight},
        # scattermapbox lines can't be dashed; a faded outline marks the preview instead.
        "opacity": 0.5 if preview else 1.0,
        "hoverinfo": "skip",
        "showlegend": False,
    }


def trace_start_marker(point: GeoPoint, style: ShapeStyle) -> dict[str, Any]:
    return {
        "type": "scattermapbox",
        "name": "Start corner",
        "lon": [point.lon],
        "lat": [point.lat],
        "mode": "markers",
        "marker": {
            "size": style.radius * 2,
            "color": _rgba(style.color, style.fillOpacity),
        },
        "hoverinfo": "skip",
        "showlegend": False,
    }
