# bikeflow/viz/overlays/stations.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

import folium

from bikeflow.types import MarkerDatum, MarkerJoin, Station

STROKE_COLOR = "#ffffff"
FILL_OPACITY = 0.6


@dataclass
class StationMarker:
    """
    One long-lived marker per station id. Filter changes update it in place,
    so anything bound to it (hover handler, position) survives.
    """
    station_id: str
    lat: float
    lon: float
    radius: float
    flow: float
    fill_color: str
    tooltip: str
    x: float | None = None
    y: float | None = None


class StationMarkerLayer:
    def __init__(self, stations: Iterable[Station]):
        self._stations: Dict[str, Station] = {s.station_id: s for s in stations}
        self.markers: Dict[str, StationMarker] = {}
        self._hover_handler: Optional[Callable[[str], str]] = None

    def on_hover(self, handler: Callable[[str], str]) -> None:
        self._hover_handler = handler

    def apply(self, join: MarkerJoin) -> None:
        for d in join.enter:
            s = self._stations[d.station_id]
            self.markers[d.station_id] = StationMarker(
                station_id=d.station_id,
                lat=s.lat,
                lon=s.lon,
                radius=d.radius,
                flow=d.flow,
                fill_color=d.fill_color,
                tooltip=d.tooltip,
            )

        for d in join.update:
            mk = self.markers[d.station_id]
            mk.radius = d.radius
            mk.flow = d.flow
            mk.fill_color = d.fill_color
            mk.tooltip = d.tooltip

        for sid in join.exit:
            self.markers.pop(sid, None)

    def move(self, station_id: str, x: float, y: float) -> None:
        mk = self.markers[station_id]
        mk.x = x
        mk.y = y

    def hover(self, station_id: str) -> str:
        if self._hover_handler is not None:
            return self._hover_handler(station_id)
        return self.markers[station_id].tooltip

    def add_to(self, m: folium.Map) -> None:
        for mk in self.markers.values():
            folium.CircleMarker(
                location=[mk.lat, mk.lon],
                radius=mk.radius,
                color=STROKE_COLOR,
                weight=1,
                fill=True,
                fill_color=mk.fill_color,
                fill_opacity=FILL_OPACITY,
                tooltip=self.hover(mk.station_id),
            ).add_to(m)


def marker_payload(d: MarkerDatum) -> dict:
    return {
        "id": d.station_id,
        "radius": round(d.radius, 3),
        "flow": d.flow,
        "fill_color": d.fill_color,
        "tooltip": d.tooltip,
    }
