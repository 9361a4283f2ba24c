# bikeflow/viz/controller.py
from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

import pandas as pd

from bikeflow.traffic.aggregate import compute_station_traffic, traffic_by_id
from bikeflow.traffic.time_filter import filter_trips_by_time, parse_time_filter
from bikeflow.types import UNFILTERED, MarkerDatum, MarkerJoin, Station, StationTraffic
from bikeflow.viz.encoding import encode_markers, tooltip_text
from bikeflow.viz.join import join_markers
from bikeflow.viz.overlays.stations import StationMarkerLayer

# (lon, lat) -> (x, y)
Projection = Callable[[float, float], Tuple[float, float]]


def leaflet_projection(lon: float, lat: float) -> Tuple[float, float]:
    """Leaflet projects client side, so positions stay geographic."""
    return lon, lat


class TrafficMapController:
    """
    Owns the time filter and drives the marker layer.

    Two independent triggers:
      - set_time_filter: filter -> aggregate -> encode -> keyed join
      - refresh_positions: project every marker, traffic untouched
    """

    def __init__(
        self,
        stations: Sequence[Station],
        trips: pd.DataFrame,
        layer: StationMarkerLayer,
    ):
        self.stations: Tuple[Station, ...] = tuple(stations)
        self.trips = trips
        self.layer = layer
        self.time_filter = UNFILTERED

        self._traffic: Dict[str, StationTraffic] = {}
        self._markers: Dict[str, MarkerDatum] = {}

        layer.on_hover(self.tooltip_for)
        self.set_time_filter(UNFILTERED)

    @property
    def markers(self) -> List[MarkerDatum]:
        return list(self._markers.values())

    def set_time_filter(self, time_filter: int) -> MarkerJoin:
        self.time_filter = time_filter

        filtered = filter_trips_by_time(self.trips, time_filter)
        traffic = compute_station_traffic(self.stations, filtered)
        current = encode_markers(traffic, time_filter)

        join = join_markers(self._markers, current)
        self.layer.apply(join)

        self._traffic = traffic_by_id(traffic)
        self._markers = {d.station_id: d for d in current}
        return join

    def on_slider_input(self, raw) -> MarkerJoin:
        return self.set_time_filter(parse_time_filter(raw))

    def refresh_positions(self, project: Projection = leaflet_projection) -> None:
        for sid, mk in self.layer.markers.items():
            x, y = project(mk.lon, mk.lat)
            self.layer.move(sid, x, y)

    def traffic_for(self, station_id: str) -> StationTraffic:
        return self._traffic[station_id]

    def tooltip_for(self, station_id: str) -> str:
        return tooltip_text(self._traffic[station_id])

    def min_radius(self) -> float:
        return min((d.radius for d in self._markers.values()), default=0.0)

    def max_radius(self) -> float:
        return max((d.radius for d in self._markers.values()), default=0.0)
