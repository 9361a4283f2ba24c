# bikeflow/viz/encoding.py
from __future__ import annotations

from bisect import bisect_right
from typing import List, Sequence, Tuple

import numpy as np

from bikeflow.traffic.aggregate import max_total_traffic
from bikeflow.traffic.time_filter import is_unfiltered
from bikeflow.types import MarkerDatum, StationTraffic

RADIUS_RANGE_ALL = (0.0, 25.0)
RADIUS_RANGE_FILTERED = (3.0, 50.0)

FLOW_BUCKETS = (0.0, 0.5, 1.0)
FLOW_THRESHOLDS = (1 / 3, 2 / 3)

DEPARTURES_COLOR = (70, 130, 180)  # steelblue
ARRIVALS_COLOR = (255, 140, 0)  # darkorange


def radius_range(time_filter: int) -> Tuple[float, float]:
    """Bigger circles when filtering, since far fewer trips are shown."""
    return RADIUS_RANGE_ALL if is_unfiltered(time_filter) else RADIUS_RANGE_FILTERED


class SqrtScale:
    """
    Square-root scale: domain [0, domain_max] -> range [lo, hi], so circle
    area (not radius) tracks traffic.
    """

    def __init__(self, domain_max: float, range_: Tuple[float, float]):
        self.domain_max = float(domain_max)
        self.lo, self.hi = (float(v) for v in range_)

    def __call__(self, value: float) -> float:
        if self.domain_max <= 0:
            return self.lo
        t = np.sqrt(max(float(value), 0.0)) / np.sqrt(self.domain_max)
        return float(self.lo + (self.hi - self.lo) * t)


def radius_scale(traffic: Sequence[StationTraffic], time_filter: int) -> SqrtScale:
    # domain comes from the displayed set, not the full load
    return SqrtScale(max_total_traffic(traffic), radius_range(time_filter))


def departure_ratio(t: StationTraffic) -> float:
    # no traffic reads as balanced
    return t.departures / t.total_traffic if t.total_traffic > 0 else 0.5


def quantize_flow(ratio: float) -> float:
    """
    Even thirds of [0, 1]:
      [0, 1/3) -> 0, [1/3, 2/3) -> 0.5, [2/3, 1] -> 1
    """
    return FLOW_BUCKETS[bisect_right(FLOW_THRESHOLDS, float(ratio))]


def station_flow(t: StationTraffic) -> float:
    return quantize_flow(departure_ratio(t))


def flow_color(flow: float) -> str:
    """Mix departures/arrivals colours by the flow bucket."""
    rgb = [
        round(d * flow + a * (1 - flow))
        for d, a in zip(DEPARTURES_COLOR, ARRIVALS_COLOR)
    ]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def tooltip_text(t: StationTraffic) -> str:
    return (
        f"{t.total_traffic} trips "
        f"({t.departures} departures, {t.arrivals} arrivals)"
    )


def encode_markers(
    traffic: Sequence[StationTraffic],
    time_filter: int,
) -> List[MarkerDatum]:
    scale = radius_scale(traffic, time_filter)

    out = []
    for t in traffic:
        flow = station_flow(t)
        out.append(
            MarkerDatum(
                station_id=t.station_id,
                radius=scale(t.total_traffic),
                flow=flow,
                fill_color=flow_color(flow),
                tooltip=tooltip_text(t),
            )
        )
    return out
