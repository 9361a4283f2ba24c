# bikeflow/traffic/aggregate.py
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

import pandas as pd

from bikeflow.types import Station, StationTraffic


def compute_station_traffic(
    stations: Sequence[Station],
    trips: pd.DataFrame,
) -> List[StationTraffic]:
    """
    Count departures (by start_station_id) and arrivals (by end_station_id).

    Returns one fresh StationTraffic per station, in station order. Trips
    whose ids match no station are counted but never looked up.
    """
    departures = trips["start_station_id"].value_counts()
    arrivals = trips["end_station_id"].value_counts()

    out = []
    for s in stations:
        dep = int(departures.get(s.station_id, 0))
        arr = int(arrivals.get(s.station_id, 0))
        out.append(
            StationTraffic(
                station_id=s.station_id,
                arrivals=arr,
                departures=dep,
                total_traffic=arr + dep,
            )
        )
    return out


def traffic_by_id(traffic: Iterable[StationTraffic]) -> Dict[str, StationTraffic]:
    return {t.station_id: t for t in traffic}


def max_total_traffic(traffic: Iterable[StationTraffic]) -> int:
    return max((t.total_traffic for t in traffic), default=0)
