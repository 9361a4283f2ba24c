import pandas as pd
import pytest

from bikeflow.types import Station
from bikeflow.util.trips import TRIP_COLUMNS, trips_frame


def make_trips(rows):
    """rows: (start_id, end_id, started_at, ended_at)"""
    return trips_frame(pd.DataFrame(rows, columns=TRIP_COLUMNS))


@pytest.fixture
def stations():
    return [
        Station(station_id="A", name="Kendall T", lat=42.3625, lon=-71.0862),
        Station(station_id="B", name="Central Square", lat=42.3651, lon=-71.1032),
        Station(station_id="C", name="Harvard Square", lat=42.3734, lon=-71.1189),
    ]


@pytest.fixture
def trips():
    return make_trips(
        [
            ("A", "B", "2024-03-01 08:00:00", "2024-03-01 08:10:00"),
            ("A", "B", "2024-03-01 08:20:00", "2024-03-01 08:35:00"),
            ("B", "A", "2024-03-01 17:30:00", "2024-03-01 17:45:00"),
            ("A", "B", "2024-03-02 18:05:00", "2024-03-02 18:20:00"),
            ("A", "ZZZ", "2024-03-02 08:40:00", "2024-03-02 09:05:00"),
        ]
    )
