"""
Tests for station / trip loading
"""

import json

import pandas as pd
import pytest

from bikeflow.data.dataset import DatasetLoadError, load_dataset
from bikeflow.traffic.time_filter import minutes_since_midnight
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import TRIP_COLUMNS, load_trips, trips_frame

TRIPS_CSV = """ride_id,rideable_type,started_at,ended_at,start_station_id,end_station_id,is_member
r1,classic_bike,2024-03-01 08:00:12.000,2024-03-01 08:10:40.000,M32006,M32011,1
r2,electric_bike,2024-03-01 17:30:00.000,2024-03-01 17:45:00.000,M32011,M32006,0
"""


@pytest.fixture
def stations_file(tmp_path):
    path = tmp_path / "bluebikes-stations.json"
    path.write_text(
        json.dumps(
            {
                "data": {
                    "stations": [
                        {
                            "short_name": "M32006",
                            "station_id": "a1",
                            "name": "MIT at Mass Ave / Amherst St",
                            "lat": 42.3581,
                            "lon": -71.0936,
                        },
                        {
                            "station_id": "M32011",
                            "name": "Central Square",
                            "lat": "42.3651",
                            "lon": "-71.1032",
                        },
                    ]
                }
            }
        )
    )
    return path


@pytest.fixture
def trips_file(tmp_path):
    path = tmp_path / "bluebikes-traffic.csv"
    path.write_text(TRIPS_CSV)
    return path


class TestLoadStations:
    def test_short_name_is_station_id(self, stations_file):
        stations = load_stations(stations_file)

        assert [s.station_id for s in stations] == ["M32006", "M32011"]
        assert stations[1].lat == pytest.approx(42.3651)

    def test_missing_stations_array(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"stations": []}))

        with pytest.raises(ValueError):
            load_stations(path)

    def test_duplicate_ids_keep_first_station(self, tmp_path):
        path = tmp_path / "dupes.json"
        path.write_text(
            json.dumps(
                {
                    "data": {
                        "stations": [
                            {"short_name": "A32000", "name": "First", "lat": 42.36, "lon": -71.09},
                            {"short_name": "A32000", "name": "Second", "lat": 42.37, "lon": -71.10},
                            {"short_name": "A32001", "name": "Other", "lat": 42.38, "lon": -71.11},
                        ]
                    }
                }
            )
        )

        stations = load_stations(path)

        assert [s.station_id for s in stations] == ["A32000", "A32001"]
        assert stations[0].name == "First"


class TestLoadTrips:
    def test_parses_ids_and_timestamps(self, trips_file):
        trips = load_trips(trips_file)

        assert len(trips) == 2
        assert list(trips["start_station_id"]) == ["M32006", "M32011"]
        assert trips["started_at"].iloc[0].hour == 8

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("ride_id,started_at\nr1,2024-03-01 08:00\n")

        with pytest.raises(ValueError):
            load_trips(path)

    def test_mixed_timestamp_formats_keep_every_row(self):
        raw = pd.DataFrame(
            [
                ("A", "B", "2024-03-01 08:00:00", "2024-03-01 08:10:00"),
                ("A", "B", "2024-03-01 08:00:00.123", "2024-03-01 08:10:00.456"),
                ("B", "A", "3/1/2024 8:00", "3/1/2024 8:20"),
            ],
            columns=TRIP_COLUMNS,
        )

        trips = trips_frame(raw)

        assert len(trips) == 3
        assert list(minutes_since_midnight(trips["started_at"])) == [480, 480, 480]
        assert trips["started_at"].iloc[2].month == 3

    def test_unparseable_timestamp_is_an_error(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text(
            "started_at,ended_at,start_station_id,end_station_id\n"
            "2024-03-01 08:00,2024-03-01 08:10,A,B\n"
            "not a date,2024-03-01 08:10,A,B\n"
        )

        with pytest.raises(ValueError, match="started_at"):
            load_trips(path)


class TestLoadDataset:
    def test_loads_both(self, stations_file, trips_file):
        dataset = load_dataset(stations_file, trips_file)

        assert len(dataset.stations) == 2
        assert len(dataset.trips) == 2

    def test_missing_stations_is_fatal(self, tmp_path, trips_file):
        with pytest.raises(DatasetLoadError):
            load_dataset(tmp_path / "nope.json", trips_file)

    def test_bad_trips_is_fatal(self, tmp_path, stations_file):
        path = tmp_path / "bad.csv"
        path.write_text("ride_id\nr1\n")

        with pytest.raises(DatasetLoadError) as exc:
            load_dataset(stations_file, path)

        assert isinstance(exc.value.__cause__, ValueError)

    def test_bad_timestamp_is_fatal(self, tmp_path, stations_file):
        path = tmp_path / "bad.csv"
        path.write_text(
            "started_at,ended_at,start_station_id,end_station_id\n"
            "2024-03-01 08:00,yesterday-ish,M32006,M32011\n"
        )

        with pytest.raises(DatasetLoadError) as exc:
            load_dataset(stations_file, path)

        assert isinstance(exc.value.__cause__, ValueError)
