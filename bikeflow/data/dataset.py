# bikeflow/data/dataset.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pandas as pd
from colorama import Fore, Style

from bikeflow.types import Station
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips

BLUEBIKES_STATIONS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-stations.json"
BLUEBIKES_TRIPS_URL = "https://dsc106.com/labs/lab07/data/bluebikes-traffic-2024-03.csv"


class DatasetLoadError(RuntimeError):
    """Stations or trips could not be fetched or parsed."""


@dataclass(frozen=True)
class Dataset:
    stations: tuple[Station, ...]
    trips: pd.DataFrame


def load_dataset(
    stations_source: str | Path = BLUEBIKES_STATIONS_URL,
    trips_source: str | Path = BLUEBIKES_TRIPS_URL,
) -> Dataset:
    """
    Load stations and trips together. Either one failing is fatal:
    no Dataset is returned unless both are ready.
    """
    print(f"{Fore.CYAN}Loading stations from {stations_source}…{Style.RESET_ALL}")
    try:
        stations = load_stations(stations_source)
    except Exception as e:
        print(f"{Fore.RED}Error loading stations: {e!r}{Style.RESET_ALL}")
        raise DatasetLoadError(f"could not load stations from {stations_source}") from e

    print(f"{Fore.CYAN}Loading trips from {trips_source}…{Style.RESET_ALL}")
    try:
        trips = load_trips(trips_source)
    except Exception as e:
        print(f"{Fore.RED}Error loading trips: {e!r}{Style.RESET_ALL}")
        raise DatasetLoadError(f"could not load trips from {trips_source}") from e

    print(
        f"{Fore.GREEN}Loaded {len(stations)} stations and {len(trips)} trips.{Style.RESET_ALL}"
    )
    return Dataset(stations=tuple(stations), trips=trips)
