# bikeflow/types.py
from __future__ import annotations
from dataclasses import dataclass, field

# Slider position -1 means "any time".
UNFILTERED = -1


@dataclass(frozen=True)
class Station:
    station_id: str
    name: str
    lat: float
    lon: float


@dataclass(frozen=True)
class StationTraffic:
    station_id: str
    arrivals: int
    departures: int
    total_traffic: int


@dataclass(frozen=True)
class MarkerDatum:
    station_id: str
    radius: float
    flow: float
    fill_color: str
    tooltip: str


@dataclass
class MarkerJoin:
    enter: list[MarkerDatum] = field(default_factory=list)
    update: list[MarkerDatum] = field(default_factory=list)
    exit: list[str] = field(default_factory=list)
