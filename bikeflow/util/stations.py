# bikeflow/util/stations.py
from __future__ import annotations

import json
import urllib.request
from pathlib import Path

from colorama import Fore, Style

from bikeflow.types import Station


def _is_url(source: str | Path) -> bool:
    return str(source).startswith(("http://", "https://"))


def _read_json(source: str | Path, timeout: int = 30):
    if _is_url(source):
        req = urllib.request.Request(
            str(source),
            headers={
                "User-Agent": "bikeflow/1.0",
                "Accept": "application/json",
            },
        )
        with urllib.request.urlopen(req, timeout=timeout) as resp:
            return json.loads(resp.read().decode("utf-8"))

    with open(source, encoding="utf-8") as f:
        return json.load(f)


def load_stations(source: str | Path) -> list[Station]:
    """
    Load bike-share stations from a GBFS station_information.json
    (local path or URL).

    Trip records reference stations by short_name, so that is used as the
    station id when present. A repeated id keeps the first station.
    """
    raw = _read_json(source)

    try:
        rows = raw["data"]["stations"]
    except (KeyError, TypeError):
        raise ValueError(f"{source}: expected a data.stations array")

    stations = []
    seen = set()
    for s in rows:
        sid = s.get("short_name") or s.get("station_id")
        if sid is None:
            raise ValueError(f"{source}: station without short_name/station_id")

        sid = str(sid)
        if sid in seen:
            print(
                f"{Fore.RED}Skipping duplicate station id {sid} "
                f"({s.get('name', '?')}){Style.RESET_ALL}"
            )
            continue
        seen.add(sid)

        stations.append(
            Station(
                station_id=sid,
                name=str(s.get("name", sid)),
                lat=float(s["lat"]),
                lon=float(s["lon"]),
            )
        )

    return stations
