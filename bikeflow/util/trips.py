# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path

import pandas as pd

TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


def trips_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Normalize a raw trips table:
      - start_station_id / end_station_id as str
      - started_at / ended_at as datetime64

    Timestamps may mix formats (fractional seconds, US-style dates). Any
    row that still does not parse is an error, never a dropped trip.
    """
    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips table missing columns: {', '.join(missing)}")

    out = pd.DataFrame()
    out["start_station_id"] = df["start_station_id"].astype(str).str.strip()
    out["end_station_id"] = df["end_station_id"].astype(str).str.strip()
    for col in ("started_at", "ended_at"):
        parsed = pd.to_datetime(df[col], format="mixed", errors="coerce")
        bad = parsed.isna()
        if bad.any():
            first = df[col][bad].iloc[0]
            raise ValueError(
                f"Trips table has {int(bad.sum())} unparseable {col} values "
                f"(first: {first!r})"
            )
        out[col] = parsed

    return out.reset_index(drop=True)


def load_trips(source: str | Path) -> pd.DataFrame:
    """
    Load a Bluebikes traffic CSV (local path or URL) with columns like:

      ride_id, bike_type, started_at, ended_at,
      start_station_id, end_station_id, is_member
    """
    df = pd.read_csv(
        source,
        dtype=str,
    )
    df.columns = [c.strip() for c in df.columns]
    return trips_frame(df)
