# bikeflow/viz/join.py
from __future__ import annotations

from typing import Mapping, Sequence

from bikeflow.types import MarkerDatum, MarkerJoin


def join_markers(
    previous: Mapping[str, MarkerDatum],
    current: Sequence[MarkerDatum],
) -> MarkerJoin:
    """
    Keyed join on station_id.

      enter:  ids only in current
      update: ids in both (the renderer keeps the existing element)
      exit:   ids only in previous
    """
    join = MarkerJoin()
    seen = set()

    for d in current:
        seen.add(d.station_id)
        if d.station_id in previous:
            join.update.append(d)
        else:
            join.enter.append(d)

    join.exit = [sid for sid in previous if sid not in seen]
    return join
