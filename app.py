import os

from bikeflow.data.dataset import (
    BLUEBIKES_STATIONS_URL,
    BLUEBIKES_TRIPS_URL,
    load_dataset,
)
from bikeflow.viz.app.single import serve_single
from bikeflow.viz.maps.render import BOSTON_BIKE_LANES_URL

STATIONS = os.environ.get("STATIONS_URL", BLUEBIKES_STATIONS_URL)
TRIPS = os.environ.get("TRIPS_URL", BLUEBIKES_TRIPS_URL)
BIKE_LANES = os.environ.get("BIKE_LANES_URL", BOSTON_BIKE_LANES_URL)


def main():
  # a load failure raises DatasetLoadError and nothing is served
  dataset = load_dataset(STATIONS, TRIPS)

  port = int(os.environ.get("PORT", "8080"))

  serve_single(
      dataset=dataset,
      host=os.environ.get("HOST", "0.0.0.0"),
      port=port,
      title="Bluebikes Traffic",
      bike_lanes_url=BIKE_LANES or None,
  )


if __name__ == "__main__":
  main()
