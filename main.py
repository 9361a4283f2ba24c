# main.py

from bikeflow.data.dataset import load_dataset
from bikeflow.traffic.aggregate import compute_station_traffic
from bikeflow.traffic.time_filter import filter_trips_by_time, format_time
from bikeflow.types import UNFILTERED
from bikeflow.viz.app.single import serve_single


def main():
    dataset = load_dataset()

    # ---- busiest stations, all day vs. morning peak ----
    for t in (UNFILTERED, 8 * 60):
        trips = filter_trips_by_time(dataset.trips, t)
        traffic = compute_station_traffic(dataset.stations, trips)
        top = sorted(traffic, key=lambda s: s.total_traffic, reverse=True)[:5]

        label = "any time" if t == UNFILTERED else format_time(t)
        print(f"\nBusiest stations ({label}, {len(trips)} trips):\n")
        for i, s in enumerate(top, 1):
            print(
                f"{i:02d}. {s.station_id:>8} | "
                f"{s.total_traffic:5d} trips "
                f"({s.departures} out, {s.arrivals} in)"
            )

    # ---- UI ----
    serve_single(dataset=dataset, port=8080)


if __name__ == "__main__":
    main()
