# bikeflow/viz/app/single.py
from __future__ import annotations

from flask import Flask, abort, jsonify, request

from bikeflow.data.dataset import Dataset
from bikeflow.traffic.time_filter import format_time, is_unfiltered, parse_time_filter
from bikeflow.viz.controller import TrafficMapController
from bikeflow.viz.maps.render import BOSTON_BIKE_LANES_URL, render_map_document
from bikeflow.viz.overlays.stations import StationMarkerLayer, marker_payload


def create_app(
    dataset: Dataset,
    *,
    title: str | None = "Bluebikes Traffic",
    bike_lanes_url: str | None = BOSTON_BIKE_LANES_URL,
) -> Flask:
    """
    One controller per app; requests are served one at a time so each
    ?t= change runs to completion before the next.
    """
    layer = StationMarkerLayer(dataset.stations)
    controller = TrafficMapController(dataset.stations, dataset.trips, layer)

    app = Flask(__name__)
    app.config["CONTROLLER"] = controller

    def _time_filter():
        try:
            return parse_time_filter(request.args.get("t"))
        except ValueError as e:
            abort(400, description=str(e))

    @app.route("/")
    def _index():
        controller.set_time_filter(_time_filter())
        return render_map_document(
            controller,
            title=title,
            bike_lanes_url=bike_lanes_url,
        )

    @app.route("/api/markers")
    def _markers():
        join = controller.set_time_filter(_time_filter())
        t = controller.time_filter

        return jsonify(
            {
                "time_filter": t,
                "label": "any time" if is_unfiltered(t) else format_time(t),
                "enter": [d.station_id for d in join.enter],
                "update": [d.station_id for d in join.update],
                "exit": list(join.exit),
                "markers": [marker_payload(d) for d in controller.markers],
            }
        )

    return app


def serve_single(
    *,
    dataset: Dataset,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bluebikes Traffic",
    bike_lanes_url: str | None = BOSTON_BIKE_LANES_URL,
):
    if dataset is None:
        raise ValueError("serve_single requires a loaded Dataset")

    app = create_app(dataset, title=title, bike_lanes_url=bike_lanes_url)
    app.run(host=host, port=int(port), debug=bool(debug), threaded=False)
