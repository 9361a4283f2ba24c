# bikeflow/viz/maps/render.py
import folium

from bikeflow.viz.controller import TrafficMapController, leaflet_projection
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider
from bikeflow.viz.widgets.title import build_title_widget

CENTER_LAT = 42.36027
CENTER_LON = -71.09415
ZOOM_START = 12
MIN_ZOOM = 5
MAX_ZOOM = 18

BOSTON_BIKE_LANES_URL = (
    "https://bostonopendata-boston.opendata.arcgis.com/datasets/"
    "boston::existing-bike-network-2022.geojson"
)

BIKE_LANE_STYLE = {
    "color": "#32D400",
    "weight": 5,
    "opacity": 0.6,
}


def add_bike_lanes(m, url: str):
    folium.GeoJson(
        url,
        name="bike-lanes",
        embed=False,
        style_function=lambda _feature: BIKE_LANE_STYLE,
    ).add_to(m)


def render_map_document(
    controller: TrafficMapController,
    *,
    title: str | None = None,
    bike_lanes_url: str | None = BOSTON_BIKE_LANES_URL,
):
    """
    Single place that assembles the full Folium map HTML document
    for the controller's current time filter.
    """
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=ZOOM_START,
        min_zoom=MIN_ZOOM,
        max_zoom=MAX_ZOOM,
        tiles="cartodbpositron",
    )

    # bike lanes (overlay)
    if bike_lanes_url:
        add_bike_lanes(m, bike_lanes_url)

    # stations
    controller.refresh_positions(leaflet_projection)
    controller.layer.add_to(m)

    # widgets
    m.get_root().html.add_child(build_time_slider(controller.time_filter))
    m.get_root().html.add_child(build_legend_widget())
    m.get_root().html.add_child(build_title_widget(title))

    return m.get_root().render()
