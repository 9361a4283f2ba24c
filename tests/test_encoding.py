"""
Tests for radius scale, flow buckets and marker encoding
"""

import pytest

from bikeflow.types import UNFILTERED, StationTraffic
from bikeflow.viz.encoding import (
    RADIUS_RANGE_ALL,
    RADIUS_RANGE_FILTERED,
    SqrtScale,
    departure_ratio,
    encode_markers,
    flow_color,
    quantize_flow,
    radius_range,
    station_flow,
    tooltip_text,
)


def traffic(sid, departures, arrivals):
    return StationTraffic(
        station_id=sid,
        arrivals=arrivals,
        departures=departures,
        total_traffic=arrivals + departures,
    )


class TestRadius:
    def test_range_depends_on_filter(self):
        assert radius_range(UNFILTERED) == RADIUS_RANGE_ALL == (0.0, 25.0)
        assert radius_range(480) == RADIUS_RANGE_FILTERED == (3.0, 50.0)

    def test_sqrt_scale_endpoints(self):
        scale = SqrtScale(100, (0, 25))
        assert scale(0) == 0
        assert scale(100) == 25
        assert scale(25) == pytest.approx(12.5)

    def test_zero_domain_maps_to_range_minimum(self):
        assert SqrtScale(0, (3, 50))(0) == 3

    def test_domain_follows_displayed_set(self):
        small = [traffic("A", 2, 2), traffic("B", 0, 1)]
        big = small + [traffic("C", 200, 200)]

        r_small = {d.station_id: d.radius for d in encode_markers(small, 480)}
        r_big = {d.station_id: d.radius for d in encode_markers(big, 480)}

        assert r_small["A"] == 50
        assert r_big["A"] < r_small["A"]


class TestFlow:
    def test_zero_traffic_is_balanced(self):
        t = traffic("A", 0, 0)
        assert departure_ratio(t) == 0.5
        assert station_flow(t) == 0.5

    @pytest.mark.parametrize(
        "ratio, bucket",
        [
            (0.0, 0.0),
            (0.33, 0.0),
            (1 / 3, 0.5),
            (0.5, 0.5),
            (0.66, 0.5),
            (2 / 3, 1.0),
            (1.0, 1.0),
        ],
    )
    def test_even_thirds(self, ratio, bucket):
        assert quantize_flow(ratio) == bucket

    def test_departure_heavy_and_arrival_heavy(self):
        assert station_flow(traffic("A", 9, 1)) == 1.0
        assert station_flow(traffic("B", 1, 9)) == 0.0

    def test_colors(self):
        assert flow_color(1.0) == "#4682b4"
        assert flow_color(0.0) == "#ff8c00"
        assert flow_color(0.5) not in {"#4682b4", "#ff8c00"}


def test_tooltip_text():
    assert tooltip_text(traffic("A", 3, 2)) == "5 trips (3 departures, 2 arrivals)"


def test_encode_markers_keeps_order_and_ids():
    out = encode_markers([traffic("B", 1, 0), traffic("A", 0, 0)], UNFILTERED)

    assert [d.station_id for d in out] == ["B", "A"]
    assert out[0].radius == 25
    assert out[1].radius == 0
    assert out[1].flow == 0.5
