# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.viz.encoding import FLOW_BUCKETS, flow_color

LEGEND_LABELS = {
    1.0: "More departures",
    0.5: "Balanced",
    0.0: "More arrivals",
}


def build_legend_widget():
    """
    Returns a Folium Element that injects a floating flow legend.
    """
    items = "".join(
        f'<div><span style="color:{flow_color(b)}">●</span> {LEGEND_LABELS[b]}</div>'
        for b in reversed(FLOW_BUCKETS)
    )

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 24px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    wrap.style.position = "relative";
    wrap.style.width = "100%";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  const existing = document.getElementById("map-legend");
  if (existing) existing.remove();

  const legend = document.createElement("div");
  legend.id = "map-legend";
  legend.innerHTML = `<div><strong>Legend</strong></div>{items}`;
  wrap.appendChild(legend);
}});
</script>
"""
    )
