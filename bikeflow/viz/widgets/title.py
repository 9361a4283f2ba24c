# bikeflow/viz/widgets/title.py
import json

import folium

MAP_HEIGHT = "85vh"

# overlays moved on top of the map once the page is ready
OVERLAY_IDS = ("time-filter", "map-legend")


def js_string(value) -> str:
    """JSON literal that is also safe inside a <script> block."""
    return json.dumps(value).replace("</", "<\\/")


def build_title_widget(title: str | None = None):
    """
    Wraps the Leaflet container so the floating widgets can be positioned
    over it, and adds a centered title pill when a title is given.
    """
    return folium.Element(
        f"""
<style>
#map-wrap {{ position: relative; width: 100%; }}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: {MAP_HEIGHT} !important;
  min-height: 480px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  padding: 4px 14px;
  border-radius: 999px;
  background: rgba(255,255,255,0.95);
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
  font: 600 14px sans-serif;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const title = {js_string(title)};
  const overlayIds = {json.dumps(list(OVERLAY_IDS))};

  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  const wrap = document.getElementById("map-wrap") || document.createElement("div");
  if (!wrap.id) {{
    wrap.id = "map-wrap";
    mapEl.before(wrap);
    wrap.append(mapEl);
  }}

  document.getElementById("map-title")?.remove();
  if (title) {{
    const pill = document.createElement("div");
    pill.id = "map-title";
    pill.textContent = title;
    wrap.append(pill);
  }}

  for (const id of overlayIds) {{
    const el = document.getElementById(id);
    if (el) wrap.append(el);
  }}
}});
</script>
"""
    )
