# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.time_filter import format_time, is_unfiltered

SLIDER_MIN = -1
SLIDER_MAX = 1439


def build_time_slider(t_current: int, *, key: str = "t"):
    """
    Floating "Filter by time" slider.
      - -1 is "(any time)"
      - releasing the slider reloads the page with ?t=<minute>
    """
    label = "" if is_unfiltered(t_current) else format_time(t_current)
    any_time_display = "block" if is_unfiltered(t_current) else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 13px;
  z-index: 1300;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}
#time-filter input {{
  width: 240px;
}}
#selected-time {{
  display: block;
  font-weight: 600;
}}
#any-time {{
  color: #666;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range"
           min="{SLIDER_MIN}" max="{SLIDER_MAX}" value="{t_current}">
  </label>
  <time id="selected-time">{label}</time>
  <em id="any-time" style="display:{any_time_display}">(any time)</em>
</div>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;

  slider.addEventListener("change", () => {{
    const url = new URL(window.location.href);
    url.searchParams.set("{key}", slider.value);
    window.location.href = url.toString();
  }});
}});
</script>
"""
    )
