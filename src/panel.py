# ABOUTME: Server-side HTML rendering of the notifier panel.
# ABOUTME: Shows message, temperature, condition, location, local time, icon, and the search box.

from html import escape

from src.models import PanelState

TITLE = "WFH Weather Notifier"

_PAGE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{title}</title>
<style>
body {{ margin: 0; min-height: 100vh; display: flex; flex-direction: column; align-items: center;
       justify-content: center; color: #fff; font-family: 'Poppins', sans-serif;
       background: linear-gradient(to bottom right, {bg_from}, {bg_to}); }}
form {{ position: relative; width: 100%; max-width: 28rem; margin-bottom: 2rem; }}
input {{ width: 100%; box-sizing: border-box; border-radius: 9999px; border: none; padding: .75rem 1.25rem;
        font-size: 1.1rem; }}
ul {{ position: absolute; width: 100%; margin: .5rem 0 0; padding: 0; list-style: none; background: #fff;
     color: #000; border-radius: .5rem; max-height: 15rem; overflow-y: auto; }}
li {{ padding: .5rem 1rem; cursor: pointer; }}
li:hover {{ background: #fef9c3; }}
.card {{ background: rgba(0, 0, 0, .4); border-radius: 1.5rem; padding: 1.5rem; max-width: 32rem; width: 100%;
        text-align: center; }}
.temp {{ font-size: 4rem; font-weight: 800; margin: 0; }}
.meta {{ opacity: .7; margin-top: 2rem; }}
</style>
</head>
<body data-theme="{theme}">
<form method="post" action="/api/search" autocomplete="off">
  <input type="text" name="q" placeholder="Search location (e.g. Chikkamagaluru)" aria-label="Search location">
  <ul id="suggestions" hidden></ul>
</form>
<div class="card">
{card}
</div>
<script>
const box = document.querySelector("input[name=q]");
const list = document.getElementById("suggestions");
box.addEventListener("input", async () => {{
  const res = await fetch("/api/suggestions", {{
    method: "POST",
    headers: {{"content-type": "application/json"}},
    body: JSON.stringify({{q: box.value}}),
  }});
  const data = await res.json();
  list.replaceChildren(...data.suggestions.map((label) => {{
    const li = document.createElement("li");
    li.textContent = label;
    li.addEventListener("click", async () => {{
      await fetch("/api/location", {{
        method: "POST",
        headers: {{"content-type": "application/json"}},
        body: JSON.stringify({{location: label}}),
      }});
      window.location.reload();
    }});
    return li;
  }}));
  list.hidden = data.suggestions.length === 0;
}});
setInterval(() => {{ if (!box.value) window.location.reload(); }}, {reload_ms});
</script>
</body>
</html>
"""

_LOADING = '<p class="loading" aria-busy="true">Loading…</p>'

_CARD = """<h1>{title}</h1>
<p class="message">{message}</p>
<img src="{icon_url}" alt="{condition}" width="128" height="128">
<p class="temp">{temperature}°C</p>
<p class="condition">{condition_label}</p>
<div class="meta">
  <p class="location">{location}</p>
  <p class="localtime">{local_time}</p>
</div>"""


def format_temperature(value: float | None) -> str:
    if value is None:
        return "--"
    return f"{value:g}"


def render_card(state: PanelState) -> str:
    if state.loading:
        return _LOADING
    snap = state.snapshot
    return _CARD.format(
        title=TITLE,
        message=escape(state.message),
        icon_url=escape(state.icon_url),
        condition=escape(snap.condition_text),
        temperature=format_temperature(snap.temperature_celsius),
        condition_label=escape(snap.condition_text or "No data"),
        location=escape(snap.resolved_location_label or "Unknown location"),
        local_time=escape(snap.local_time),
    )


def render_panel(state: PanelState, reload_interval: float = 60.0) -> str:
    """Render the full page for the given state."""
    bg_from, bg_to = state.background
    return _PAGE.format(
        title=TITLE,
        bg_from=bg_from,
        bg_to=bg_to,
        theme=state.theme.value,
        card=render_card(state),
        reload_ms=int(reload_interval * 1000),
    )
