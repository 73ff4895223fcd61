# ABOUTME: Tests for server-side rendering of the notifier panel.
# ABOUTME: Checks placeholder text, loading indicator, theming, and HTML escaping.

from src.models import PanelState, WeatherSnapshot, WeatherTheme
from src.panel import format_temperature, render_panel
from src.theme import BACKGROUNDS


def _state(snapshot: WeatherSnapshot, message: str = "msg", loading: bool = False) -> PanelState:
    return PanelState(
        message=message,
        snapshot=snapshot,
        loading=loading,
        location=snapshot.resolved_location_label,
        theme=WeatherTheme.DEFAULT,
        background=BACKGROUNDS[WeatherTheme.DEFAULT],
        icon_url="https://cdn.weatherapi.com/weather/128x128/day/116.png",
    )


class TestRenderPanel:
    def test_empty_snapshot_placeholders(self):
        """A cleared snapshot renders placeholder text.

        Implementation: Renders the empty snapshot.
        Passing implies: Unknown temperature shows '--', missing condition and location show defaults.
        """
        html = render_panel(_state(WeatherSnapshot.empty(), message="❌ Failed to fetch weather."))

        assert "--°C" in html
        assert "No data" in html
        assert "Unknown location" in html
        assert "❌ Failed to fetch weather." in html

    def test_loading_hides_card(self):
        html = render_panel(_state(WeatherSnapshot.empty(), loading=True))
        assert "aria-busy" in html
        assert "Unknown location" not in html

    def test_background_colors_and_reload(self):
        html = render_panel(_state(WeatherSnapshot.empty()), reload_interval=60)
        assert "linear-gradient(to bottom right, #d1d5db, #6b7280)" in html
        assert "60000" in html

    def test_escapes_provider_text(self):
        snap = WeatherSnapshot(
            condition_text="<b>Rain</b>",
            temperature_celsius=21.5,
            resolved_location_label="A & B",
            local_time="2024-01-01 10:00",
        )
        html = render_panel(_state(snap))
        assert "&lt;b&gt;Rain&lt;/b&gt;" in html
        assert "A &amp; B" in html
        assert "21.5°C" in html


def test_format_temperature():
    assert format_temperature(None) == "--"
    assert format_temperature(24.0) == "24"
    assert format_temperature(-3.5) == "-3.5"
