# ABOUTME: Pure mapping from weatherapi.com condition text to a panel theme and icon.
# ABOUTME: No I/O; recomputed from the current snapshot on every render.

from src.models import WeatherTheme

ICON_URL_TEMPLATE = "https://cdn.weatherapi.com/weather/128x128/day/{code}.png"

# Checked in order; the first keyword found in the lowered condition text wins.
_THEME_RULES: tuple[tuple[tuple[str, ...], WeatherTheme], ...] = (
    (("rain",), WeatherTheme.RAIN),
    (("cloud",), WeatherTheme.CLOUDY),
    (("snow",), WeatherTheme.SNOW),
    (("thunder",), WeatherTheme.THUNDERSTORM),
    (("clear", "sunny"), WeatherTheme.CLEAR),
)

# Gradient start/end colors for the panel background.
BACKGROUNDS: dict[WeatherTheme, tuple[str, str]] = {
    WeatherTheme.CLEAR: ("#facc15", "#f97316"),
    WeatherTheme.RAIN: ("#2563eb", "#4338ca"),
    WeatherTheme.CLOUDY: ("#9ca3af", "#4b5563"),
    WeatherTheme.SNOW: ("#bfdbfe", "#60a5fa"),
    WeatherTheme.THUNDERSTORM: ("#6b21a8", "#581c87"),
    WeatherTheme.DEFAULT: ("#d1d5db", "#6b7280"),
}

# weatherapi.com day icon codes.
ICON_CODES: dict[WeatherTheme, int] = {
    WeatherTheme.CLEAR: 113,
    WeatherTheme.RAIN: 296,
    WeatherTheme.CLOUDY: 119,
    WeatherTheme.SNOW: 338,
    WeatherTheme.THUNDERSTORM: 389,
    WeatherTheme.DEFAULT: 116,
}


def classify(condition_text: str) -> WeatherTheme:
    """Pick a theme by case-insensitive substring match, in priority order."""
    lowered = condition_text.lower()
    for keywords, theme in _THEME_RULES:
        if any(k in lowered for k in keywords):
            return theme
    return WeatherTheme.DEFAULT


def icon_for(condition_text: str) -> str:
    """Icon URL for the condition, keyed off the same classification as the theme."""
    return ICON_URL_TEMPLATE.format(code=ICON_CODES[classify(condition_text)])
