# ABOUTME: Pydantic BaseModels for weatherapi.com payloads and the panel's state.
# ABOUTME: Defines the relay envelope, provider records, WeatherSnapshot, and PanelState.

from enum import Enum

from pydantic import BaseModel


class WeatherTheme(str, Enum):
    """Background theme derived from the condition text."""

    CLEAR = "clear"
    RAIN = "rain"
    CLOUDY = "cloudy"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    DEFAULT = "default"


class RelayEnvelope(BaseModel):
    """Response wrapper returned by the allorigins relay."""

    contents: str


class Condition(BaseModel):
    text: str


class CurrentConditions(BaseModel):
    condition: Condition
    temp_c: float


class ProviderLocation(BaseModel):
    name: str
    region: str | None = None
    localtime: str


class ConditionsPayload(BaseModel):
    """Inner current.json payload, after unwrapping the relay envelope."""

    current: CurrentConditions
    location: ProviderLocation


class SearchResult(BaseModel):
    """One candidate record from the search.json endpoint."""

    name: str
    region: str | None = None
    country: str | None = None


class WeatherSnapshot(BaseModel):
    """Current weather for one location, replaced as a whole on every fetch."""

    condition_text: str
    temperature_celsius: float | None
    resolved_location_label: str
    local_time: str

    @classmethod
    def empty(cls) -> "WeatherSnapshot":
        """The cleared snapshot shown after a failed fetch."""
        return cls(condition_text="", temperature_celsius=None, resolved_location_label="", local_time="")


class PanelState(BaseModel):
    """Everything the panel renders, as one serializable view."""

    message: str
    snapshot: WeatherSnapshot
    loading: bool
    location: str
    search: str = ""
    suggestions: list[str] = []
    theme: WeatherTheme
    background: tuple[str, str]
    icon_url: str
