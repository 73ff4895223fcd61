# ABOUTME: Service layer for weatherapi.com calls and response parsing.
# ABOUTME: Fetches current conditions through the allorigins relay and location suggestions directly.

import logging

import httpx
from pydantic import ValidationError

from src.models import ConditionsPayload, RelayEnvelope, SearchResult, WeatherSnapshot

CURRENT_URL = "https://api.weatherapi.com/v1/current.json"
SEARCH_URL = "https://api.weatherapi.com/v1/search.json"
RELAY_URL = "https://api.allorigins.win/get"

RAIN_MESSAGE = "🌧️ It's raining today. Consider working from home."
CLEAR_MESSAGE = "☀️ Weather is clear. You can go to the office."
FAILURE_MESSAGE = "❌ Failed to fetch weather."

MIN_SUGGESTION_QUERY_LENGTH = 2

logger = logging.getLogger(__name__)


class WeatherServiceError(Exception):
    """Base class for failures talking to the weather provider."""


class WeatherFetchError(WeatherServiceError):
    """Network, relay, or parse failure on the current-conditions call."""


class SuggestionFetchError(WeatherServiceError):
    """Network or parse failure on the location-search call."""


def recommendation_for(condition_text: str) -> str:
    """The stay-home / go-to-office message for a condition."""
    if "rain" in condition_text.lower():
        return RAIN_MESSAGE
    return CLEAR_MESSAGE


def build_current_url(api_key: str, location_query: str, current_url: str = CURRENT_URL) -> str:
    """Full current-conditions URL, as handed to the relay."""
    return str(httpx.URL(current_url, params={"key": api_key, "q": location_query}))


async def fetch_weather(
    client: httpx.AsyncClient,
    api_key: str,
    location_query: str,
    current_url: str = CURRENT_URL,
    relay_url: str = RELAY_URL,
) -> WeatherSnapshot:
    """Fetch current conditions for a location through the CORS relay.

    Raises WeatherFetchError for any network, relay, or parse failure.
    """
    if not location_query.strip():
        raise ValueError("location_query must not be blank")

    target = build_current_url(api_key, location_query, current_url)
    try:
        resp = await client.get(relay_url, params={"url": target})
        resp.raise_for_status()
        envelope = RelayEnvelope.model_validate(resp.json())
        payload = ConditionsPayload.model_validate_json(envelope.contents)
    except (httpx.HTTPError, ValueError) as e:
        raise WeatherFetchError(f"Weather fetch failed for '{location_query}': {e}") from e

    return parse_conditions(payload)


def parse_conditions(payload: ConditionsPayload) -> WeatherSnapshot:
    """Turn a provider payload into a snapshot."""
    label = f"{payload.location.name}, {payload.location.region or ''}".strip()
    return WeatherSnapshot(
        condition_text=payload.current.condition.text,
        temperature_celsius=payload.current.temp_c,
        resolved_location_label=label,
        local_time=payload.location.localtime,
    )


async def fetch_suggestions(
    client: httpx.AsyncClient,
    api_key: str,
    partial_query: str,
    country: str,
    search_url: str = SEARCH_URL,
) -> list[str]:
    """Look up place labels matching a partial query, limited to one country.

    Queries shorter than two characters (after trimming) return [] without a request.
    Raises SuggestionFetchError for any network or parse failure.
    """
    if len(partial_query.strip()) < MIN_SUGGESTION_QUERY_LENGTH:
        return []

    try:
        resp = await client.get(search_url, params={"key": api_key, "q": partial_query})
        resp.raise_for_status()
        records = resp.json()
        if not isinstance(records, list):
            raise ValueError(f"expected a list of locations, got {type(records).__name__}")
    except (httpx.HTTPError, ValueError) as e:
        raise SuggestionFetchError(f"Suggestion fetch failed for '{partial_query}': {e}") from e

    labels = []
    for record in records:
        try:
            result = SearchResult.model_validate(record)
        except ValidationError:
            logger.debug("Skipping malformed search record %r", record)
            continue
        if result.country == country:
            labels.append(f"{result.name}, {result.region or ''}".strip())
    return labels
