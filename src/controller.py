# ABOUTME: Panel controller holding the notifier's in-memory UI state.
# ABOUTME: Location changes drive the weather fetch and timer rearm; stale responses are dropped.

import logging

from src.deps import WeatherDeps
from src.models import PanelState, WeatherSnapshot
from src.theme import BACKGROUNDS, classify, icon_for
from src.timer import RefreshTimer
from src.weather_service import (
    FAILURE_MESSAGE,
    SuggestionFetchError,
    WeatherFetchError,
    fetch_suggestions,
    fetch_weather,
    recommendation_for,
)

logger = logging.getLogger(__name__)

CHECKING_MESSAGE = "Checking weather..."


class PanelController:
    """Owns the active location, the latest snapshot, and the refresh timer.

    Each fetch type carries a generation counter. A response is applied only if no
    newer request of the same type was started while it was in flight, so a slow
    response can never overwrite a faster, later one.
    """

    def __init__(self, deps: WeatherDeps):
        self.deps = deps
        self.location = deps.settings.default_location
        self.snapshot = WeatherSnapshot.empty()
        self.message = CHECKING_MESSAGE
        self.search = ""
        self.suggestions: list[str] = []
        self.timer = RefreshTimer(deps.settings.refresh_interval, self.refresh)
        self._pending_weather = 0
        self._weather_generation = 0
        self._suggestion_generation = 0

    @property
    def loading(self) -> bool:
        return self._pending_weather > 0

    @property
    def state(self) -> PanelState:
        theme = classify(self.snapshot.condition_text)
        return PanelState(
            message=self.message,
            snapshot=self.snapshot,
            loading=self.loading,
            location=self.location,
            search=self.search,
            suggestions=list(self.suggestions),
            theme=theme,
            background=BACKGROUNDS[theme],
            icon_url=icon_for(self.snapshot.condition_text),
        )

    async def start(self) -> None:
        """Initial load: fetch for the current location and arm the timer."""
        await self.set_location(self.location)

    def stop(self) -> None:
        self.timer.cancel()

    async def aclose(self) -> None:
        """Teardown: cancel the refresh timer and wait for it to stop."""
        await self.timer.aclose()

    async def set_location(self, label: str) -> None:
        """Make `label` the active location, rearm the timer, and fetch its weather."""
        if not label.strip():
            return
        self.location = label
        self.timer.arm()
        await self.refresh()

    async def refresh(self) -> None:
        """Fetch weather for the active location and apply it unless superseded."""
        self._weather_generation += 1
        generation = self._weather_generation
        settings = self.deps.settings

        self._pending_weather += 1
        try:
            snapshot = await fetch_weather(
                self.deps.http_client,
                settings.api_key,
                self.location,
                current_url=settings.current_url,
                relay_url=settings.relay_url,
            )
        except WeatherFetchError:
            logger.exception("Weather fetch failed for %r", self.location)
            snapshot = None
        finally:
            self._pending_weather -= 1

        if generation != self._weather_generation:
            logger.debug("Dropping stale weather response (generation %d)", generation)
            return

        if snapshot is None:
            # The active location stays put so the next periodic refresh can recover.
            self.snapshot = WeatherSnapshot.empty()
            self.message = FAILURE_MESSAGE
            return

        self.snapshot = snapshot
        self.location = snapshot.resolved_location_label
        self.message = recommendation_for(snapshot.condition_text)

    async def update_search(self, text: str) -> None:
        """Store the search box text and replace the suggestion list for it."""
        self.search = text
        self._suggestion_generation += 1
        generation = self._suggestion_generation
        settings = self.deps.settings

        try:
            suggestions = await fetch_suggestions(
                self.deps.http_client,
                settings.api_key,
                text,
                settings.target_country,
                search_url=settings.search_url,
            )
        except SuggestionFetchError:
            logger.warning("Suggestion fetch failed for %r", text, exc_info=True)
            suggestions = []

        if generation != self._suggestion_generation:
            logger.debug("Dropping stale suggestions (generation %d)", generation)
            return
        self.suggestions = suggestions

    async def submit_search(self, text: str | None = None) -> bool:
        """Use the search text as the new location. Returns False if it was blank."""
        query = (self.search if text is None else text).strip()
        if not query:
            return False
        self._clear_search()
        await self.set_location(query)
        return True

    async def select_suggestion(self, label: str) -> None:
        self._clear_search()
        await self.set_location(label)

    def _clear_search(self) -> None:
        self.search = ""
        self.suggestions = []
        # Invalidate any suggestion request still in flight.
        self._suggestion_generation += 1
