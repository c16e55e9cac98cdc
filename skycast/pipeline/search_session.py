"""Search session: owns the latest suggestions and supersedes stale searches."""

import asyncio
import logging

import httpx

from skycast.config.schema import SearchConfig
from skycast.ingest.decoders import decode_suggestions
from skycast.ingest.openweather_client import OpenWeatherClient
from skycast.models.lookup import LookupResult
from skycast.models.weather import CitySuggestion
from skycast.pipeline.lookup_pipeline import resolve_weather

logger = logging.getLogger(__name__)


class SearchSession:
    """Runs one lookup at a time for an interactive front end.

    Each search bumps a generation counter and cancels the previous search
    if it is still running. A search whose generation is no longer current
    when it completes returns None, so its result is never applied.
    """

    def __init__(self, client: OpenWeatherClient, config: SearchConfig | None = None):
        self.client = client
        self.config = config or SearchConfig()
        self.generation = 0
        self.suggestion_generation = 0
        self._last_suggestions: list[CitySuggestion] = []
        self._current: asyncio.Task | None = None

    @property
    def last_suggestions(self) -> list[CitySuggestion]:
        return list(self._last_suggestions)

    async def refresh_suggestions(self, query: str) -> list[CitySuggestion]:
        """Look up city suggestions for a partial query.

        Keeps the previous list if the geocoder fails. A response that lands
        after a newer refresh has started is dropped.
        """
        query = query.strip()
        self.suggestion_generation += 1
        generation = self.suggestion_generation
        if len(query) < self.config.min_suggestion_chars:
            self._last_suggestions = []
            return []

        try:
            raw = await self.client.get_city_suggestions(
                query, limit=self.config.suggestion_limit
            )
        except httpx.RequestError as e:
            logger.error("Failed to fetch city suggestions for %r: %s", query, e)
            return self.last_suggestions

        if generation != self.suggestion_generation:
            logger.debug("Dropping stale suggestions for %r", query)
            return self.last_suggestions
        if raw is None:
            return self.last_suggestions
        self._last_suggestions = decode_suggestions(raw)
        return self.last_suggestions

    async def search(self, query: str) -> LookupResult | None:
        """Resolve weather for a query. Returns None if a newer search superseded it."""
        query = query.strip()
        if not query:
            raise ValueError("city query must not be blank")

        self.generation += 1
        generation = self.generation
        if self._current is not None and not self._current.done():
            logger.debug("Cancelling superseded search")
            self._current.cancel()

        task = asyncio.create_task(
            resolve_weather(self.client, query, self.last_suggestions)
        )
        self._current = task
        try:
            result = await task
        except asyncio.CancelledError:
            if generation != self.generation:
                return None
            raise

        if generation != self.generation:
            logger.debug("Discarding result for superseded search %r", query)
            return None
        return result
