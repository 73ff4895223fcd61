# ABOUTME: Dependency container for the panel controller using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and Settings used by the weather service calls.

import httpx
from pydantic import BaseModel, ConfigDict

from src.config import Settings


class WeatherDeps(BaseModel):
    """Dependencies injected into the panel controller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    settings: Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client with the configured timeout.

    No retry transport: a failed fetch is reported once and the periodic refresh
    is the only second attempt.
    """
    return httpx.AsyncClient(timeout=settings.http_timeout, follow_redirects=True)
