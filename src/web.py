# ABOUTME: ASGI web entry point for the weather notifier panel.
# ABOUTME: Starlette app whose lifespan owns the panel controller; run with `uvicorn src.web:app`.

import logging
from contextlib import asynccontextmanager

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.routing import Route

from src.config import load_settings
from src.controller import PanelController
from src.deps import WeatherDeps, create_http_client
from src.panel import render_panel

logger = logging.getLogger(__name__)


async def read_field(request: Request, name: str) -> str | None:
    """Read one string field from a JSON or form-encoded request body."""
    if request.headers.get("content-type", "").startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            # Covers malformed JSON and bodies that are not valid UTF-8.
            return None
        value = data.get(name) if isinstance(data, dict) else None
    else:
        form = await request.form()
        value = form.get(name)
    return value if isinstance(value, str) else None


def _wants_json(request: Request) -> bool:
    return request.headers.get("content-type", "").startswith("application/json")


def _state_response(controller: PanelController) -> JSONResponse:
    return JSONResponse(controller.state.model_dump(mode="json"))


async def index(request: Request) -> Response:
    controller: PanelController = request.app.state.controller
    reload_interval = controller.deps.settings.refresh_interval
    return HTMLResponse(render_panel(controller.state, reload_interval=reload_interval))


async def get_state(request: Request) -> Response:
    return _state_response(request.app.state.controller)


async def post_suggestions(request: Request) -> Response:
    """Update the shared search text and return the suggestions for it."""
    controller: PanelController = request.app.state.controller
    text = await read_field(request, "q")
    if text is None:
        return JSONResponse({"error": "missing field 'q'"}, status_code=400)
    await controller.update_search(text)
    return JSONResponse({"suggestions": controller.suggestions})


async def post_search(request: Request) -> Response:
    """Submit the search box. Blank text leaves the location unchanged."""
    controller: PanelController = request.app.state.controller
    text = await read_field(request, "q")
    if text is None:
        return JSONResponse({"error": "missing field 'q'"}, status_code=400)
    await controller.submit_search(text)
    if _wants_json(request):
        return _state_response(controller)
    return RedirectResponse("/", status_code=303)


async def post_location(request: Request) -> Response:
    """Select a suggestion as the new active location."""
    controller: PanelController = request.app.state.controller
    label = await read_field(request, "location")
    if label is None or not label.strip():
        return JSONResponse({"error": "missing field 'location'"}, status_code=400)
    await controller.select_suggestion(label)
    return _state_response(controller)


def create_app(deps: WeatherDeps | None = None) -> Starlette:
    """Build the app. Without explicit deps, settings and the HTTP client are created at startup."""

    @asynccontextmanager
    async def lifespan(app: Starlette):
        owns_client = deps is None
        app_deps = deps
        if app_deps is None:
            settings = load_settings()
            app_deps = WeatherDeps(http_client=create_http_client(settings), settings=settings)

        controller = PanelController(app_deps)
        app.state.controller = controller
        logger.info("Starting weather panel for %r", controller.location)
        await controller.start()
        try:
            yield
        finally:
            await controller.aclose()
            if owns_client:
                await app_deps.http_client.aclose()

    routes = [
        Route("/", index),
        Route("/api/state", get_state),
        Route("/api/suggestions", post_suggestions, methods=["POST"]),
        Route("/api/search", post_search, methods=["POST"]),
        Route("/api/location", post_location, methods=["POST"]),
    ]
    return Starlette(routes=routes, lifespan=lifespan)


app = create_app()
