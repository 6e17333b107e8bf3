"""Weather widget: FastAPI app serving the single-screen page and lookup API."""

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from weatherapp.config.loader import require_api_key
from weatherapp.config.schema import AppConfig
from weatherapp.controller import QueryController
from weatherapp.reporting.formatters import state_to_dict

logger = logging.getLogger(__name__)

WIDGET_HTML = Path(__file__).parent / "static" / "index.html"


class QueryRequest(BaseModel):
    city: str = ""


def create_app(
    config: AppConfig | None = None, controller: QueryController | None = None
) -> FastAPI:
    """Build the widget app around one controller (one screen, one state)."""
    config = config or AppConfig()
    if controller is None:
        controller = QueryController.from_config(config, require_api_key(config))

    app = FastAPI(title="Weather App", version="0.1.0")
    app.state.controller = controller
    app.state.config = config

    def _view(request: Request) -> dict:
        ctrl: QueryController = request.app.state.controller
        return state_to_dict(
            ctrl.state,
            theme=ctrl.theme(),
            icon_base_url=request.app.state.config.display.icon_base_url,
        )

    @app.get("/api/state")
    def get_state(request: Request):
        """Current view state: status, error, weather, forecast, theme."""
        return _view(request)

    @app.post("/api/query")
    async def submit_query(body: QueryRequest, request: Request):
        """Run a lookup for the given city and return the resulting view state."""
        await request.app.state.controller.submit_query(body.city)
        return _view(request)

    @app.post("/api/reset")
    def reset(request: Request):
        request.app.state.controller.reset()
        return _view(request)

    @app.get("/")
    def serve_widget():
        if WIDGET_HTML.exists():
            return FileResponse(WIDGET_HTML, media_type="text/html")
        return HTMLResponse("<h1>Widget not found</h1>", status_code=404)

    return app


def serve(config: AppConfig, host: str | None = None, port: int | None = None) -> None:
    import uvicorn

    app = create_app(config)
    host = host or config.web.host
    port = port or config.web.port
    logger.info("Serving weather widget on http://%s:%d", host, port)
    uvicorn.run(app, host=host, port=port)
