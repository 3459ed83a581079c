import logging
from typing import Callable, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import get_settings
from .models import GET
from .routes import RouteNotFound, RouteTable, get_variant, route_table

logger = logging.getLogger(__name__)


def _endpoint(table: RouteTable, path: str) -> Callable[[], str]:
    def endpoint() -> str:
        return table.handle(GET, path)

    endpoint.__name__ = "get_" + (path.strip("/").replace("/", "_") or "root")
    return endpoint


async def _not_found(request: Request, exc: Exception) -> PlainTextResponse:
    return PlainTextResponse("Not Found", status_code=404)


async def _http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    # Only GET is served, so a known path with another method is simply absent.
    if exc.status_code in (404, 405):
        return await _not_found(request, exc)
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


def create_app(variant: Optional[str] = None) -> FastAPI:
    """Build the application serving one variant's route table.

    Without ``variant`` the name is read from ``APP_ENV``. Also usable as a
    uvicorn factory: ``uvicorn hello_service.main:create_app --factory``.
    """
    if variant is None:
        variant = get_settings().app_env
    info = get_variant(variant)
    table = route_table(variant)

    app = FastAPI(
        title=f"Hello Service ({info.name})",
        version=info.version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.variant = info.name

    for entry in table.entries:
        app.add_api_route(
            entry.path,
            _endpoint(table, entry.path),
            methods=[entry.method],
            response_class=PlainTextResponse,
        )

    app.add_exception_handler(RouteNotFound, _not_found)
    app.add_exception_handler(StarletteHTTPException, _http_error)

    logger.info("Serving %s variant with %d routes: %s", info.name, len(table), ", ".join(table.paths()))
    return app


def run() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    uvicorn.run(
        create_app(settings.app_env),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    run()
