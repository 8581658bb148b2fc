import logging
import sys
from typing import Callable, Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from pydantic import ValidationError

from joblist.jobs import JobCollection, JobStoreError, load_jobs
from joblist.render import PageRenderer, RenderError
from joblist.security import SecurityHeadersMiddleware
from joblist.settings import Settings
from joblist.state import AppState, get_app_state, this_year

logger = logging.getLogger("joblist")


def create_app(
    jobs: JobCollection,
    settings: Optional[Settings] = None,
    *,
    current_year: Optional[Callable[[], int]] = None,
) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.jobboard = AppState(
        jobs=tuple(jobs),
        renderer=PageRenderer(settings.templates_dir),
        current_year=current_year or this_year,
    )

    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    if settings.enable_security_headers:
        app.add_middleware(SecurityHeadersMiddleware)

    @app.get("/", response_class=HTMLResponse)
    async def home(state: AppState = Depends(get_app_state)):
        try:
            html = state.renderer.render(state.jobs, state.current_year())
        except RenderError:
            logger.exception("Template rendering error")
            return PlainTextResponse("Internal Server Error", status_code=500)
        return HTMLResponse(content=html)

    if settings.enable_health:
        @app.get("/health")
        async def health():
            return JSONResponse({"status": "healthy"})

    return app


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    try:
        settings = Settings()
    except ValidationError as exc:
        configure_logging("info")
        logger.error("Invalid configuration: %s", exc)
        return 1
    configure_logging(settings.log_level)

    try:
        jobs = load_jobs(settings.data_file)
    except JobStoreError as exc:
        logger.error("Failed to load job data: %s", exc)
        return 1

    try:
        app = create_app(jobs, settings)
    except RuntimeError as exc:
        # StaticFiles refuses to mount a missing directory.
        logger.error("Failed to build application: %s", exc)
        return 1

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level)
    return 0


if __name__ == "__main__":
    sys.exit(main())
