"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from nutrient_gap.api.analysis import router as analysis_router
from nutrient_gap.app_logging import configure_logging
from nutrient_gap.containers import AppContainer
from nutrient_gap.domain.errors import ConfigError

GENERIC_FAILURE = "Nutrient analysis failed"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(analysis_router)

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        logger.error(
            "Nutrient analysis misconfigured: %s", request.url.path, exc_info=exc
        )
        return JSONResponse(status_code=500, content={"detail": GENERIC_FAILURE})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
