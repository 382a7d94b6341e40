"""Main FastAPI application entry point"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard import __version__
from taskboard.api.errors import register_exception_handlers
from taskboard.api.health import router as health_router
from taskboard.api.projects import router as projects_router
from taskboard.api.responses import UTF8JSONResponse
from taskboard.api.tasks import router as tasks_router
from taskboard.api.workers import router as workers_router
from taskboard.config import Settings
from taskboard.container import Container, build_container
from taskboard.logging_config import setup_logging
from taskboard.seed import seed_sample_data

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, container: Optional[Container] = None) -> FastAPI:
    """
    Build the application around a container.

    The container owns the in-memory store; tests pass their own to start
    from an empty state or to pin the clock.
    """
    settings = settings or (container.settings() if container else Settings())
    container = container or build_container(settings)

    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Projects, tasks and workers over JSON",
        version=__version__,
        default_response_class=UTF8JSONResponse,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=3600,
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(projects_router)
    app.include_router(tasks_router)
    app.include_router(workers_router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": settings.app_name,
            "version": __version__,
            "status": "running",
        }

    if settings.seed_sample_data:
        seed_sample_data(container)

    if settings.internal_id_enabled:
        logger.info(
            f"Project internal ids enabled: {settings.project_prefix}-<id>-{settings.project_suffix}"
        )

    logger.info(f"{settings.app_name} {__version__} ready ({settings.environment})")
    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn"""
    import uvicorn

    settings = app.state.container.settings()
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":
    run()
