"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mesoplan import __version__
from mesoplan.config.settings import get_settings
from mesoplan.core.error_handlers import domain_error_handler
from mesoplan.core.exceptions import DomainError
from mesoplan.core.logging import configure_logging, get_logger
from mesoplan.middleware.request_id import RequestIDMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging()
    # Fail fast on a broken catalog or engine config.
    from mesoplan.config.engine_config_loader import get_engine_config
    from mesoplan.services.exercise_catalog import get_exercise_catalog

    config = get_engine_config()
    catalog = get_exercise_catalog()
    get_logger(__name__).info(
        "startup", engine_config_version=config.version, exercises=len(catalog)
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Periodized training program generation and adaptation engine",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(DomainError, domain_error_handler)

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    from mesoplan.api.routes import (
        exercises_router,
        feedback_router,
        programs_router,
        readiness_router,
        volume_router,
    )

    app.include_router(programs_router, prefix="/programs", tags=["Programs"])
    app.include_router(readiness_router, prefix="/readiness", tags=["Readiness"])
    app.include_router(volume_router, prefix="/volume", tags=["Volume"])
    app.include_router(feedback_router, prefix="/feedback", tags=["Feedback"])
    app.include_router(exercises_router, prefix="/exercises", tags=["Exercises"])

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("mesoplan.main:app", host="0.0.0.0", port=8000, reload=True)
