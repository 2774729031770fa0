"""NeuroTrack API - FastAPI application."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from neurotrack.config import get_settings
from neurotrack.api.routes import (
    patients_router,
    sessions_router,
    milestones_router,
    plans_router,
    metrics_router,
    dashboard_router,
)
from neurotrack.core.errors import QueryError, RecordNotFoundError
from neurotrack.core.store import RecordStore
from neurotrack.utils.logging import get_logger

logger = get_logger(__name__)

VERSION = "0.1.0"


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """
    Build the API around a record store.

    When no store is given, one is created from the configured seed file.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Patient, session and progress tracking for therapy practices",
        version=VERSION,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.store = store if store is not None else RecordStore.from_file(settings.data_file)

    # CORS - allow frontend origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(patients_router)
    app.include_router(sessions_router)
    app.include_router(milestones_router)
    app.include_router(plans_router)
    app.include_router(metrics_router)
    app.include_router(dashboard_router)

    @app.exception_handler(QueryError)
    async def query_error_handler(request: Request, exc: QueryError):
        logger.warning(f"Rejected query on {request.url.path}: {exc}")
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def record_validation_handler(request: Request, exc: ValidationError):
        # Raised when a merged update no longer forms a valid record
        detail = [
            {"loc": list(e["loc"]), "msg": e["msg"], "type": e["type"]}
            for e in exc.errors()
        ]
        logger.warning(f"Invalid record on {request.url.path}: {detail}")
        return JSONResponse(status_code=422, content={"detail": detail})

    @app.get("/")
    async def root():
        """Health check."""
        return {
            "status": "ok",
            "service": settings.app_name,
            "version": VERSION
        }

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("neurotrack.main:app", host="0.0.0.0", port=8000, reload=True)
