from fastapi import FastAPI
import logging
from typing import Optional
from contextlib import asynccontextmanager

from service_tracker.api import tracking
from service_tracker.config import ServerSettings
from service_tracker.constants import SERVICE_NAME, VERSION
from service_tracker.tracker import ServiceTracker

# Configure logging
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan handler: log startup and shutdown of the tracker application.

    The tracker itself is created by ``create_app`` so it exists before the
    first request even when the lifespan is not run (plain TestClient use).
    """
    settings: ServerSettings = app.state.settings
    logger.info(f"{SERVICE_NAME} {VERSION} starting (port {settings.port})")
    try:
        yield
    finally:
        tracker: ServiceTracker = app.state.tracker
        logger.info(f"{SERVICE_NAME} shutting down; {len(tracker)} service(s) tracked")


def create_app(tracker: Optional[ServiceTracker] = None, settings: Optional[ServerSettings] = None) -> FastAPI:
    """Build the FastAPI application around an explicitly owned tracker.

    Args:
        tracker: Counter store shared by all requests. A fresh one is created
            when omitted, so every app (and every test) gets isolated counts.
        settings: Server settings, used for logging only.
    """
    app = FastAPI(title="Service Tracker", version=VERSION, lifespan=lifespan)
    app.state.tracker = tracker if tracker is not None else ServiceTracker()
    app.state.settings = settings if settings is not None else ServerSettings()

    @app.get("/api/health")
    def health():
        """Simple health endpoint for smoke tests."""
        return {"status": "ok", "service": SERVICE_NAME, "version": VERSION}

    app.include_router(tracking.router)
    return app


app = create_app()
