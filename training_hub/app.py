"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from training_hub.config import STATIC_DIR, SUPABASE_ANON_KEY, SUPABASE_SERVICE_KEY, SUPABASE_URL
from training_hub.routers import gyms, gyms_api, home, plans

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if not SUPABASE_URL or not (SUPABASE_ANON_KEY or SUPABASE_SERVICE_KEY):
        logger.warning("Supabase is not configured; directory pages will return errors")
    else:
        logger.info("Reading gyms and training plans from %s", SUPABASE_URL)

    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Hyrox Training Hub",
        description="Hyrox gyms and training plans: directory pages and a small read-only API.",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    # Pages (hidden from API docs)
    for r in [home, gyms, plans]:
        app.include_router(r.router, include_in_schema=False)

    # Gyms API, public and included in API docs
    app.include_router(gyms_api.router)

    return app
