"""Main FastAPI application for the landing-page backend."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
import logging
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import load_config
from app.core.db import init_db, bootstrap_db
from app.core.logging import setup_logging
from app.core.scheduler import get_scheduler, run_startup_snapshot, schedule_snapshot_job


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    setup_logging()
    logger = logging.getLogger(__name__)
    config = load_config()
    for note in config.warnings():
        logger.warning("config_warning | %s", note)

    init_db()
    bootstrap_db()

    run_startup_snapshot(config)

    scheduler = get_scheduler()
    # Handle kept for cancellation; None when the cron expression is invalid
    app.state.snapshot_job = schedule_snapshot_job(scheduler, config.snapshot_cron)
    scheduler.start()
    logger.info(
        "APScheduler started | timezone=%s snapshot_cron=%s scheduled=%s",
        config.timezone,
        config.snapshot_cron,
        app.state.snapshot_job is not None,
    )

    yield

    # Shutdown
    scheduler.shutdown()
    logger.info("APScheduler shutdown")


app = FastAPI(
    title="Landing Page API",
    description="Site settings, providers and rotating game snapshots",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
from app.api import health, public, auth, settings, providers, pool_games, snapshots, metrics

app.include_router(health.router, prefix="/api")
app.include_router(public.router, prefix="/api")
app.include_router(auth.router, prefix="/api")
app.include_router(settings.router, prefix="/api")
app.include_router(providers.router, prefix="/api")
app.include_router(pool_games.router, prefix="/api")
app.include_router(snapshots.router, prefix="/api")

# Prometheus metrics (unprefixed)
app.include_router(metrics.router)


if __name__ == "__main__":
    import os

    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "3000")))
