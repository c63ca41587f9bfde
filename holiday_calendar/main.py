import time
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from holiday_calendar.config import Settings
from holiday_calendar.db import Database
from holiday_calendar.error_handlers import register_error_handlers
from holiday_calendar.routes import calendar, holidays
from holiday_calendar.services.scheduler import start_scheduler, shutdown_scheduler
from holiday_calendar.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    database: Database = app.state.database
    await database.init()
    app.state.scheduler = start_scheduler(settings, database)
    logger.info("Application started")
    yield
    shutdown_scheduler(app.state.scheduler)
    await database.close()
    logger.info("Application shutdown")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    app = FastAPI(title="Holiday Calendar", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = Database(settings)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log every HTTP request: method, path, status, duration."""
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.2fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    @app.get("/")
    async def root():
        return {"message": "Holiday Calendar API is running"}

    app.include_router(holidays.router)
    app.include_router(calendar.router)
    return app
