"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from strcalc.api.errors import register_error_handlers
from strcalc.api.routes import calculator, health
from strcalc.calculator.summer import NumberStringSummer
from strcalc.core.config import AppSettings
from strcalc.core.logging import configure_logging


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings.log_level)
        app.state.settings = app_settings
        app.state.summer = NumberStringSummer(app_settings.calculator)
        yield
        app.state.summer = None

    app = FastAPI(
        title="String Calculator",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(calculator.router, prefix="/calculator")
    register_error_handlers(app)
    return app
