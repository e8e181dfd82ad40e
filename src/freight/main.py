"""FastAPI application entry point."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.routes import health, quotes
from .config import Settings, settings
from .services.quoting.service import build_quoting_config


def create_app(app_settings: Settings | None = None) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title=app_settings.app_name)
    if app_settings.frontend_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(app_settings.frontend_allowed_origins),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Carrier contract and warehouses are read once and shared read-only.
    app.state.quoting_config = build_quoting_config(app_settings)

    @app.get("/")
    def root():
        return {
            "service": app_settings.app_name,
            "status": "running",
            "api_prefix": app_settings.api_prefix,
            "health": f"{app_settings.api_prefix}/health",
            "docs": "/docs",
        }

    app.include_router(health.router, prefix=app_settings.api_prefix)
    app.include_router(quotes.router, prefix=app_settings.api_prefix)
    return app


app = create_app()
