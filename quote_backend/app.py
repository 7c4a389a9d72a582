"""
FastAPI application entry point for the quote service.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI

from quote_backend.config import Settings, get_settings
from quote_backend.dependencies import build_quote_store
from quote_backend.routes import health_router, quotes_router, router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="GenZ Quote API", version="0.1.0")
    app.state.settings = settings
    app.state.quote_store = build_quote_store(settings)

    app.include_router(health_router)
    app.include_router(router, prefix=settings.api_prefix)
    endpoints = [f"GET {settings.api_prefix}/quote (random quote)"]
    if settings.persistence_enabled:
        app.include_router(quotes_router, prefix=settings.api_prefix)
        endpoints += [
            f"GET {settings.api_prefix}/quotes (all quotes)",
            f"POST {settings.api_prefix}/quotes (create quote)",
        ]

    if settings.persistence_enabled and settings.has_remote_store:
        logger.info("Connecting to Supabase: %s", settings.supabase_url)
    logger.info("Endpoints: %s", "; ".join(endpoints))
    return app


app = create_app()
