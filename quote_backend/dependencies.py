"""
Dependency wiring for the FastAPI app.

Settings and the quote store are built once by create_app() and parked on
app.state; handlers only ever read them.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import Depends, Request

from quote_backend.config import Settings
from quote_backend.quotes import FALLBACK_QUOTES, STATIC_QUOTES, QuoteResolver
from quote_backend.store import InMemoryQuoteStore, QuoteStore, SupabaseQuoteStore

logger = logging.getLogger(__name__)


def build_quote_store(settings: Settings) -> Optional[QuoteStore]:
    """
    Pick the quote store for this process, or None for fallback-only mode.
    """
    if not settings.persistence_enabled:
        return None
    if settings.use_in_memory_store:
        return InMemoryQuoteStore()
    if not settings.has_remote_store:
        logger.info("SUPABASE_URL/SUPABASE_API_KEY not set; serving fallback quotes only")
        return None
    return SupabaseQuoteStore(
        base_url=settings.supabase_url,
        api_key=settings.supabase_api_key,
        timeout=settings.supabase_timeout_seconds,
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_quote_store(request: Request) -> Optional[QuoteStore]:
    return request.app.state.quote_store


def get_resolver(
    settings: Settings = Depends(get_app_settings),
    store: Optional[QuoteStore] = Depends(get_quote_store),
) -> QuoteResolver:
    fallback = FALLBACK_QUOTES if settings.persistence_enabled else STATIC_QUOTES
    return QuoteResolver(store, fallback)
