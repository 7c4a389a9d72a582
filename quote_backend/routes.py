"""
HTTP routes for the quote API.

`router` serves the random quote and is mounted in every variant.
`quotes_router` lists and creates quotes and is mounted only when
persistence is enabled.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from quote_backend.config import Settings
from quote_backend.dependencies import get_app_settings, get_quote_store, get_resolver
from quote_backend.quotes import QuoteResolver, pick_random_quote
from quote_backend.schemas import HealthResponse, QuotePayload, RandomQuoteResponse
from quote_backend.store import QuoteStore, RemoteStoreError

logger = logging.getLogger(__name__)

QUOTE_METHODS = "GET, OPTIONS"
QUOTES_METHODS = "GET, POST, OPTIONS"

router = APIRouter(tags=["quote"])
quotes_router = APIRouter(tags=["quotes"])
health_router = APIRouter(tags=["health"])


def _cors_headers(settings: Settings, methods: str) -> dict:
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": methods,
        "Access-Control-Allow-Headers": "Content-Type",
    }


@health_router.get("/health", response_model=HealthResponse)
def health(
    settings: Settings = Depends(get_app_settings),
    store: Optional[QuoteStore] = Depends(get_quote_store),
):
    return HealthResponse(
        status="ok",
        variant="persistent" if settings.persistence_enabled else "static",
        remote_store=store is not None,
    )


@router.get(
    "/quote", response_model=RandomQuoteResponse, response_model_exclude_none=True
)
def random_quote(
    response: Response,
    settings: Settings = Depends(get_app_settings),
    resolver: QuoteResolver = Depends(get_resolver),
):
    response.headers.update(_cors_headers(settings, QUOTE_METHODS))
    quote = pick_random_quote(resolver.resolve())
    author = quote.author if settings.persistence_enabled else None
    return RandomQuoteResponse(quote=quote.text, author=author)


@router.options("/quote")
def random_quote_preflight(settings: Settings = Depends(get_app_settings)):
    return Response(status_code=200, headers=_cors_headers(settings, QUOTE_METHODS))


@quotes_router.get("/quotes", response_model=list[QuotePayload])
def list_quotes(
    response: Response,
    settings: Settings = Depends(get_app_settings),
    resolver: QuoteResolver = Depends(get_resolver),
):
    response.headers.update(_cors_headers(settings, QUOTES_METHODS))
    return [QuotePayload(**quote.as_dict()) for quote in resolver.resolve()]


@quotes_router.post("/quotes")
async def create_quote(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    store: Optional[QuoteStore] = Depends(get_quote_store),
):
    """
    Store a quote and echo back what the client sent. Any id in the body is
    ignored; the store assigns one.
    """
    headers = _cors_headers(settings, QUOTES_METHODS)
    try:
        body = await request.json()
        # A JSON null body decodes to an empty quote.
        payload = QuotePayload.model_validate({} if body is None else body)
    except (ValueError, ValidationError) as exc:
        raise HTTPException(status_code=400, detail="Invalid JSON", headers=headers) from exc

    if store is None:
        logger.info("No remote store configured; quote not persisted")
    else:
        try:
            await run_in_threadpool(store.create_quote, payload.text, payload.author)
        except RemoteStoreError as exc:
            logger.error("Failed to create quote: %s", exc)
            raise HTTPException(status_code=500, detail=str(exc), headers=headers) from exc

    return JSONResponse(
        payload.model_dump(exclude_unset=body is not None), headers=headers
    )


@quotes_router.options("/quotes")
def quotes_preflight(settings: Settings = Depends(get_app_settings)):
    return Response(status_code=200, headers=_cors_headers(settings, QUOTES_METHODS))


@quotes_router.api_route(
    "/quotes", methods=["PUT", "PATCH", "DELETE", "HEAD"], include_in_schema=False
)
def quotes_method_not_allowed(settings: Settings = Depends(get_app_settings)):
    headers = _cors_headers(settings, QUOTES_METHODS)
    headers["Allow"] = QUOTES_METHODS
    raise HTTPException(status_code=405, detail="Method not allowed", headers=headers)
