"""
FastAPI Route Handlers
Fibonacci API
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request

from api.schemas import FibonacciResponse, HealthResponse
from config.settings import Settings, get_settings
from engine.result import RequestMeta
from engine.service import compute

logger = logging.getLogger(__name__)

router = APIRouter()


def _request_meta(request: Request) -> RequestMeta:
    return RequestMeta(
        path=request.url.path,
        query=request.url.query,
        full_uri=str(request.url),
    )


def _respond(raw: Optional[str], request: Request, settings: Settings) -> FibonacciResponse:
    record = compute(raw, _request_meta(request), settings=settings)
    return FibonacciResponse(**record.to_dict())


# ─── Health ──────────────────────────────────────────────────────────────────

@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check(settings: Settings = Depends(get_settings)):
    return HealthResponse(
        status="ok",
        version=settings.APP_VERSION,
        timestamp=datetime.now(timezone.utc),
        max_index=settings.MAX_INDEX,
    )


# ─── Fibonacci ───────────────────────────────────────────────────────────────

@router.api_route(
    "/api", methods=["GET", "POST"], response_model=FibonacciResponse, tags=["Fibonacci"]
)
def fibonacci_default(request: Request, settings: Settings = Depends(get_settings)):
    """F(DEFAULT_INDEX) when no index is given."""
    return _respond(None, request, settings)


@router.api_route(
    "/api/{n}", methods=["GET", "POST"], response_model=FibonacciResponse, tags=["Fibonacci"]
)
def fibonacci_at(n: str, request: Request, settings: Settings = Depends(get_settings)):
    """
    F(n) for the last path segment. Malformed values fall back to the
    default index and values above MAX_INDEX are clamped; this route never
    answers with an error status for a bad ``n``.
    """
    return _respond(n, request, settings)
