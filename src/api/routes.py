"""GET /api/search endpoint handler."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.schemas import ErrorResponse, PriceLookupResponse
from src.lookup.engine import PriceLookupEngine
from src.lookup.errors import ProviderError
from src.lookup.query import sanitize_query

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")

MISSING_QUERY_MESSAGE = "Missing car name in 'q' parameter"


def _get_engine(request: Request) -> PriceLookupEngine:
    return request.app.state.engine


def _error(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@router.get(
    "/search",
    response_model=PriceLookupResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def search_car(
    q: str | None = None,
    engine: PriceLookupEngine = Depends(_get_engine),
):
    query = sanitize_query(q)
    if not query:
        logger.info("rejected empty query")
        return _error(400, MISSING_QUERY_MESSAGE)

    try:
        return await engine.lookup(query)
    except ProviderError as exc:
        logger.exception(
            "price lookup failed",
            extra={"query": query, "stage": exc.stage, "provider": exc.provider},
        )
        return _error(500, "Search failed", str(exc))
    except Exception as exc:
        logger.exception("price lookup failed", extra={"query": query, "stage": "unexpected"})
        return _error(500, "Search failed", str(exc) or type(exc).__name__)
