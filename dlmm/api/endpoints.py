"""API endpoints for the DLMM quote service."""

import asyncio
from collections.abc import Callable
from functools import partial
from typing import TypeVar

import structlog
from fastapi import APIRouter, Depends, HTTPException

from dlmm.api.schemas import (
    ComparisonRequest,
    DetailedQuoteResponse,
    QuoteModel,
    QuoteRequest,
    SimulationResponse,
)
from dlmm.client import get_default_quoter
from dlmm.errors import TransportError
from dlmm.quoting import Quoter

logger = structlog.get_logger()

router = APIRouter(prefix="/quote")

T = TypeVar("T")


def get_quoter() -> Quoter:
    """Dependency provider for the quoter instance.

    Override this in tests to inject a quoter backed by a mock gateway:
        app.dependency_overrides[get_quoter] = lambda: quoter
    """
    return get_default_quoter()


async def _run_quoter_call(func: Callable[[], T], **log_context: object) -> T:
    """Run a blocking quoter call off the event loop.

    TransportError becomes a 502: the ledger could not be reached, which is
    different from "no route".
    """
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, func)
    except TransportError as e:
        logger.warning("quote_transport_failed", error=str(e), **log_context)
        raise HTTPException(status_code=502, detail="Ledger gateway unavailable") from e


@router.post("")
async def best_quote(request: QuoteRequest, quoter: Quoter = Depends(get_quoter)) -> QuoteModel:
    """Best quote across the direct route and routes through intermediates."""
    logger.info(
        "received_quote_request",
        token_in=request.token_in,
        token_out=request.token_out,
        amount_in=request.amount_in,
    )
    quote = await _run_quoter_call(
        partial(quoter.get_best_quote, request.to_params(), request.to_options()),
        token_in=request.token_in,
        token_out=request.token_out,
    )
    return QuoteModel.from_domain(quote)


@router.post("/detailed")
async def detailed_quote(
    request: QuoteRequest, quoter: Quoter = Depends(get_quoter)
) -> DetailedQuoteResponse:
    """Best quote with price impact analysis and alternative routes."""
    detailed = await _run_quoter_call(
        partial(quoter.get_detailed_quote, request.to_params(), request.to_options()),
        token_in=request.token_in,
        token_out=request.token_out,
    )
    return DetailedQuoteResponse.from_domain(detailed)


@router.post("/comparison")
async def quote_comparison(
    request: ComparisonRequest, quoter: Quoter = Depends(get_quoter)
) -> list[QuoteModel]:
    """Best quote per input amount, sorted by output descending."""
    amounts = [int(amount) for amount in request.amounts]
    quotes = await _run_quoter_call(
        partial(quoter.get_quote_comparison, request.token_in, request.token_out, amounts),
        token_in=request.token_in,
        token_out=request.token_out,
    )
    return [QuoteModel.from_domain(quote) for quote in quotes]


@router.post("/simulate")
async def simulate_swap(
    request: QuoteRequest, quoter: Quoter = Depends(get_quoter)
) -> SimulationResponse:
    """Pre-flight check: can this swap execute, and what should the caller know."""
    simulation = await _run_quoter_call(
        partial(quoter.simulate_swap, request.to_params(), request.to_options()),
        token_in=request.token_in,
        token_out=request.token_out,
    )
    return SimulationResponse.from_domain(simulation)


@router.delete("/cache", status_code=204)
async def clear_cache(quoter: Quoter = Depends(get_quoter)) -> None:
    """Drop all cached quotes."""
    quoter.clear_cache()
    logger.info("quote_cache_cleared")
