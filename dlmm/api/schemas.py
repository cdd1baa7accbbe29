"""Pydantic request/response models for the quote API.

Amounts travel as decimal integer strings and percentages as decimal
strings, so no precision is lost in JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from dlmm.constants import DEFAULT_SLIPPAGE_BPS
from dlmm.models import (
    DetailedQuote,
    PriceImpactWarning,
    Quote,
    QuoteOptions,
    QuoteParams,
    RouteHop,
    SlippageConfig,
    SwapRoute,
    SwapSimulation,
)
from dlmm.models.types import U64, TokenType


class QuoteRequest(BaseModel):
    """A quote request for swapping amount_in of token_in into token_out."""

    token_in: TokenType = Field(alias="tokenIn", description="Input coin type")
    token_out: TokenType = Field(alias="tokenOut", description="Output coin type")
    amount_in: U64 = Field(alias="amountIn", description="Input amount in smallest units")
    pool_id: str | None = Field(default=None, alias="poolId")
    max_hops: int = Field(default=3, alias="maxHops", ge=1, le=3)
    slippage_tolerance: int = Field(
        default=DEFAULT_SLIPPAGE_BPS, alias="slippageTolerance", ge=0, le=10_000
    )
    include_gas_estimate: bool = Field(default=True, alias="includeGasEstimate")

    model_config = {"populate_by_name": True}

    def to_params(self) -> QuoteParams:
        return QuoteParams(
            token_in=self.token_in,
            token_out=self.token_out,
            amount_in=int(self.amount_in),
            pool_id=self.pool_id,
        )

    def to_options(self) -> QuoteOptions:
        return QuoteOptions(
            max_hops=self.max_hops,
            slippage_tolerance=self.slippage_tolerance,
            include_gas_estimate=self.include_gas_estimate,
        )


class ComparisonRequest(BaseModel):
    """Best quotes for several input amounts of one pair."""

    token_in: TokenType = Field(alias="tokenIn")
    token_out: TokenType = Field(alias="tokenOut")
    amounts: list[U64] = Field(min_length=1, max_length=32)

    model_config = {"populate_by_name": True}


class RouteHopModel(BaseModel):
    pool_id: str = Field(alias="poolId")
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    bin_step: int = Field(alias="binStep")
    expected_amount_in: str = Field(alias="expectedAmountIn")
    expected_amount_out: str = Field(alias="expectedAmountOut")
    expected_fee: str = Field(alias="expectedFee")
    price_impact: str = Field(alias="priceImpact")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, hop: RouteHop) -> RouteHopModel:
        return cls(
            pool_id=hop.pool_id,
            token_in=hop.token_in,
            token_out=hop.token_out,
            bin_step=hop.bin_step,
            expected_amount_in=str(hop.expected_amount_in),
            expected_amount_out=str(hop.expected_amount_out),
            expected_fee=str(hop.expected_fee),
            price_impact=str(hop.price_impact),
        )


class SwapRouteModel(BaseModel):
    hops: list[RouteHopModel]
    total_fee: str = Field(alias="totalFee")
    estimated_gas: str = Field(alias="estimatedGas")
    price_impact: str = Field(alias="priceImpact")
    route_type: str = Field(alias="routeType")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, route: SwapRoute) -> SwapRouteModel:
        return cls(
            hops=[RouteHopModel.from_domain(hop) for hop in route.hops],
            total_fee=str(route.total_fee),
            estimated_gas=str(route.estimated_gas),
            price_impact=str(route.price_impact),
            route_type=route.route_type.value,
        )


class QuoteModel(BaseModel):
    amount_in: str = Field(alias="amountIn")
    amount_out: str = Field(alias="amountOut")
    fee_amount: str = Field(alias="feeAmount")
    price_impact: str = Field(alias="priceImpact")
    gas_estimate: str = Field(alias="gasEstimate")
    pool_id: str = Field(alias="poolId")
    route: SwapRouteModel
    is_valid: bool = Field(alias="isValid")
    slippage_tolerance: int = Field(alias="slippageTolerance")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, quote: Quote) -> QuoteModel:
        return cls(
            amount_in=str(quote.amount_in),
            amount_out=str(quote.amount_out),
            fee_amount=str(quote.fee_amount),
            price_impact=str(quote.price_impact),
            gas_estimate=str(quote.gas_estimate),
            pool_id=quote.pool_id,
            route=SwapRouteModel.from_domain(quote.route),
            is_valid=quote.is_valid,
            slippage_tolerance=quote.slippage_tolerance,
        )


class PriceImpactModel(BaseModel):
    level: str
    percentage: str
    message: str
    should_warn: bool = Field(alias="shouldWarn")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, warning: PriceImpactWarning) -> PriceImpactModel:
        return cls(
            level=warning.level.value,
            percentage=str(warning.percentage),
            message=warning.message,
            should_warn=warning.should_warn,
        )


class SlippageModel(BaseModel):
    tolerance: int
    auto_slippage: bool = Field(alias="autoSlippage")
    max_slippage: int = Field(alias="maxSlippage")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, config: SlippageConfig) -> SlippageModel:
        return cls(
            tolerance=config.tolerance,
            auto_slippage=config.auto_slippage,
            max_slippage=config.max_slippage,
        )


class DetailedQuoteResponse(BaseModel):
    quote: QuoteModel
    price_impact_analysis: PriceImpactModel = Field(alias="priceImpactAnalysis")
    slippage_recommendation: SlippageModel = Field(alias="slippageRecommendation")
    alternative_routes: list[QuoteModel] = Field(alias="alternativeRoutes")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, detailed: DetailedQuote) -> DetailedQuoteResponse:
        return cls(
            quote=QuoteModel.from_domain(detailed.quote),
            price_impact_analysis=PriceImpactModel.from_domain(detailed.price_impact_analysis),
            slippage_recommendation=SlippageModel.from_domain(detailed.slippage_recommendation),
            alternative_routes=[QuoteModel.from_domain(q) for q in detailed.alternative_routes],
        )


class SimulationResponse(BaseModel):
    can_execute: bool = Field(alias="canExecute")
    quote: QuoteModel
    warnings: list[str]
    errors: list[str]

    model_config = {"populate_by_name": True}

    @classmethod
    def from_domain(cls, simulation: SwapSimulation) -> SimulationResponse:
        return cls(
            can_execute=simulation.can_execute,
            quote=QuoteModel.from_domain(simulation.quote),
            warnings=list(simulation.warnings),
            errors=list(simulation.errors),
        )
