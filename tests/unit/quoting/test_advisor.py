"""Tests for price impact classification and slippage recommendations."""

from decimal import Decimal

import pytest

from dlmm.errors import DomainError
from dlmm.models import ImpactLevel, RouteHop, SwapRoute
from dlmm.quoting import classify_impact, minimum_output, recommend_slippage
from dlmm.quoting.advisor import estimate_route_gas, impact_level
from tests.helpers import make_quote


class TestClassifyImpact:
    """Tests for the impact severity tiers."""

    @pytest.mark.parametrize(
        "impact,level",
        [
            ("0", ImpactLevel.LOW),
            ("0.0999", ImpactLevel.LOW),
            ("0.1", ImpactLevel.MEDIUM),
            ("0.5", ImpactLevel.MEDIUM),
            ("0.999", ImpactLevel.MEDIUM),
            ("1", ImpactLevel.HIGH),
            ("4.99", ImpactLevel.HIGH),
            ("5", ImpactLevel.EXTREME),
            ("42", ImpactLevel.EXTREME),
        ],
    )
    def test_levels(self, impact, level):
        assert impact_level(Decimal(impact)) is level

    def test_low_does_not_warn(self):
        warning = classify_impact(make_quote(price_impact="0.05"))
        assert warning.level is ImpactLevel.LOW
        assert warning.should_warn is False
        assert warning.message == "Minimal price impact"
        assert warning.percentage == Decimal("0.05")

    def test_medium_warns(self):
        warning = classify_impact(make_quote(price_impact="0.5"))
        assert warning.level is ImpactLevel.MEDIUM
        assert warning.should_warn is True
        assert warning.message == "Moderate price impact"

    def test_high_and_extreme_messages(self):
        assert "smaller trade size" in classify_impact(make_quote(price_impact="2")).message
        assert "not be profitable" in classify_impact(make_quote(price_impact="7")).message


class TestRecommendSlippage:
    """Tests for recommend_slippage."""

    @pytest.mark.parametrize(
        "impact,tolerance",
        [
            ("0", 50),
            ("0.5", 50),
            ("1", 50),
            ("2", 70),
            ("2.55", 76),
            ("45", 500),
            ("100", 500),
        ],
    )
    def test_tolerance(self, impact, tolerance):
        assert recommend_slippage(make_quote(price_impact=impact)).tolerance == tolerance

    def test_config_fields(self):
        config = recommend_slippage(make_quote())
        assert config.auto_slippage is True
        assert config.max_slippage == 1000


class TestMinimumOutput:
    """Tests for minimum_output."""

    def test_floor(self):
        assert minimum_output(make_quote(amount_out=1000), 50) == 995
        assert minimum_output(make_quote(amount_out=999), 50) == 994

    def test_bounds(self):
        quote = make_quote(amount_out=1000)
        assert minimum_output(quote, 0) == 1000
        assert minimum_output(quote, 10_000) == 0

    def test_out_of_range_rejected(self):
        with pytest.raises(DomainError):
            minimum_output(make_quote(), 10_001)
        with pytest.raises(DomainError):
            minimum_output(make_quote(), -1)


class TestEstimateRouteGas:
    def test_per_hop(self):
        assert estimate_route_gas(SwapRoute()) == 100_000
        hop = RouteHop("", "a", "b", 25, 1, 1, 0, Decimal(0))
        assert estimate_route_gas(SwapRoute(hops=(hop,))) == 250_000
        assert estimate_route_gas(SwapRoute(hops=(hop, hop))) == 400_000
