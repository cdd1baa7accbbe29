"""Tests for bin index <-> Q64.64 price conversion."""

import math

import pytest

from dlmm.constants import ALLOWED_BIN_STEPS, PRICE_SCALE
from dlmm.errors import DomainError
from dlmm.math.bin_price import bin_from_price, bin_step_base, price_from_bin


def lowest_resolvable_bin(bin_step: int) -> int:
    """Lowest bin (>= -100000) whose scaled price is still >= 2^32."""
    limit = math.ceil(-32 * math.log(2) / math.log(1 + bin_step / 10_000))
    return max(-100_000, limit)


def round_trip_cases() -> list[tuple[int, int]]:
    cases = []
    for bin_step in ALLOWED_BIN_STEPS:
        low = lowest_resolvable_bin(bin_step)
        for bin_id in sorted({low, low // 3, -1, 0, 1, 777, 12_345, 100_000}):
            cases.append((bin_id, bin_step))
    return cases


class TestPriceFromBin:
    """Tests for price_from_bin."""

    def test_bin_zero_is_unit_price(self):
        """Bin 0 has price 1.0 for every bin step."""
        for bin_step in ALLOWED_BIN_STEPS:
            assert price_from_bin(0, bin_step) == str(PRICE_SCALE)

    def test_exact_powers_of_two(self):
        """A 100% bin step doubles the price per bin."""
        assert price_from_bin(1, 10_000) == str(2**65)
        assert price_from_bin(10, 10_000) == str(2**74)
        assert price_from_bin(-1, 10_000) == str(2**63)
        assert price_from_bin(-64, 10_000) == "1"

    def test_known_value(self):
        """(1.0025)^1 * 2^64, truncated."""
        assert price_from_bin(1, 25) == str(PRICE_SCALE * 10025 // 10000)

    def test_returns_integer_string(self):
        price = price_from_bin(-12_345, 25)
        assert price.isdigit()

    def test_deep_negative_bin_truncates_to_zero(self):
        """Prices below 2^-64 do not fit the fixed-point format."""
        assert price_from_bin(-100_000, 1000) == "0"

    def test_huge_price_has_all_digits(self):
        """Large bins are not rounded to a float-sized mantissa."""
        price = price_from_bin(100_000, 1000)
        assert price.isdigit()
        assert len(price) > 4000

    @pytest.mark.parametrize("bin_step", [0, -1, -25, 10_001])
    def test_invalid_bin_step_raises(self, bin_step):
        with pytest.raises(DomainError):
            price_from_bin(5, bin_step)

    def test_non_integer_bin_step_raises(self):
        with pytest.raises(DomainError):
            price_from_bin(5, 2.5)

    def test_non_integer_bin_id_raises(self):
        with pytest.raises(DomainError):
            price_from_bin(1.5, 25)

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            price_from_bin(1, 0)


class TestMonotonicity:
    """Price strictly increases with bin index."""

    @pytest.mark.parametrize("bin_step", ALLOWED_BIN_STEPS)
    def test_strictly_increasing(self, bin_step):
        prices = [int(price_from_bin(bin_id, bin_step)) for bin_id in range(-50, 51)]
        assert all(lower < higher for lower, higher in zip(prices, prices[1:], strict=False))

    @pytest.mark.parametrize("bin_step", ALLOWED_BIN_STEPS)
    def test_strictly_increasing_down_to_lowest_resolvable_bin(self, bin_step):
        low = lowest_resolvable_bin(bin_step)
        prices = [int(price_from_bin(bin_id, bin_step)) for bin_id in range(low, low + 50)]
        assert all(lower < higher for lower, higher in zip(prices, prices[1:], strict=False))

    @pytest.mark.parametrize("bin_step", ALLOWED_BIN_STEPS)
    def test_non_decreasing_below_resolvable_range(self, bin_step):
        """Truncation can make deep negative bins share a price, never invert it."""
        prices = [int(price_from_bin(bin_id, bin_step)) for bin_id in range(-100_000, -99_950)]
        assert all(lower <= higher for lower, higher in zip(prices, prices[1:], strict=False))

    def test_deep_bins_collapse_to_zero(self):
        """Where strict monotonicity stops: large steps truncate to a zero price."""
        assert price_from_bin(-100_000, 1000) == "0"
        assert price_from_bin(-99_999, 1000) == "0"
        assert lowest_resolvable_bin(1000) > -100_000

    def test_larger_step_spreads_prices(self):
        """Same bin, bigger step, further from 1.0."""
        assert int(price_from_bin(10, 100)) > int(price_from_bin(10, 25))
        assert int(price_from_bin(-10, 100)) < int(price_from_bin(-10, 25))


class TestBinFromPrice:
    """Tests for bin_from_price."""

    def test_unit_price_is_bin_zero(self):
        assert bin_from_price(str(PRICE_SCALE), 25) == 0

    def test_accepts_int_price(self):
        assert bin_from_price(2**65, 10_000) == 1

    def test_rounds_to_nearest_bin(self):
        """A price slightly off a bin boundary maps to that bin."""
        price = int(price_from_bin(10, 100))
        assert bin_from_price(price + 1, 100) == 10
        assert bin_from_price(price - 1, 100) == 10

    def test_price_between_bins(self):
        """Geometric midpoint side decides the bin."""
        low = int(price_from_bin(3, 10_000))  # 8.0
        high = int(price_from_bin(4, 10_000))  # 16.0
        assert bin_from_price(low + (high - low) // 10, 10_000) == 3
        assert bin_from_price(high - (high - low) // 10, 10_000) == 4

    @pytest.mark.parametrize("price", ["0", "-1", 0, -100])
    def test_non_positive_price_raises(self, price):
        with pytest.raises(DomainError):
            bin_from_price(price, 25)

    @pytest.mark.parametrize("price", ["abc", "", "NaN", "Infinity"])
    def test_non_numeric_price_raises(self, price):
        with pytest.raises(DomainError):
            bin_from_price(price, 25)

    def test_invalid_bin_step_raises(self):
        with pytest.raises(DomainError):
            bin_from_price(str(PRICE_SCALE), 0)


class TestRoundTrip:
    """bin_from_price(price_from_bin(b, s), s) == b."""

    @pytest.mark.parametrize("bin_id,bin_step", round_trip_cases())
    def test_round_trip_is_exact(self, bin_id, bin_step):
        assert bin_from_price(price_from_bin(bin_id, bin_step), bin_step) == bin_id

    def test_dense_range_near_active_bin(self):
        for bin_id in range(-300, 301):
            assert bin_from_price(price_from_bin(bin_id, 25), 25) == bin_id


class TestBinStepBase:
    def test_exact_base(self):
        assert str(bin_step_base(25)) == "1.0025"
        assert str(bin_step_base(10_000)) == "2.0000"

    def test_invalid(self):
        with pytest.raises(DomainError):
            bin_step_base(0)
