"""Integration tests for the quote API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from dlmm.api.endpoints import get_quoter
from dlmm.api.main import app
from dlmm.gateway import MockLedgerGateway
from tests.helpers import DEEP, SUI, USDC, make_quoter


@pytest.fixture
def gateway() -> MockLedgerGateway:
    """Ledger with a SUI/DEEP pool and a SUI -> USDC -> DEEP path."""
    gateway = MockLedgerGateway()
    gateway.set_quote(SUI, DEEP, 1000, amount_out=600, fee_amount=3, price_impact="0.2")
    gateway.set_quote(SUI, USDC, 1000, amount_out=990, fee_amount=1)
    gateway.set_quote(USDC, DEEP, 990, amount_out=950, fee_amount=2, price_impact="0.05")
    gateway.set_quote(SUI, DEEP, 10, amount_out=6)
    return gateway


@pytest.fixture
def client(gateway: MockLedgerGateway) -> Iterator[TestClient]:
    """Create a test client backed by the mock ledger."""
    quoter = make_quoter(gateway)
    app.dependency_overrides[get_quoter] = lambda: quoter
    yield TestClient(app)
    app.dependency_overrides.clear()


def quote_request(amount_in: str = "1000", **extra: object) -> dict[str, object]:
    return {"tokenIn": SUI, "tokenOut": DEEP, "amountIn": amount_in, **extra}


class TestQuoteEndpoint:
    """Tests for POST /quote."""

    def test_best_quote(self, client):
        response = client.post("/quote", json=quote_request())

        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is True
        assert data["amountIn"] == "1000"
        assert data["amountOut"] == "950"
        assert data["feeAmount"] == "3"
        assert data["priceImpact"] == "0.05"
        assert data["poolId"] == ""
        assert data["route"]["routeType"] == "multi-hop"
        hops = data["route"]["hops"]
        assert [hop["tokenIn"] for hop in hops] == [SUI, USDC]
        assert hops[0]["expectedAmountOut"] == hops[1]["expectedAmountIn"] == "990"

    def test_direct_only(self, client):
        response = client.post("/quote", json=quote_request(maxHops=1))

        data = response.json()
        assert data["amountOut"] == "600"
        assert data["route"]["routeType"] == "direct"

    def test_no_route_is_invalid_quote(self, client):
        response = client.post("/quote", json=quote_request("5"))

        assert response.status_code == 200
        data = response.json()
        assert data["isValid"] is False
        assert data["amountOut"] == "0"
        assert data["route"]["hops"] == []

    def test_repeat_request_served_from_cache(self, client, gateway):
        client.post("/quote", json=quote_request())
        calls = gateway.call_count
        client.post("/quote", json=quote_request())
        assert gateway.call_count == calls

    def test_snake_case_fields_accepted(self, client):
        response = client.post(
            "/quote", json={"token_in": SUI, "token_out": DEEP, "amount_in": "1000"}
        )
        assert response.status_code == 200
        assert response.json()["amountOut"] == "950"


class TestDetailedEndpoint:
    def test_detailed_quote(self, client):
        response = client.post("/quote/detailed", json=quote_request())

        assert response.status_code == 200
        data = response.json()
        assert data["quote"]["amountOut"] == "950"
        assert data["priceImpactAnalysis"]["level"] == "low"
        assert data["priceImpactAnalysis"]["shouldWarn"] is False
        assert data["slippageRecommendation"] == {
            "tolerance": 50,
            "autoSlippage": True,
            "maxSlippage": 1000,
        }
        assert [q["amountOut"] for q in data["alternativeRoutes"]] == ["600"]


class TestComparisonEndpoint:
    def test_sorted_by_output(self, client):
        response = client.post(
            "/quote/comparison",
            json={"tokenIn": SUI, "tokenOut": DEEP, "amounts": ["10", "1000", "5"]},
        )

        assert response.status_code == 200
        assert [q["amountOut"] for q in response.json()] == ["950", "6", "0"]


class TestSimulateEndpoint:
    def test_executable(self, client):
        response = client.post("/quote/simulate", json=quote_request())

        assert response.status_code == 200
        data = response.json()
        assert data["canExecute"] is True
        assert data["errors"] == []

    def test_no_route(self, client):
        data = client.post("/quote/simulate", json=quote_request("5")).json()
        assert data["canExecute"] is False
        assert data["errors"] == ["No valid route found"]


class TestCacheEndpoint:
    def test_clear_cache(self, client, gateway):
        client.post("/quote", json=quote_request())
        calls = gateway.call_count

        response = client.delete("/quote/cache")
        assert response.status_code == 204

        client.post("/quote", json=quote_request())
        assert gateway.call_count > calls
