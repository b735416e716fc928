"""Tests for the FastAPI endpoints."""

from decimal import Decimal

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tokenswap.api.app import create_app
from tokenswap.catalog.feed import HttpPriceFeed
from tokenswap.widget.widget import SwapWidget


@pytest.fixture
def test_app(widget):
    """Application serving a widget with prices already loaded."""
    return create_app(widget)


@pytest_asyncio.fixture
async def client(test_app):
    """Create async test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def fill_form(client, amount: str, token_from: str, token_to: str) -> dict:
    await client.post("/api/v1/widget/amount", json={"value": amount})
    await client.post("/api/v1/widget/select", json={"slot": "from", "symbol": token_from})
    response = await client.post("/api/v1/widget/select", json={"slot": "to", "symbol": token_to})
    return response.json()


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.asyncio
    async def test_health_check(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "tokenswap"

    @pytest.mark.asyncio
    async def test_detailed_health(self, client):
        response = await client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["catalog"]["loaded"] is True
        assert data["catalog"]["tokens"] == 4
        assert "environment" in data["config"]


class TestTokenEndpoints:
    """Tests for the token listing."""

    @pytest.mark.asyncio
    async def test_list_tokens(self, client):
        response = await client.get("/api/v1/tokens")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["total"] == 4
        assert [t["symbol"] for t in data["tokens"]] == ["USD", "EUR", "ETH", "SWTH"]
        assert Decimal(data["tokens"][1]["price"]) == Decimal("0.9")
        assert data["tokens"][1]["logo"] == "eur.svg"

    @pytest.mark.asyncio
    async def test_reload(self, client):
        response = await client.post("/api/v1/tokens/reload")

        assert response.status_code == 200
        assert response.json()["total"] == 4

    @pytest.mark.asyncio
    async def test_failed_feed(self):
        feed = HttpPriceFeed(
            "https://prices.test/tokenPrices.json",
            transport=httpx.MockTransport(lambda request: httpx.Response(500)),
        )
        widget = SwapWidget(feed=feed)
        await widget.load_catalog()
        app = create_app(widget)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            tokens = (await ac.get("/api/v1/tokens")).json()
            state = (await ac.get("/api/v1/widget")).json()
            health = (await ac.get("/health/detailed")).json()

        assert tokens["success"] is False
        assert tokens["tokens"] == []
        assert tokens["error"] == "Error fetching token prices."
        assert state["from_selector"]["options"] == []
        assert state["to_selector"]["options"] == []
        assert state["error"] == "Error fetching token prices."
        assert health["status"] == "degraded"
        await widget.close()


class TestQuoteEndpoints:
    """Tests for one-off quotes."""

    @pytest.mark.asyncio
    async def test_quote(self, client):
        response = await client.post(
            "/api/v1/quotes",
            json={"from_asset": "EUR", "to_asset": "USD", "amount": "100"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["to_amount"] == "90.0000"
        assert Decimal(data["rate"]) == Decimal("0.9")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload,kind,message",
        [
            ({"from_asset": "USD", "to_asset": "EUR", "amount": "-5"},
             "invalid_amount", "Please enter a valid amount."),
            ({"from_asset": "USD", "to_asset": "EUR", "amount": "1e1000000"},
             "invalid_amount", "Please enter a valid amount."),
            ({"from_asset": "USD", "to_asset": "USD", "amount": "100"},
             "same_token", "Please select different tokens to swap."),
            ({"from_asset": "USD", "to_asset": "BTC", "amount": "100"},
             "unknown_token", "Invalid token selection."),
        ],
    )
    async def test_quote_errors(self, client, payload, kind, message):
        response = await client.post("/api/v1/quotes", json=payload)

        data = response.json()
        assert data["success"] is False
        assert data["error_kind"] == kind
        assert data["error"] == message
        assert data["to_amount"] is None

    @pytest.mark.asyncio
    async def test_quote_leaves_form_untouched(self, client):
        await client.post(
            "/api/v1/quotes",
            json={"from_asset": "EUR", "to_asset": "USD", "amount": "100"},
        )

        state = (await client.get("/api/v1/widget")).json()
        assert state["amount_to"] == ""
        assert state["from_selector"]["selected"] is None


class TestWidgetEndpoints:
    """Tests for the swap form endpoints."""

    @pytest.mark.asyncio
    async def test_initial_state(self, client):
        response = await client.get("/api/v1/widget")

        assert response.status_code == 200
        data = response.json()
        assert data["phase"] == "ready"
        assert data["amount_to"] == ""
        assert data["error"] is None
        assert data["swap_enabled"] is False
        assert len(data["from_selector"]["options"]) == 4
        assert data["from_selector"]["options"][0] == {"symbol": "USD", "logo": "usd.svg"}

    @pytest.mark.asyncio
    async def test_conversion(self, client):
        data = await fill_form(client, "100", "USD", "EUR")

        assert data["phase"] == "valid"
        assert data["amount_to"] == "111.1111"
        assert data["from_selector"]["selected"] == "USD"
        assert data["to_selector"]["selected"] == "EUR"
        assert data["swap_enabled"] is True

    @pytest.mark.asyncio
    async def test_validation_error(self, client):
        await fill_form(client, "100", "USD", "EUR")
        data = await fill_form(client, "100", "USD", "USD")

        assert data["error"] == "Please select different tokens to swap."
        assert data["error_kind"] == "same_token"
        assert data["amount_to"] == "111.1111"
        assert data["swap_enabled"] is False

    @pytest.mark.asyncio
    async def test_oversized_amount(self, client):
        await fill_form(client, "100", "USD", "EUR")

        response = await client.post("/api/v1/widget/amount", json={"value": "1e1000000"})

        assert response.status_code == 200
        data = response.json()
        assert data["error_kind"] == "invalid_amount"
        assert data["amount_to"] == "111.1111"
        assert data["swap_enabled"] is False

    @pytest.mark.asyncio
    async def test_toggle(self, client):
        data = (await client.post("/api/v1/widget/toggle", json={"slot": "from"})).json()
        assert data["from_selector"]["options_visible"] is True
        assert data["to_selector"]["options_visible"] is False

        data = (await client.post("/api/v1/widget/toggle", json={"slot": "to"})).json()
        assert data["from_selector"]["options_visible"] is True
        assert data["to_selector"]["options_visible"] is True

    @pytest.mark.asyncio
    async def test_select_unlisted_token(self, client):
        response = await client.post(
            "/api/v1/widget/select", json={"slot": "from", "symbol": "BTC"}
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid token selection."

    @pytest.mark.asyncio
    async def test_select_invalid_slot(self, client):
        response = await client.post(
            "/api/v1/widget/select", json={"slot": "middle", "symbol": "USD"}
        )
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_swap(self, client):
        await fill_form(client, "100", "EUR", "USD")

        response = await client.post("/api/v1/widget/swap")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Swapped 100 EUR for 90.0000 USD"
        assert data["confirmation"] == {
            "amount_from": "100",
            "token_from": "EUR",
            "amount_to": "90.0000",
            "token_to": "USD",
        }

    @pytest.mark.asyncio
    async def test_swap_incomplete(self, client):
        response = await client.post("/api/v1/widget/swap")

        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Please fill out all fields correctly before swapping."
        assert data["error_kind"] == "incomplete_form"
        assert data["confirmation"] is None
        assert data["state"]["error"] == data["message"]
