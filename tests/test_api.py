"""Tests for the catalog and portfolio API endpoints.

Endpoints:
- /products - list, create, get, update, delete, move, reset
- /portfolio - KPIs, unit economics, stateless calculate
"""

import pytest
from httpx import ASGITransport, AsyncClient

from fba_planner.api.app import app
from fba_planner.metrics.defaults import INITIAL_PRODUCTS


@pytest.fixture
def client() -> AsyncClient:
    return AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    )


@pytest.fixture
def initial_inputs() -> list[dict]:
    return [p.model_dump() for p in INITIAL_PRODUCTS]


class TestHealth:
    """Tests for the health endpoint."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        async with client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestProductsApi:
    """Tests for /products endpoints."""

    @pytest.mark.asyncio
    async def test_list_products_empty(self, test_db, client):
        async with client:
            response = await client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_reset_then_list(self, test_db, client):
        async with client:
            reset = await client.post("/api/products/reset")
            response = await client.get("/api/products")

        assert reset.status_code == 200
        data = response.json()
        assert [p["input"]["sku"] for p in data] == ["Penguin 20CM", "Elephant 20CM"]
        assert data[0]["metrics"]["landed_cogs"] == 229
        assert data[0]["metrics"]["fixed_closing_fee"] == 26
        assert data[0]["metrics"]["real_net_profit"] == pytest.approx(60.18625)
        assert data[1]["metrics"]["referral_fee"] == 0

    @pytest.mark.asyncio
    async def test_create_product_from_template(self, test_db, client):
        async with client:
            response = await client.post("/api/products")

        assert response.status_code == 201
        data = response.json()
        assert data["input"]["sku"] == "New Product 1"
        assert data["input"]["selling_price_inr"] == 500
        # 500 is the top of the lowest closing fee band
        assert data["metrics"]["fixed_closing_fee"] == 13

    @pytest.mark.asyncio
    async def test_create_product_with_overrides(self, test_db, client):
        async with client:
            response = await client.post(
                "/api/products",
                json={"sku": "Koala 25CM", "selling_price_inr": 1200},
            )

        assert response.status_code == 201
        data = response.json()
        assert data["input"]["sku"] == "Koala 25CM"
        assert data["metrics"]["fixed_closing_fee"] == 71
        assert data["metrics"]["referral_fee"] == pytest.approx(126.0)

    @pytest.mark.asyncio
    async def test_create_product_rejects_out_of_range(self, test_db, client):
        async with client:
            response = await client.post("/api/products", json={"returns_rate_percent": 150})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_get_product(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.get("/api/products/2")

        assert response.status_code == 200
        assert response.json()["input"]["sku"] == "Elephant 20CM"

    @pytest.mark.asyncio
    async def test_get_product_not_found(self, test_db, client):
        async with client:
            response = await client.get("/api/products/missing")

        assert response.status_code == 404
        assert response.json()["detail"] == "Product missing not found"

    @pytest.mark.asyncio
    async def test_update_product_recomputes_metrics(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.patch(
                "/api/products/2",
                json={"selling_price_inr": 300},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["input"]["selling_price_inr"] == 300
        assert data["input"]["sku"] == "Elephant 20CM"
        assert data["metrics"]["referral_fee"] == pytest.approx(31.5)

    @pytest.mark.asyncio
    async def test_update_product_rejects_zero_fx_rate(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.patch("/api/products/1", json={"fx_rate": 0})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_update_product_not_found(self, test_db, client):
        async with client:
            response = await client.patch("/api/products/missing", json={"sku": "x"})

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_product(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.delete("/api/products/1")
            remaining = await client.get("/api/products")

        assert response.status_code == 204
        assert [p["input"]["id"] for p in remaining.json()] == ["2"]

    @pytest.mark.asyncio
    async def test_delete_product_not_found(self, test_db, client):
        async with client:
            response = await client.delete("/api/products/missing")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_move_product(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.post("/api/products/2/move", json={"index": 0})

        assert response.status_code == 200
        assert [p["input"]["id"] for p in response.json()] == ["2", "1"]


class TestPortfolioApi:
    """Tests for /portfolio endpoints."""

    @pytest.mark.asyncio
    async def test_empty_portfolio(self, test_db, client):
        async with client:
            response = await client.get("/api/portfolio")

        assert response.status_code == 200
        data = response.json()
        assert data["product_count"] == 0
        assert data["total_inventory_value"] == 0
        assert data["months_to_payback"] is None

    @pytest.mark.asyncio
    async def test_portfolio_kpis(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.get("/api/portfolio")

        data = response.json()
        assert data["product_count"] == 2
        assert data["total_inventory_value"] == pytest.approx(506250)
        assert data["days_of_inventory"] == pytest.approx(506250 / 100050 * 30)
        assert data["months_to_payback"] == pytest.approx(506250 / 20377.25)

    @pytest.mark.asyncio
    async def test_unit_economics(self, test_db, client):
        async with client:
            await client.post("/api/products/reset")
            response = await client.get("/api/portfolio/unit-economics")

        assert response.status_code == 200
        rows = response.json()
        assert [r["sku"] for r in rows] == ["Penguin 20CM", "Elephant 20CM"]
        assert rows[0]["cogs"] == 229

    @pytest.mark.asyncio
    async def test_calculate_is_stateless(self, test_db, client, initial_inputs):
        async with client:
            response = await client.post("/api/portfolio/calculate", json=initial_inputs)
            stored = await client.get("/api/products")

        assert response.status_code == 200
        data = response.json()
        assert len(data["products"]) == 2
        assert data["kpis"]["total_inventory_revenue"] == pytest.approx(1437000)
        assert stored.json() == []

    @pytest.mark.asyncio
    async def test_calculate_accepts_out_of_range_inputs(self, client, initial_inputs):
        initial_inputs[0]["selling_price_inr"] = 0
        async with client:
            response = await client.post("/api/portfolio/calculate", json=initial_inputs[:1])

        assert response.status_code == 200
        data = response.json()
        assert data["products"][0]["metrics"]["real_net_profit_margin"] == 0
        assert data["kpis"]["months_to_payback"] is None
