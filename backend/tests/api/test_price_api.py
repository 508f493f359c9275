import pytest
from fastapi.testclient import TestClient

from prices.api.deps import get_price_service
from prices.api.main import app
from prices.repositories.in_memory_price_repository import InMemoryPriceRepository
from prices.repositories.price_repository import PriceRepository
from prices.sample_data import reference_prices
from prices.services.price_service import PriceService


class _BrokenRepository(PriceRepository):
    def add(self, price) -> None:
        raise NotImplementedError

    def find_candidates(self, product_id: int, brand_id: int):
        raise RuntimeError("database unavailable")


@pytest.fixture
def client():
    repo = InMemoryPriceRepository()
    for p in reference_prices():
        repo.add(p)

    app.dependency_overrides[get_price_service] = lambda: PriceService(repository=repo)
    yield TestClient(app)
    app.dependency_overrides.clear()


def _get(client: TestClient, **params):
    return client.get("/api/prices", params=params)


@pytest.mark.parametrize(
    "application_date, price_list, price, start, end",
    [
        ("2020-06-14T10:00:00", 1, "35.50", "2020-06-14T00:00:00", "2020-12-31T23:59:59"),
        ("2020-06-14T16:00:00", 2, "25.45", "2020-06-14T15:00:00", "2020-06-14T18:30:00"),
        ("2020-06-14T21:00:00", 1, "35.50", "2020-06-14T00:00:00", "2020-12-31T23:59:59"),
        ("2020-06-15T10:00:00", 3, "30.50", "2020-06-15T00:00:00", "2020-06-15T11:00:00"),
        ("2020-06-16T21:00:00", 4, "38.95", "2020-06-15T16:00:00", "2020-12-31T23:59:59"),
    ],
)
def test_reference_scenarios(client, application_date, price_list, price, start, end):
    r = _get(client, applicationDate=application_date, productId=35455, brandId=1)
    assert r.status_code == 200, r.text
    assert r.headers["content-type"].startswith("application/json")
    assert r.json() == {
        "productId": 35455,
        "brandId": 1,
        "priceList": price_list,
        "startDate": start,
        "endDate": end,
        "price": price,
        "currency": "EUR",
    }


def test_boundaries_are_inclusive(client):
    assert _get(client, applicationDate="2020-06-14T00:00:00", productId=35455, brandId=1).json()["priceList"] == 1
    assert _get(client, applicationDate="2020-12-31T23:59:59", productId=35455, brandId=1).status_code == 200
    # une seconde avant la promo -> tarif de base
    assert _get(client, applicationDate="2020-06-14T14:59:59", productId=35455, brandId=1).json()["priceList"] == 1


def test_not_found_returns_404_error_body(client):
    r = _get(client, applicationDate="2019-01-01T10:00:00", productId=35455, brandId=1)
    assert r.status_code == 404
    body = r.json()
    assert body["status"] == 404
    assert body["error"] == "Not Found"
    assert body["path"] == "/api/prices"
    assert "35455" in body["message"]
    assert body["timestamp"]


@pytest.mark.parametrize(
    "params, message",
    [
        ({"productId": 35455, "brandId": 1}, "application date is required"),
        ({"applicationDate": "2020-06-14T10:00:00", "brandId": 1}, "product id is required"),
        ({"applicationDate": "2020-06-14T10:00:00", "productId": 35455}, "brand id is required"),
        ({"applicationDate": "2020-06-14T10:00:00", "productId": -1, "brandId": 1}, "product id must be positive, got -1"),
        ({"applicationDate": "2020-06-14T10:00:00", "productId": 35455, "brandId": 0}, "brand id must be positive, got 0"),
    ],
)
def test_invalid_query_returns_400(client, params, message):
    r = _get(client, **params)
    assert r.status_code == 400
    body = r.json()
    assert body["status"] == 400
    assert body["error"] == "Bad Request"
    assert body["message"] == message


@pytest.mark.parametrize(
    "params",
    [
        {"applicationDate": "invalid-date", "productId": 35455, "brandId": 1},
        {"applicationDate": "2020-06-14T10:00:00", "productId": "invalid", "brandId": 1},
        {"applicationDate": "2020-06-14T10:00:00", "productId": 35455, "brandId": "invalid"},
    ],
)
def test_malformed_parameters_return_400(client, params):
    r = _get(client, **params)
    assert r.status_code == 400
    assert r.json()["error"] == "Bad Request"


def test_timezone_aware_date_is_converted_to_utc(client):
    r = _get(client, applicationDate="2020-06-14T18:00:00+02:00", productId=35455, brandId=1)
    assert r.status_code == 200
    assert r.json()["priceList"] == 2


def test_store_failure_returns_500():
    app.dependency_overrides[get_price_service] = lambda: PriceService(repository=_BrokenRepository())
    try:
        r = TestClient(app, raise_server_exceptions=False).get(
            "/api/prices",
            params={"applicationDate": "2020-06-14T10:00:00", "productId": 35455, "brandId": 1},
        )
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    assert r.json()["message"] == "Internal error"


def test_health():
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}
