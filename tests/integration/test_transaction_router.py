import pytest

from reward.pricing.dates import INVALID_DATE_MESSAGE
from reward.pricing.views import INTERNAL_ERROR_MESSAGE, INVALID_REQUEST_MESSAGE

URL = "/api/transaction/calculate"


def _payload(date, basket, **overrides):
    body = {
        "CustomerId": "8e4e8991-aaee-495b-9f24-52d5d0e509c5",
        "LoyaltyCard": "CTX0000001",
        "TransactionDate": date,
        "Basket": basket,
    }
    body.update(overrides)
    return body


def test_calculate_discount_and_points(client, seeded_repositories):
    r = client.post(URL, json=_payload("10-Jan-2020", [{"ProductId": "PRD02", "UnitPrice": "10.00", "Quantity": "1"}]))
    assert r.status_code == 200
    assert r.json() == {
        "CustomerId": "8e4e8991-aaee-495b-9f24-52d5d0e509c5",
        "LoyaltyCard": "CTX0000001",
        "TransactionDate": "10-Jan-2020",
        "TotalAmount": "10.00",
        "DiscountApplied": "2.00",
        "GrandTotal": "8.00",
        "PointsEarned": "16",
    }


def test_calculate_keys_with_spaces(client, seeded_repositories):
    body = {
        "Customer Id": "C001",
        "Loyalty Card": "CTX0000001",
        "Transaction Date": "15-Feb-2025",
        "Basket": [
            {"Product Id": "PRD01", "Unit Price": "10.00", "Quantity": "2"},
            {"Product Id": "PRD99", "Unit Price": "4.00", "Quantity": "1"},
        ],
    }
    r = client.post(URL, json=body)
    assert r.status_code == 200
    data = r.json()
    assert data["TotalAmount"] == "20.00"
    assert data["DiscountApplied"] == "0.00"
    assert data["GrandTotal"] == "20.00"
    assert data["PointsEarned"] == "0"


def test_calculate_json_number_quantity(client, seeded_repositories):
    basket = [{"ProductId": "PRD01", "UnitPrice": 10, "Quantity": 2.0}]
    data = client.post(URL, json=_payload("15-Feb-2025", basket)).json()
    assert data["TotalAmount"] == "20.00"
    assert data["GrandTotal"] == "20.00"


def test_calculate_fuel_points_promotion(client, seeded_repositories):
    basket = [
        {"ProductId": "PRD02", "UnitPrice": "12.50", "Quantity": "2"},
        {"ProductId": "PRD05", "UnitPrice": "5.10", "Quantity": "1"},
    ]
    data = client.post(URL, json=_payload("12-Feb-2020", basket)).json()
    assert data["TotalAmount"] == "30.10"
    assert data["DiscountApplied"] == "5.00"
    assert data["GrandTotal"] == "25.10"
    assert data["PointsEarned"] == "60"


def test_promotions_loaded_once_across_requests(client, seeded_repositories):
    basket = [{"ProductId": "PRD01", "UnitPrice": "5.00", "Quantity": "3"}]
    for _ in range(3):
        assert client.post(URL, json=_payload("10-Jan-2020", basket)).json()["PointsEarned"] == "30"
    assert seeded_repositories["products"] == 3
    assert seeded_repositories["discount"] == 1
    assert seeded_repositories["points"] == 1


@pytest.mark.parametrize("overrides", [
    {"CustomerId": ""},
    {"LoyaltyCard": None},
    {"Basket": []},
])
def test_calculate_rejects_incomplete_request(client, seeded_repositories, overrides):
    basket = [{"ProductId": "PRD01", "UnitPrice": "1.00", "Quantity": "1"}]
    r = client.post(URL, json=_payload("10-Jan-2020", basket, **overrides))
    assert r.status_code == 400
    assert r.json() == {"Error": INVALID_REQUEST_MESSAGE}


def test_calculate_rejects_null_body(client):
    r = client.post(URL, content="null", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"Error": INVALID_REQUEST_MESSAGE}


def test_calculate_invalid_date(client, seeded_repositories):
    basket = [{"ProductId": "PRD01", "UnitPrice": "1.00", "Quantity": "1"}]
    r = client.post(URL, json=_payload("2020-01-10", basket))
    assert r.status_code == 400
    assert r.json() == {"Error": INVALID_DATE_MESSAGE}


def test_calculate_storage_failure_is_500(client, monkeypatch):
    def _down():
        raise RuntimeError("connection reset")
    monkeypatch.setattr("reward.catalog.repository.list_product_rows", _down)

    basket = [{"ProductId": "PRD01", "UnitPrice": "1.00", "Quantity": "1"}]
    r = client.post(URL, json=_payload("10-Jan-2020", basket))
    assert r.status_code == 500
    assert r.json() == {"detail": INTERNAL_ERROR_MESSAGE}
    assert "connection reset" not in r.text
