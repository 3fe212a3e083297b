"""
End-to-end behavior of the reference API: paging, aliased sorting, errors and headers.
"""

from __future__ import annotations

import json

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rampaged.core.registration import PagedPolicyBuilder, PagedPolicyOptions, add_paged
from tests.support import ORDER_COUNT


def _pagination(response) -> dict:
    return json.loads(response.headers["X-Pagination"])


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_second_page_of_orders(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"pageNumber": 2, "pageSize": 10})

    assert response.status_code == 200
    body = response.json()
    assert [o["number"] for o in body["data"]] == [f"ORD-{i:03d}" for i in range(11, 21)]
    assert body["meta"] == {
        "totalCount": ORDER_COUNT,
        "pageSize": 10,
        "currentPage": 2,
        "totalPages": 3,
        "hasPrevious": True,
        "hasNext": True,
    }

    header = _pagination(response)
    assert header["totalCount"] == ORDER_COUNT
    assert header["previousPageLink"] == "http://testserver/api/v1/orders?pageNumber=1&pageSize=10"
    assert header["nextPageLink"] == "http://testserver/api/v1/orders?pageNumber=3&pageSize=10"


def test_soft_deleted_orders_are_not_counted(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"pageSize": 200})

    numbers = [o["number"] for o in response.json()["data"]]
    assert len(numbers) == ORDER_COUNT
    assert "ORD-999" not in numbers


def test_oversized_page_is_clamped(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"pageSize": 500})

    assert response.status_code == 200
    assert _pagination(response)["pageSize"] == 200


def test_invalid_page_number_is_rejected(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"pageNumber": 0})

    assert response.status_code == 422


def test_sort_by_customer_alias(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"sortBy": "-customer,number", "pageSize": 5})

    data = response.json()["data"]
    assert response.status_code == 200
    assert {o["customer"]["lastName"] for o in data} == {"Zeller"}
    assert [o["number"] for o in data] == ["ORD-001", "ORD-006", "ORD-011", "ORD-016", "ORD-021"]


def test_sort_by_serialized_field_name(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"sortBy": "-amountCents", "pageSize": 200})

    amounts = [o["amountCents"] for o in response.json()["data"]]
    assert amounts == sorted(amounts, reverse=True)


def test_links_carry_sort_and_filter(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"status": "paid", "sortBy": "total", "pageSize": 3})

    header = _pagination(response)
    data = response.json()["data"]
    assert {o["status"] for o in data} == {"paid"}
    assert header["totalCount"] == 9
    assert header["previousPageLink"] is None
    assert header["nextPageLink"] == (
        "http://testserver/api/v1/orders?pageNumber=2&pageSize=3&sortBy=total&status=paid"
    )


def test_unknown_sort_field_is_a_validation_error(client: TestClient) -> None:
    response = client.get("/api/v1/orders", params={"sortBy": "nonexistentField"})

    assert response.status_code == 422
    assert response.json() == {
        "error": {"code": "VALIDATION_ERROR", "message": "Invalid SortBy: nonexistentField"},
    }


def test_get_order_and_not_found(client: TestClient) -> None:
    found = client.get("/api/v1/orders/o001")
    missing = client.get("/api/v1/orders/o999")

    assert found.status_code == 200
    assert found.json()["data"]["customer"]["lastName"] == "Zeller"
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"


def test_customers_sorted_by_name_alias(client: TestClient) -> None:
    response = client.get("/api/v1/customers", params={"sortBy": "-name", "pageSize": 2})

    assert [c["lastName"] for c in response.json()["data"]] == ["Zeller", "Miller"]
    assert _pagination(response)["nextPageLink"].endswith("pageNumber=2&pageSize=2&sortBy=-name")


def test_add_paged_applies_configure_callback() -> None:
    app = FastAPI()

    def configure(options: PagedPolicyOptions) -> None:
        options.pagination_header = "X-Page-Info"

    builder = add_paged(app, configure)

    assert isinstance(builder, PagedPolicyBuilder)
    assert builder.app is app
    assert app.state.rampaged is builder.options
    assert builder.options.pagination_header == "X-Page-Info"


def test_add_paged_defaults_and_requires_app() -> None:
    assert add_paged(FastAPI()).options.pagination_header == "X-Pagination"
    with pytest.raises(ValueError):
        add_paged(None)
