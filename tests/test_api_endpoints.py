"""Tests for attraction, daily data and dashboard endpoints."""

from dataclasses import dataclass
from datetime import date

from fastapi.testclient import TestClient

from attraction_dashboard.api.app import create_app
from attraction_dashboard.containers import AppContainer
from attraction_dashboard.domain.dashboard import DashboardRow, SummaryTotals
from attraction_dashboard.domain.errors import StoreError
from attraction_dashboard.domain.filters import RecordFilters
from attraction_dashboard.services.dashboard import (
    DashboardRepository,
    DashboardService,
)
from tests.fakes import InMemoryStore


def test_create_and_list_attractions(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    created = client.post(
        "/api/attractions", json={"name": "  Zoo "}, headers=auth_headers
    )
    client.post("/api/attractions", json={"name": "Aquarium"}, headers=auth_headers)

    assert created.status_code == 200
    assert created.json()["name"] == "Zoo"
    listed = client.get("/api/attractions", headers=auth_headers).json()
    assert [item["name"] for item in listed] == ["Aquarium", "Zoo"]
    assert set(listed[0]) == {"id", "name", "created_at"}


def test_create_attraction_requires_name(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.post(
        "/api/attractions", json={"name": "   "}, headers=auth_headers
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Attraction name is required"}


def test_delete_attraction_with_data_is_rejected(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    store.add_record(zoo.id, date(2024, 1, 1), 10, 1)

    response = client.delete(f"/api/attractions/{zoo.id}", headers=auth_headers)

    assert response.status_code == 400
    assert "daily data" in response.json()["error"]


def test_delete_attraction(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")

    response = client.delete(f"/api/attractions/{zoo.id}", headers=auth_headers)
    missing = client.delete(f"/api/attractions/{zoo.id}", headers=auth_headers)

    assert response.status_code == 200
    assert "message" in response.json()
    assert missing.status_code == 404


def test_post_daily_data_inserts_then_updates(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    payload = {
        "attractionId": zoo.id,
        "date": "2024-01-01",
        "qrcodesDelivered": 100,
        "salesMade": 25,
    }

    inserted = client.post("/api/daily-data", json=payload, headers=auth_headers)
    payload["salesMade"] = 30
    updated = client.post("/api/daily-data", json=payload, headers=auth_headers)

    assert inserted.json() == {
        "message": "Data inserted successfully",
        "id": inserted.json()["id"],
    }
    assert updated.json()["message"] == "Data updated successfully"
    assert updated.json()["id"] == inserted.json()["id"]
    assert len(store.records) == 1


def test_post_daily_data_defaults_counts_to_zero(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")

    response = client.post(
        "/api/daily-data",
        json={"attractionId": zoo.id, "date": "2024-01-01"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    (record,) = store.records.values()
    assert (record.qrcodes_delivered, record.sales_made) == (0, 0)


def test_post_daily_data_validation(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")

    missing_date = client.post(
        "/api/daily-data", json={"attractionId": zoo.id}, headers=auth_headers
    )
    negative = client.post(
        "/api/daily-data",
        json={"attractionId": zoo.id, "date": "2024-01-01", "salesMade": -1},
        headers=auth_headers,
    )
    unknown = client.post(
        "/api/daily-data",
        json={"attractionId": 999, "date": "2024-01-01"},
        headers=auth_headers,
    )

    assert missing_date.status_code == 400
    assert negative.status_code == 400
    assert unknown.status_code == 400
    assert unknown.json() == {"error": "Attraction does not exist"}


def test_put_daily_data(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    record = store.add_record(zoo.id, date(2024, 1, 1), 10, 1)
    payload = {
        "attractionId": zoo.id,
        "date": "2024-01-02",
        "qrcodesDelivered": 20,
        "salesMade": 4,
    }

    response = client.put(
        f"/api/daily-data/{record.id}", json=payload, headers=auth_headers
    )
    missing = client.put("/api/daily-data/999", json=payload, headers=auth_headers)

    assert response.status_code == 200
    assert store.records[record.id].date == date(2024, 1, 2)
    assert missing.status_code == 404


def test_delete_daily_data(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    record = store.add_record(zoo.id, date(2024, 1, 1), 10, 1)

    response = client.delete(f"/api/daily-data/{record.id}", headers=auth_headers)
    missing = client.delete("/api/daily-data/12345", headers=auth_headers)

    assert response.status_code == 200
    assert missing.status_code == 404
    assert missing.json() == {"error": "Record not found"}


def test_dashboard_data_and_summary(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    aquarium = store.add_attraction("Aquarium")
    store.add_record(zoo.id, date(2024, 1, 1), 10, 5)
    store.add_record(zoo.id, date(2024, 1, 2), 0, 0)
    store.add_record(aquarium.id, date(2024, 1, 3), 50, 1)

    rows = client.get(
        "/api/dashboard-data",
        params={"attractionId": str(zoo.id)},
        headers=auth_headers,
    ).json()
    summary = client.get(
        "/api/summary", params={"attractionId": str(zoo.id)}, headers=auth_headers
    ).json()

    assert [row["date"] for row in rows] == ["2024-01-02", "2024-01-01"]
    assert rows[1] == {
        "id": rows[1]["id"],
        "date": "2024-01-01",
        "attraction_name": "Zoo",
        "attraction_id": zoo.id,
        "qrcodes_delivered": 10,
        "sales_made": 5,
        "conversion_rate": 50.0,
    }
    assert summary == {
        "total_days": 2,
        "total_qrcodes": 10,
        "total_sales": 5,
        "avg_conversion_rate": 50.0,
    }


def test_dashboard_all_sentinel_and_bad_filters(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    store.add_record(zoo.id, date(2024, 1, 1), 10, 5)

    everything = client.get(
        "/api/dashboard-data", params={"attractionId": "all"}, headers=auth_headers
    )
    bad_attraction = client.get(
        "/api/summary", params={"attractionId": "zoo"}, headers=auth_headers
    )
    bad_date = client.get(
        "/api/dashboard-data", params={"startDate": "yesterday"}, headers=auth_headers
    )

    assert len(everything.json()) == 1
    assert bad_attraction.status_code == 400
    assert bad_date.status_code == 400


def test_empty_date_filters_are_ignored(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")
    store.add_record(zoo.id, date(2024, 1, 1), 10, 5)
    params = {"startDate": "", "endDate": "", "attractionId": ""}

    rows = client.get("/api/dashboard-data", params=params, headers=auth_headers)
    summary = client.get("/api/summary", params=params, headers=auth_headers)

    assert rows.status_code == 200
    assert len(rows.json()) == 1
    assert summary.status_code == 200
    assert summary.json()["total_days"] == 1


def test_bad_date_filter_names_the_parameter(
    client: TestClient, auth_headers: dict[str, str]
) -> None:
    response = client.get(
        "/api/summary", params={"endDate": "2024-02-30"}, headers=auth_headers
    )

    assert response.status_code == 400
    assert "endDate" in response.json()["error"]


def test_counts_beyond_integer_range_are_rejected(
    client: TestClient, auth_headers: dict[str, str], store: InMemoryStore
) -> None:
    zoo = store.add_attraction("Zoo")

    response = client.post(
        "/api/daily-data",
        json={
            "attractionId": zoo.id,
            "date": "2024-01-01",
            "qrcodesDelivered": 10**20,
        },
        headers=auth_headers,
    )

    assert response.status_code == 400
    assert "error" in response.json()
    assert store.records == {}


@dataclass
class BrokenDashboardRepository(DashboardRepository):
    error: Exception

    def list_dashboard_rows(self, filters: RecordFilters) -> list[DashboardRow]:
        raise self.error

    def summarize_totals(self, filters: RecordFilters) -> SummaryTotals:
        raise self.error


def test_store_failure_is_a_generic_500(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    container.dashboard_service = DashboardService(
        BrokenDashboardRepository(StoreError("disk I/O error at /var/db"))
    )
    client = TestClient(create_app(container))

    response = client.get("/api/summary", headers=auth_headers)

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_unexpected_error_is_a_json_500(
    container: AppContainer, auth_headers: dict[str, str]
) -> None:
    container.dashboard_service = DashboardService(
        BrokenDashboardRepository(OverflowError("Python int too large"))
    )
    client = TestClient(create_app(container), raise_server_exceptions=False)

    response = client.get("/api/dashboard-data", headers=auth_headers)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"error": "Internal server error"}
