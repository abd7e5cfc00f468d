import logging
from datetime import timedelta

import pytest

from dependencies import get_assignment_service, get_trip_service
from exceptions import StorageUnavailableError
from models import Client, ClientTrip


REQUEST_BODY = {
    "firstName": "A",
    "lastName": "B",
    "email": "a@b.com",
    "telephone": "000",
    "pesel": "12345678901",
}


class _FailingTripLister:
    def list_trips(self, page, page_size):
        raise StorageUnavailableError("list_trips", "sqlite3.OperationalError: disk I/O error at /var/db")


class _CrashingAssignmentCoordinator:
    def assign_client_to_trip(self, trip_id, request):
        raise RuntimeError("connection pool exhausted")


@pytest.fixture
def override_service(api_client):
    """Replace a service dependency for one test."""
    from main import app

    def _override(dependency, replacement):
        app.dependency_overrides[dependency] = lambda: replacement
    return _override


class TestListTripsEndpoint:

    def test_returns_page_with_camel_case_fields(
        self, api_client, make_trip, make_country, make_client, make_assignment
    ):
        trip = make_trip(name="Alps", countries=[make_country("Austria")])
        make_assignment(make_client(first_name="Anna", last_name="Nowak"), trip)

        response = api_client.get("/api/trips", params={"page": 1, "pageSize": 5})

        assert response.status_code == 200
        body = response.json()
        assert body["pageNum"] == 1
        assert body["pageSize"] == 5
        assert body["allPages"] == 1
        assert body["trips"][0]["name"] == "Alps"
        assert body["trips"][0]["countries"] == [{"name": "Austria"}]
        assert body["trips"][0]["clients"] == [{"firstName": "Anna", "lastName": "Nowak"}]
        assert {"dateFrom", "dateTo", "maxPeople", "description"} <= body["trips"][0].keys()

    def test_defaults_to_first_page_of_ten(self, api_client, make_trip):
        for i in range(12):
            make_trip(name=f"Trip {i}", starts_in=timedelta(days=i + 1))

        body = api_client.get("/api/trips").json()

        assert body["pageNum"] == 1
        assert body["pageSize"] == 10
        assert body["allPages"] == 2
        assert len(body["trips"]) == 10

    @pytest.mark.parametrize("params", [{"page": 0}, {"pageSize": 0}, {"page": -1, "pageSize": 3}])
    def test_non_positive_pagination_is_bad_request(self, api_client, params):
        response = api_client.get("/api/trips", params=params)

        assert response.status_code == 400
        assert response.json()["detail"] == "Page and pageSize must be positive integers."

    def test_page_beyond_storage_integer_range_is_empty(self, api_client, make_trip):
        make_trip()

        response = api_client.get("/api/trips", params={"page": "10000000000000000000", "pageSize": 10})

        assert response.status_code == 200
        body = response.json()
        assert body["trips"] == []
        assert body["allPages"] == 1

    def test_page_size_beyond_storage_integer_range_lists_all(self, api_client, make_trip):
        make_trip(name="Only")

        response = api_client.get("/api/trips", params={"page": 1, "pageSize": "10000000000000000000"})

        assert response.status_code == 200
        assert [t["name"] for t in response.json()["trips"]] == ["Only"]

    def test_storage_failure_hides_details(self, api_client, override_service):
        override_service(get_trip_service, _FailingTripLister())

        response = api_client.get("/api/trips")

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


class TestDeleteClientEndpoint:

    def test_deletes_client(self, api_client, db_session, make_client):
        client_id = make_client().id_client

        response = api_client.delete(f"/api/clients/{client_id}")

        assert response.status_code == 204
        assert response.content == b""
        assert db_session.get(Client, client_id) is None

    def test_missing_client_is_not_found(self, api_client):
        response = api_client.delete("/api/clients/12345")

        assert response.status_code == 404
        assert response.json()["detail"] == "Client not found."

    def test_client_with_trips_is_bad_request(self, api_client, make_client, make_trip, make_assignment):
        client = make_client()
        make_assignment(client, make_trip())

        response = api_client.delete(f"/api/clients/{client.id_client}")

        assert response.status_code == 400
        assert response.json()["detail"] == "Client has assigned trips and cannot be deleted."


class TestAssignClientEndpoint:

    def test_assigns_new_client(self, api_client, db_session, make_trip):
        trip = make_trip(starts_in=timedelta(days=1))

        response = api_client.post(f"/api/trips/{trip.id_trip}/clients", json=REQUEST_BODY)

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Client successfully assigned to the trip."
        assert body["tripId"] == trip.id_trip
        assert body["clientCreated"] is True
        assert db_session.query(ClientTrip).count() == 1

    def test_repeated_request_is_bad_request(self, api_client, make_trip):
        trip = make_trip()
        api_client.post(f"/api/trips/{trip.id_trip}/clients", json=REQUEST_BODY)

        response = api_client.post(f"/api/trips/{trip.id_trip}/clients", json=REQUEST_BODY)

        assert response.status_code == 400
        assert response.json()["detail"] == "Client is already assigned to this trip."

    def test_started_trip_is_bad_request(self, api_client, make_trip):
        trip = make_trip(starts_in=timedelta(days=-2))

        response = api_client.post(f"/api/trips/{trip.id_trip}/clients", json=REQUEST_BODY)

        assert response.status_code == 400
        assert response.json()["detail"] == "Cannot assign to a trip that has already started."

    def test_missing_trip_is_not_found(self, api_client):
        response = api_client.post("/api/trips/999/clients", json=REQUEST_BODY)

        assert response.status_code == 404
        assert response.json()["detail"] == "Trip not found."

    def test_missing_body_field_is_rejected(self, api_client, make_trip):
        trip = make_trip()
        body = {k: v for k, v in REQUEST_BODY.items() if k != "pesel"}

        response = api_client.post(f"/api/trips/{trip.id_trip}/clients", json=body)

        assert response.status_code == 422

    def test_unexpected_error_is_generic_server_error(self, api_client, override_service):
        override_service(get_assignment_service, _CrashingAssignmentCoordinator())

        response = api_client.post("/api/trips/1/clients", json=REQUEST_BODY)

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


def test_health_check(api_client):
    response = api_client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


class TestRequestLoggingContext:

    def test_service_logs_carry_incoming_request_id(self, api_client, caplog):
        caplog.set_level(logging.INFO)

        response = api_client.get("/api/trips", headers={"X-Request-ID": "req-42"})

        assert response.headers["X-Request-ID"] == "req-42"
        records = [r for r in caplog.records if r.name == "services.trip_service"]
        assert records
        assert all(r.request_id == "req-42" for r in records)
        assert all((r.method, r.path) == ("GET", "/api/trips") for r in records)

    def test_request_id_is_generated_when_absent(self, api_client, caplog):
        caplog.set_level(logging.INFO)

        response = api_client.delete("/api/clients/12345")

        request_id = response.headers["X-Request-ID"]
        assert request_id
        records = [r for r in caplog.records if r.name == "services.client_service"]
        assert records
        assert all(r.request_id == request_id for r in records)

    def test_context_does_not_leak_between_requests(self, api_client, caplog):
        caplog.set_level(logging.INFO)

        first = api_client.get("/api/trips").headers["X-Request-ID"]
        second = api_client.get("/api/trips").headers["X-Request-ID"]

        assert first != second
        ids = {r.request_id for r in caplog.records if r.name == "services.trip_service"}
        assert ids == {first, second}
