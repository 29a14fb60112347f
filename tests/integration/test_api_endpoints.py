from fastapi.testclient import TestClient
import pytest

from customer_sync.api.handlers.deps import ApiDeps
from customer_sync.api.http_app import build_app
from customer_sync.domain.errors import DomainInvariantError
from customer_sync.domain.models import CreateCustomerCommand, Customer
from customer_sync.repositories.stub import InMemoryCustomerRepository


@pytest.mark.integration
def test_stub_service_lists_created_customers_in_insertion_order() -> None:
    app = build_app(run_id="integration-api")

    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "ok"}
        assert client.get("/api/customers").json() == []

        first = client.post(
            "/api/customers",
            json={"firstName": "Jane", "lastName": "Doe", "email": "j@d.com"},
        )
        second = client.post(
            "/api/customers",
            json={"firstName": "Wile", "lastName": "Coyote", "email": "w@acme.com", "businessName": "Acme"},
        )
        listed = client.get("/api/customers")

    assert first.status_code == 201
    assert first.json() == {"firstName": "Jane", "lastName": "Doe", "email": "j@d.com"}
    assert second.status_code == 201
    assert listed.json() == [
        {"firstName": "Jane", "lastName": "Doe", "email": "j@d.com"},
        {"firstName": "Wile", "lastName": "Coyote", "email": "w@acme.com", "businessName": "Acme"},
    ]


@pytest.mark.integration
def test_stub_service_rejects_duplicates_and_invalid_bodies_with_api_errors() -> None:
    app = build_app(run_id="integration-api-errors")
    body = {"firstName": "Jane", "lastName": "Doe", "email": "j@d.com"}

    with TestClient(app) as client:
        client.post("/api/customers", json=body)
        duplicate = client.post("/api/customers", json=body)
        invalid = client.post("/api/customers", json={"firstName": " ", "lastName": "Doe", "email": "nope"})
        not_an_object = client.post("/api/customers", json=["Jane"])

    assert duplicate.status_code == 409
    assert duplicate.json()["code"] == "duplicate_email"
    assert invalid.status_code == 422
    assert invalid.json() == {"code": "validation_error", "message": "invalid fields: first_name, email"}
    assert not_an_object.status_code == 422
    assert not_an_object.json()["code"] == "validation_error"


@pytest.mark.integration
def test_only_duplicate_customers_map_to_conflict() -> None:
    class _BrokenRepository(InMemoryCustomerRepository):
        async def create_customer(self, command: CreateCustomerCommand) -> Customer:
            raise DomainInvariantError(f"store is read-only, rejected {command.email}")

    app = build_app(run_id="integration-api-invariant", api_deps=ApiDeps(repository=_BrokenRepository()))

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.post("/api/customers", json={"firstName": "Jane", "lastName": "Doe", "email": "j@d.com"})

    assert response.status_code == 500
