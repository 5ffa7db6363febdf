import json

import httpx
import respx
from fastapi import status
from fastapi.testclient import TestClient

from intercom_relay.api.routes.tickets import get_ticket_service
from intercom_relay.core.errors import AppError
from intercom_relay.main import app
from intercom_relay.models.schemas.ticket import TicketCreateRequest


class _FakeTicketService:
    def __init__(self) -> None:
        self.requests: list[TicketCreateRequest] = []

    async def create_ticket(self, payload: TicketCreateRequest) -> dict[str, str]:
        self.requests.append(payload)
        if not payload.email:
            raise AppError(status_code=status.HTTP_400_BAD_REQUEST, error="Email is required")
        return {"id": "42", "email": payload.email}


def test_create_ticket_route_uses_service(client: TestClient) -> None:
    service = _FakeTicketService()
    app.dependency_overrides[get_ticket_service] = lambda: service

    response = client.post("/api/tickets", json={"email": "a@b.com", "priority": "P2"})

    assert response.status_code == 201
    assert response.json() == {"id": "42", "email": "a@b.com"}
    assert service.requests[0].priority == "P2"


def test_create_ticket_without_body_is_rejected(
    client: TestClient, intercom_mock: respx.MockRouter
) -> None:
    route = intercom_mock.post("/tickets").respond(201, json={"id": "42"})

    response = client.post("/api/tickets")

    assert response.status_code == 400
    assert response.json() == {"error": "Email is required"}
    assert not route.called


def test_create_ticket_with_empty_email_is_rejected(
    client: TestClient, intercom_mock: respx.MockRouter
) -> None:
    route = intercom_mock.post("/tickets").respond(201, json={"id": "42"})

    response = client.post("/api/tickets", json={"email": "", "priority": "P1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Email is required"}
    assert not route.called


def test_create_ticket_end_to_end(client: TestClient, intercom_mock: respx.MockRouter) -> None:
    route = intercom_mock.post("/tickets").respond(201, json={"id": "42"})

    response = client.post(
        "/api/tickets",
        json={"email": "a@b.com", "ticketAttributes": {"priority": "P1"}, "company_size": 10},
    )

    assert response.status_code == 201
    assert response.json() == {"id": "42"}
    request = route.calls.last.request
    assert json.loads(request.content) == {
        "contacts": [{"email": "a@b.com"}],
        "ticket_type_id": "1",
    }
    assert request.headers["Authorization"] == "Bearer test-token"


def test_create_ticket_relays_intercom_error(
    client: TestClient, intercom_mock: respx.MockRouter
) -> None:
    intercom_mock.post("/tickets").respond(422, json={"errors": ["dup"]})

    response = client.post("/api/tickets", json={"email": "a@b.com"})

    assert response.status_code == 422
    assert response.json() == {"error": {"errors": ["dup"]}}


def test_create_ticket_when_intercom_unreachable(
    client: TestClient, intercom_mock: respx.MockRouter
) -> None:
    intercom_mock.post("/tickets").mock(side_effect=httpx.ConnectError)

    response = client.post("/api/tickets", json={"email": "a@b.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create ticket"}


def test_create_ticket_with_malformed_email_type(client: TestClient) -> None:
    response = client.post("/api/tickets", json={"email": 123})

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


def test_create_ticket_ignores_shape_of_unforwarded_fields(
    client: TestClient, intercom_mock: respx.MockRouter
) -> None:
    route = intercom_mock.post("/tickets").respond(201, json={"id": "43"})

    response = client.post(
        "/api/tickets",
        json={
            "email": "a@b.com",
            "priority": 1,
            "company_size": {"min": 10},
            "ticketAttributes": "P1",
        },
    )

    assert response.status_code == 201
    assert response.json() == {"id": "43"}
    assert json.loads(route.calls.last.request.content) == {
        "contacts": [{"email": "a@b.com"}],
        "ticket_type_id": "1",
    }


def test_create_ticket_from_form_post(client: TestClient, intercom_mock: respx.MockRouter) -> None:
    route = intercom_mock.post("/tickets").respond(201, json={"id": "44"})

    response = client.post("/api/tickets", data={"email": "a@b.com", "priority": "P3"})

    assert response.status_code == 201
    assert response.json() == {"id": "44"}
    assert json.loads(route.calls.last.request.content) == {
        "contacts": [{"email": "a@b.com"}],
        "ticket_type_id": "1",
    }


def test_create_ticket_with_invalid_json(client: TestClient) -> None:
    response = client.post(
        "/api/tickets",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
