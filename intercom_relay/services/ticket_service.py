import logging
from typing import Any

from fastapi import status

from intercom_relay.clients.intercom import IntercomClient, IntercomError
from intercom_relay.core.errors import AppError
from intercom_relay.models.schemas.ticket import TicketCreateRequest

logger = logging.getLogger(__name__)


def build_ticket_payload(email: str, ticket_type_id: str) -> dict[str, Any]:
    return {
        "contacts": [{"email": email}],
        "ticket_type_id": ticket_type_id,
    }


def relay_intercom_error(exc: IntercomError, fallback: str) -> AppError:
    """Map an Intercom failure onto the status and body returned to the caller."""
    status_code = exc.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR
    # Empty objects and arrays are relayed; other falsy bodies get the fallback.
    error = exc.body if exc.body or isinstance(exc.body, (dict, list)) else fallback
    return AppError(status_code=status_code, error=error)


class TicketService:
    def __init__(self, client: IntercomClient, ticket_type_id: str) -> None:
        self.client = client
        self.ticket_type_id = ticket_type_id

    async def create_ticket(self, payload: TicketCreateRequest) -> Any:
        logger.info("Received ticket creation request: %s", payload.model_dump(exclude_none=True))
        if not payload.email:
            logger.info("Email is required but not provided")
            raise AppError(status_code=status.HTTP_400_BAD_REQUEST, error="Email is required")

        ticket_payload = build_ticket_payload(payload.email, self.ticket_type_id)
        logger.info("Sending request to Intercom: %s", ticket_payload)
        try:
            response = await self.client.create_ticket(ticket_payload)
        except IntercomError as exc:
            logger.error("Error creating ticket: %s", exc.body if exc.body is not None else exc)
            raise relay_intercom_error(exc, "Failed to create ticket") from exc

        logger.info("Received response from Intercom: %s", response.body)
        return response.body
