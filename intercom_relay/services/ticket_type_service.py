import logging
from typing import Any

from fastapi import status

from intercom_relay.clients.intercom import IntercomClient, IntercomError
from intercom_relay.core.errors import AppError
from intercom_relay.models.schemas.ticket_type import (
    LIST_DATA_TYPE,
    AttributeCreateRequest,
    TicketTypeCreateRequest,
)
from intercom_relay.services.ticket_service import relay_intercom_error

logger = logging.getLogger(__name__)


def build_ticket_type_payload(payload: TicketTypeCreateRequest) -> dict[str, Any]:
    return {
        "name": payload.name,
        "icon": payload.icon,
        "is_internal": payload.is_internal,
    }


def build_attribute_payload(payload: AttributeCreateRequest) -> dict[str, Any]:
    attribute_payload: dict[str, Any] = {
        "name": payload.name,
        "data_type": payload.data_type,
        "required_to_create": payload.required_to_create,
        "required_to_create_for_contacts": payload.required_to_create_for_contacts,
        "visible_on_create": payload.visible_on_create,
        "visible_to_contacts": payload.visible_to_contacts,
    }
    if payload.data_type == LIST_DATA_TYPE and payload.list_items:
        attribute_payload["list_items"] = payload.list_items
    return attribute_payload


class TicketTypeService:
    def __init__(self, client: IntercomClient) -> None:
        self.client = client

    async def create_ticket_type(self, payload: TicketTypeCreateRequest) -> Any:
        if not payload.name:
            raise AppError(
                status_code=status.HTTP_400_BAD_REQUEST,
                error="Ticket type name is required",
            )

        try:
            response = await self.client.create_ticket_type(build_ticket_type_payload(payload))
        except IntercomError as exc:
            logger.error(
                "Error creating ticket type: %s", exc.body if exc.body is not None else exc
            )
            raise relay_intercom_error(exc, "Failed to create ticket type") from exc
        return response.body

    async def add_attribute(self, type_id: str, payload: AttributeCreateRequest) -> Any:
        if not payload.name or not payload.data_type:
            raise AppError(
                status_code=status.HTTP_400_BAD_REQUEST,
                error="Name and data type are required",
            )

        try:
            response = await self.client.create_ticket_type_attribute(
                type_id, build_attribute_payload(payload)
            )
        except IntercomError as exc:
            logger.error("Error creating attribute: %s", exc.body if exc.body is not None else exc)
            raise relay_intercom_error(exc, "Failed to create attribute") from exc
        return response.body
