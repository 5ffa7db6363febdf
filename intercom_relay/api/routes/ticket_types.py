from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from intercom_relay.api.dependencies import get_intercom_client, request_body
from intercom_relay.clients.intercom import IntercomClient
from intercom_relay.models.schemas.ticket_type import (
    AttributeCreateRequest,
    TicketTypeCreateRequest,
)
from intercom_relay.services.ticket_type_service import TicketTypeService

router = APIRouter(prefix="/ticket-types")


def get_ticket_type_service(
    client: Annotated[IntercomClient, Depends(get_intercom_client)],
) -> TicketTypeService:
    return TicketTypeService(client=client)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_ticket_type(
    payload: Annotated[TicketTypeCreateRequest, Depends(request_body(TicketTypeCreateRequest))],
    ticket_type_service: Annotated[TicketTypeService, Depends(get_ticket_type_service)],
) -> JSONResponse:
    ticket_type = await ticket_type_service.create_ticket_type(payload)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=ticket_type)


@router.post("/{type_id}/attributes", status_code=status.HTTP_201_CREATED)
async def add_ticket_type_attribute(
    type_id: str,
    payload: Annotated[AttributeCreateRequest, Depends(request_body(AttributeCreateRequest))],
    ticket_type_service: Annotated[TicketTypeService, Depends(get_ticket_type_service)],
) -> JSONResponse:
    attribute = await ticket_type_service.add_attribute(type_id, payload)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=attribute)
