from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from intercom_relay.api.dependencies import get_intercom_client, request_body
from intercom_relay.clients.intercom import IntercomClient
from intercom_relay.core.config import Settings, get_settings
from intercom_relay.models.schemas.ticket import TicketCreateRequest
from intercom_relay.services.ticket_service import TicketService

router = APIRouter(prefix="/tickets")


def get_ticket_service(
    client: Annotated[IntercomClient, Depends(get_intercom_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TicketService:
    return TicketService(client=client, ticket_type_id=settings.ticket_type_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_ticket(
    payload: Annotated[TicketCreateRequest, Depends(request_body(TicketCreateRequest))],
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
) -> JSONResponse:
    ticket = await ticket_service.create_ticket(payload)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=ticket)
