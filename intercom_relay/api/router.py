from fastapi import APIRouter

from intercom_relay.api.routes.health import router as health_router
from intercom_relay.api.routes.ticket_types import router as ticket_type_router
from intercom_relay.api.routes.tickets import router as ticket_router

api_router = APIRouter()
api_router.include_router(health_router, tags=["health"])
api_router.include_router(ticket_router, tags=["tickets"])
api_router.include_router(ticket_type_router, tags=["ticket-types"])
