from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TicketCreateRequest(BaseModel):
    email: str | None = None
    # Accepted from callers but not forwarded to Intercom.
    priority: Any = None
    company_size: Any = None
    ticket_attributes: Any = Field(default=None, alias="ticketAttributes")

    model_config = ConfigDict(populate_by_name=True)
