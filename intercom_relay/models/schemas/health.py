from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field


class UpstreamHealth(BaseModel):
    base_url: str
    version: str
    credential_configured: bool


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    service: str = "intercom-relay"
    environment: str
    upstream: UpstreamHealth
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
