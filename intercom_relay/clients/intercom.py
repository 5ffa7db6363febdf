"""Authenticated HTTP client for the Intercom REST API.

The client holds no business logic: it attaches the version and bearer
headers, performs a single POST and reports the outcome. Failures are raised
as :class:`IntercomError` carrying whatever status and body Intercom returned
so callers can relay them unchanged.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx
from httpx import HTTPStatusError, RequestError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.intercom.io"
DEFAULT_VERSION = "2.9"


@dataclass(frozen=True)
class IntercomConfig:
    access_token: str
    base_url: str = DEFAULT_BASE_URL
    version: str = DEFAULT_VERSION
    timeout: float | None = None

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Intercom-Version": self.version,
            "Authorization": f"Bearer {self.access_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }


@dataclass(frozen=True)
class IntercomResponse:
    status_code: int
    body: Any


class IntercomError(RuntimeError):
    """Raised when Intercom answers with 4xx/5xx or cannot be reached.

    ``status_code`` and ``body`` are ``None`` when no response was received.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class IntercomClient:
    def __init__(
        self,
        config: IntercomConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config
        self._http_client = httpx.AsyncClient(
            base_url=config.base_url,
            headers=config.headers,
            timeout=httpx.Timeout(config.timeout),
            transport=transport,
        )

    async def __aenter__(self) -> IntercomClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def post(self, path: str, payload: dict[str, Any]) -> IntercomResponse:
        try:
            response = await self._http_client.post(path, json=payload)
            response.raise_for_status()
        except HTTPStatusError as exc:
            body = _parse_body(exc.response)
            logger.error(
                "Intercom returned HTTP %s for POST %s: %s",
                exc.response.status_code,
                path,
                body,
            )
            raise IntercomError(
                f"Intercom returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
                body=body,
            ) from exc
        except RequestError as exc:
            logger.error("Network error calling Intercom POST %s: %s", path, exc)
            raise IntercomError(f"Could not reach Intercom: {exc}") from exc

        return IntercomResponse(status_code=response.status_code, body=_parse_body(response))

    async def create_ticket(self, payload: dict[str, Any]) -> IntercomResponse:
        return await self.post("/tickets", payload)

    async def create_ticket_type(self, payload: dict[str, Any]) -> IntercomResponse:
        return await self.post("/ticket_types", payload)

    async def create_ticket_type_attribute(
        self, type_id: str, payload: dict[str, Any]
    ) -> IntercomResponse:
        return await self.post(f"/ticket_types/{quote(type_id, safe='')}/attributes", payload)
