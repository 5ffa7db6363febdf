import json
from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Annotated, Any, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from intercom_relay.clients.intercom import IntercomClient
from intercom_relay.core.config import Settings, get_settings

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def get_intercom_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncIterator[IntercomClient]:
    async with IntercomClient(settings.intercom_config) as client:
        yield client


async def read_request_data(request: Request) -> Any:
    """Return the request body as JSON or form fields; an empty body reads as ``{}``."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return dict(form.items())

    raw_body = await request.body()
    if not raw_body.strip():
        return {}
    try:
        data = json.loads(raw_body)
    except ValueError as exc:
        raise RequestValidationError(
            [
                {
                    "type": "json_invalid",
                    "loc": ("body",),
                    "msg": "JSON decode error",
                    "input": {},
                    "ctx": {"error": str(exc)},
                }
            ]
        ) from exc
    return {} if data is None else data


def request_body(model: type[ModelT]) -> Callable[[Request], Awaitable[ModelT]]:
    async def dependency(request: Request) -> ModelT:
        data = await read_request_data(request)
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            raise RequestValidationError(
                [
                    {**error, "loc": ("body", *error["loc"])}
                    for error in exc.errors(include_url=False)
                ]
            ) from exc

    return dependency
