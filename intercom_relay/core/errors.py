import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """An error whose ``error`` payload is returned to the caller as-is.

    ``error`` is either a fixed message for local validation failures or the
    error body relayed from Intercom.
    """

    def __init__(self, status_code: int, error: Any) -> None:
        self.status_code = status_code
        self.error = error
        super().__init__(error if isinstance(error, str) else repr(error))


def error_response(*, status_code: int, error: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error})


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return error_response(status_code=exc.status_code, error=exc.error)


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        error={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"issues": jsonable_encoder(exc.errors())},
        },
    )


async def unhandled_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while serving request")
    return error_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error={
            "code": "INTERNAL_SERVER_ERROR",
            "message": "Unexpected server error.",
            "details": {"reason": str(exc)},
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
