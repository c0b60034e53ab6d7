"""Error type surfaced by the event handlers."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional, Tuple

from fastapi import Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger("errors")


class ErrorKind(Enum):
    SERVER_ERROR = "server_error"


_STATUS_BY_KIND = {
    ErrorKind.SERVER_ERROR: 500,
}


@dataclass(eq=False)
class EventServiceError(Exception):
    """Kind, client-safe message and internal detail of a failed operation.

    ``message`` is the only part a client ever sees. ``detail`` is for
    logs; the code raising the error logs it.
    """

    kind: ErrorKind
    message: str
    detail: Optional[str] = field(default=None, repr=False)

    def __str__(self) -> str:
        return self.message

    @property
    def status_code(self) -> int:
        return _STATUS_BY_KIND[self.kind]

    @classmethod
    def server_error(cls, operation: str, exc: Optional[BaseException] = None) -> "EventServiceError":
        return cls(
            kind=ErrorKind.SERVER_ERROR,
            message=f"Server Error: {operation}",
            detail=str(exc) if exc is not None else None,
        )


def _plain_text(exc: EventServiceError) -> PlainTextResponse:
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def event_service_error_handler(request: Request, exc: EventServiceError) -> PlainTextResponse:
    return _plain_text(exc)


def body_error_handler(operations: Mapping[Tuple[str, str], str]):
    """Build a RequestValidationError handler for the given (method, path) routes.

    A listed route answers with its plain-text server error, so the rejected
    input is never echoed back. Any other route gets FastAPI's default 422.
    """

    async def handler(request: Request, exc: RequestValidationError):
        operation = operations.get((request.method, request.url.path))
        if operation is None:
            return await request_validation_exception_handler(request, exc)
        logger.error(
            "%s %s rejected request body: %s",
            request.method,
            request.url.path,
            exc.errors(),
        )
        return _plain_text(EventServiceError.server_error(operation, exc))

    return handler
