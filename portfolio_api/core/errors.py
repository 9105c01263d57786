"""
Error taxonomy for the query layer and the FastAPI handlers that render it.

Builder errors (`InvalidValueType`, `InvalidIdentifier`, `Empty*`,
`UnsupportedAssociation`) are raised before any store I/O. `ValidationFailed`
is raised before a statement is sent. `QueryFailed` is the only error that
happens after a round trip to the store.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    kind = "gateway_error"

    def to_content(self) -> dict[str, Any]:
        return {"type": self.kind, "detail": str(self)}


class ValidationFailed(GatewayError):
    kind = "validation_failed"

    def __init__(self, errors: Sequence[dict[str, Any]]):
        self.errors = list(errors)
        super().__init__(f"{len(self.errors)} field(s) failed validation.")

    def to_content(self) -> dict[str, Any]:
        return {"errors": self.errors}


class InvalidValueType(GatewayError, TypeError):
    kind = "invalid_value_type"


class InvalidIdentifier(GatewayError, ValueError):
    kind = "invalid_identifier"


class EmptyInsert(GatewayError, ValueError):
    kind = "empty_insert"


class EmptyUpdate(GatewayError, ValueError):
    kind = "empty_update"


class EmptyDelete(GatewayError, ValueError):
    kind = "empty_delete"


class UnsupportedAssociation(GatewayError, ValueError):
    kind = "unsupported_association"


class QueryFailed(GatewayError):
    kind = "query_failed"

    def __init__(self, detail: str, *, sqlstate: str | None = None):
        self.sqlstate = sqlstate
        super().__init__(detail)

    @classmethod
    def from_exception(cls, exc: Exception) -> "QueryFailed":
        return cls(str(exc) or exc.__class__.__name__, sqlstate=getattr(exc, "sqlstate", None))

    def to_content(self) -> dict[str, Any]:
        return {"type": self.kind, "detail": str(self), "sqlstate": self.sqlstate}


def field_error(path: str, msg: str, value: Any = None, *, location: str = "body") -> dict[str, Any]:
    return {"type": "field", "location": location, "path": path, "msg": msg, "value": value}


def _from_pydantic(err: dict[str, Any]) -> dict[str, Any]:
    loc = [str(part) for part in err.get("loc", ())]
    location = loc[0] if loc else "body"
    path = ".".join(loc[1:]) if len(loc) > 1 else location
    value = err.get("input")
    if not isinstance(value, (str, int, float, bool)):
        value = None
    return field_error(path, str(err.get("msg", "Invalid value")), value, location=location)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Render query-layer errors as JSON.

    - ValidationFailed / RequestValidationError: 400 {"errors": [...]}
    - builder errors: 400 {"type", "detail"}
    - QueryFailed: 400 {"type", "detail", "sqlstate"}
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        failed = ValidationFailed([_from_pydantic(err) for err in exc.errors()])
        return JSONResponse(status_code=failed.status_code, content=failed.to_content())

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
        if not isinstance(exc, (ValidationFailed, QueryFailed)):
            logger.info("rejected_statement path=%s kind=%s detail=%s", request.url.path, exc.kind, exc)
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())
