# eventboard/api/errors.py
"""
HTTP error helpers shared by the routers.

Routers are the only place that turns domain errors into status codes;
internal error text is logged, never returned to the client.
"""
import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger("uvicorn.error")


def internal_error(message: str) -> HTTPException:
    """
    Log the exception currently being handled and build a generic 500.

    Must be called from inside an `except` block.
    """
    logger.exception("[api] %s", message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


def _field_name(loc) -> str:
    parts = [str(p) for p in loc if p not in ("body", "path", "query", "header")]
    return ".".join(parts) or "request"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Report request validation failures as 400 with a field -> message mapping
    (FastAPI's default is 422 with a list).
    """
    errors: dict[str, str] = {}
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"detail": "Invalid request body"},
            )
        errors.setdefault(_field_name(err.get("loc", ())), err.get("msg", "invalid value"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )
