# routes/errors.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from oms.models.enums import OrderErrorKind
from oms.models.errors import OrderError
from oms.utils.logging import get_logger

logger = get_logger(__name__)


ERROR_STATUS = {
    OrderErrorKind.INVALID_REQUEST: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.INVALID_PAGINATION: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.EMPTY_ORDER: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.TOO_SOON: status.HTTP_400_BAD_REQUEST,
    OrderErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    OrderErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    OrderErrorKind.PERSISTENCE_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


async def order_error_handler(request: Request, exc: OrderError) -> JSONResponse:
    return JSONResponse(
        status_code=ERROR_STATUS[exc.kind],
        content={"detail": exc.message},
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = f"Invalid request object: {_describe(exc)}"
    logger.error(f"{request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=ERROR_STATUS[OrderErrorKind.INVALID_REQUEST],
        content={"detail": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(OrderError, order_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
