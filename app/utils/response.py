import logging

from fastapi import HTTPException, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ApiError(HTTPException):
    """HTTPException carrying a machine-readable error code."""

    def __init__(self, status_code: int, detail: str, code: str | None = None):
        super().__init__(status_code=status_code, detail=detail)
        self.code = code


def bad_request(detail: str, code: str | None = None) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, detail, code)


def not_found(detail: str, code: str | None = None) -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, detail, code)


def conflict(detail: str, code: str | None = None) -> ApiError:
    return ApiError(status.HTTP_409_CONFLICT, detail, code)


def create_response(data=None, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Return the payload itself as the JSON body."""
    return JSONResponse(status_code=status_code, content=jsonable_encoder(data))


def error_response(message: str, status_code: int, code: str | None = None) -> JSONResponse:
    content = {"error": message}
    if code:
        content["code"] = code
    return JSONResponse(status_code=status_code, content=content)


def handle_exception(error: Exception) -> JSONResponse:
    """Coerce raised errors into the shared error structure."""
    if isinstance(error, HTTPException):
        detail = error.detail if isinstance(error.detail, str) else str(error.detail)
        return error_response(detail, error.status_code, getattr(error, "code", None))

    logger.exception("Unhandled error while processing request")
    return error_response(
        f"Internal server error: {error}",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
