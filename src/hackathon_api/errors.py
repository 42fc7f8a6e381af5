"""Error handling for the FastAPI application and the sheet store exceptions."""

import pydantic
from fastapi import Request
from fastapi import status
from fastapi.responses import JSONResponse
from loguru import logger

from hackathon_api.exceptions import AuthorizationError
from hackathon_api.exceptions import ConflictError
from hackathon_api.exceptions import NotFoundError
from hackathon_api.exceptions import SheetError
from hackathon_api.exceptions import ValidationError
from hackathon_api.monitoring.logger import log_response_info

# Explicit exports
__all__ = [
    "handle_broad_exceptions",
    "handle_pydantic_validation_errors",
    "handle_sheet_errors",
]


# fastapi docs on middlewares: https://fastapi.tiangolo.com/tutorial/middleware/
async def handle_broad_exceptions(request: Request, call_next):
    """Handle any exception that goes unhandled by a more specific exception handler."""
    try:
        return await call_next(request)
    except Exception as err:  # pylint: disable=broad-except
        error_response = {"detail": "Internal server error", "error_type": type(err).__name__}

        logger.opt(exception=err).error(
            f"Unhandled exception: {type(err).__name__}",
            http_status=500,
            http_method=request.method,
            url_path=str(request.url.path),
            error_type=type(err).__name__,
            error_message=str(err),
        )

        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response,
        )
        log_response_info(response)
        return response


# fastapi docs on error handlers: https://fastapi.tiangolo.com/tutorial/handling-errors/
async def handle_pydantic_validation_errors(request: Request, exc: pydantic.ValidationError) -> JSONResponse:
    """Handle Pydantic validation errors."""
    errors = exc.errors()
    error_response = {
        "detail": [
            {
                "msg": error["msg"],
                "input": error["input"],
            }
            for error in errors
        ]
    }

    logger.warning(
        f"Validation error: {len(errors)} validation errors",
        http_status=422,
        http_method=request.method,
        url_path=str(request.url.path),
        error_type="ValidationError",
        validation_errors=errors,
    )

    response = JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=error_response,
    )
    log_response_info(response)

    return response


async def handle_sheet_errors(request: Request, exc: SheetError) -> JSONResponse:
    """
    Convert sheet store errors into HTTP responses.

    Maps the store's error taxonomy to HTTP status codes:
    - NotFoundError -> 404 Not Found
    - ConflictError -> 409 Conflict (re-read and retry is up to the client)
    - ValidationError -> 422 Unprocessable Entity, one entry per field
    - AuthorizationError -> 403 Forbidden
    - Other SheetError -> 500 Internal Server Error

    Parameters
    ----------
    request : Request
        FastAPI request object
    exc : SheetError
        Store exception

    Returns
    -------
    JSONResponse
        HTTP response with appropriate status code and error details
    """
    error_type = type(exc).__name__

    if isinstance(exc, NotFoundError):
        http_status = status.HTTP_404_NOT_FOUND
        error_response = {"detail": str(exc), "error_type": error_type}
    elif isinstance(exc, ConflictError):
        http_status = status.HTTP_409_CONFLICT
        error_response = {
            "detail": str(exc),
            "error_type": error_type,
            "current_version": exc.actual_version,
        }
    elif isinstance(exc, ValidationError):
        http_status = status.HTTP_422_UNPROCESSABLE_CONTENT
        error_response = {
            "detail": [{"field": field, "msg": message} for field, message in sorted(exc.errors.items())],
            "error_type": error_type,
        }
    elif isinstance(exc, AuthorizationError):
        http_status = status.HTTP_403_FORBIDDEN
        error_response = {"detail": str(exc), "error_type": error_type}
    else:
        http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
        error_response = {"detail": "Sheet store error", "error_type": error_type}

    log = logger.error if http_status >= 500 else logger.warning
    log(
        f"Sheet store error: {error_type}",
        http_status=http_status,
        http_method=request.method,
        url_path=str(request.url.path),
        error_type=error_type,
        error_message=str(exc),
    )

    response = JSONResponse(status_code=http_status, content=error_response)
    log_response_info(response)
    return response
