"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs and maps framework
errors onto the API's status codes:

- body that is not JSON at all: 400
- path or body value of the wrong shape or type: 422
- no route for the path, or for the method on that path: 404
"""

from http import HTTPStatus
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mockapi.core.logging import logger
from mockapi.models.errors import ProblemDetail, ValidationErrorDetail

JSON_INVALID_ERROR = "json_invalid"


def _problem_response(
    problem_detail: ProblemDetail, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(
        status_code=problem_detail.status,
        content=problem_detail.model_dump(mode="json", exclude_none=True),
        headers=headers,
    )


def _is_unparseable_body(error: dict[str, Any]) -> bool:
    # An empty body is reported as the whole body missing
    if error["type"] == JSON_INVALID_ERROR:
        return True
    return error["type"] == "missing" and tuple(error["loc"]) == ("body",)


def _json_safe_input(value: Any) -> Any:
    if isinstance(value, bytes | bytearray):
        return value.decode("utf-8", errors="replace")
    return value


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException with RFC 7807 ProblemDetail response.

    Covers exceptions raised by endpoints and the router's own 404/405.
    A method that is not supported on an existing path is reported as 404,
    the same as a path that does not exist.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    status_code = exc.status_code
    headers = exc.headers
    if status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        status_code = status.HTTP_404_NOT_FOUND
        headers = None

    logger.warning(
        f"HTTPException: {status_code} - {exc.detail} "
        f"({request.method} {request.url.path})"
    )

    problem_detail = ProblemDetail(
        title=HTTPStatus(status_code).phrase,
        status=status_code,
        detail=str(exc.detail) if status_code == exc.status_code else "Not Found",
        instance=str(request.url.path),
    )

    return _problem_response(problem_detail, headers=headers)


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions with 500 Internal Server Error.

    The exception message is logged but never returned to the client.
    """
    logger.exception(
        f"Unexpected error: {type(exc).__name__} ({request.method} {request.url.path})"
    )

    problem_detail = ProblemDetail(
        title="Internal Server Error",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
        instance=str(request.url.path),
    )

    return _problem_response(problem_detail)


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors.

    A body that could not be parsed as JSON, or an empty body, yields
    400 Bad Request.
    Anything else (missing field, wrong type, non-integer path id)
    yields 422 with the field-level errors.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError raised by FastAPI.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    raw_errors = exc.errors()

    malformed = next((e for e in raw_errors if _is_unparseable_body(e)), None)
    if malformed is not None:
        logger.warning(
            f"Malformed JSON body ({request.method} {request.url.path}): "
            f"{(malformed.get('ctx') or {}).get('error', malformed['msg'])}"
        )
        problem_detail = ProblemDetail(
            title="Bad Request",
            status=status.HTTP_400_BAD_REQUEST,
            detail="Request body is not valid JSON.",
            instance=str(request.url.path),
        )
        return _problem_response(problem_detail)

    logger.warning(
        f"Validation error: {len(raw_errors)} errors "
        f"({request.method} {request.url.path})"
    )

    errors = [
        ValidationErrorDetail(
            type=error["type"],
            loc=tuple(str(loc) for loc in error["loc"]),
            msg=error["msg"],
            input=_json_safe_input(error.get("input")),
            ctx=(
                {k: str(v) for k, v in error["ctx"].items()}
                if error.get("ctx")
                else None
            ),
            url=error.get("url"),
        )
        for error in raw_errors
    ]

    problem_detail = ProblemDetail(
        title="Validation Error",
        status=422,
        detail=f"One or more validation errors occurred ({len(errors)} errors).",
        instance=str(request.url.path),
        errors=errors,
    )

    return _problem_response(problem_detail)
