"""Exception handlers rendering every failure as an ErrorResponse body."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.phonebook.api.http.schemas.contact import ErrorResponse
from src.phonebook.core.exceptions import PhoneBookError


def error_response(
    status_code: int,
    message: str,
    detailed_message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        status=status_code, message=message, detailed_message=detailed_message
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
        headers=headers,
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return "; ".join(parts)


async def phonebook_error_handler(request: Request, exc: PhoneBookError) -> JSONResponse:
    return error_response(exc.status_code, exc.message, exc.detailed_message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    detail = _describe_validation_errors(exc)
    logger.bind(status_code=400).info("request.validation_error: {}", detail)
    return error_response(400, "Validation failed", detail)


async def http_error_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    return error_response(
        exc.status_code, message, message, headers=getattr(exc, "headers", None)
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PhoneBookError, phonebook_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
