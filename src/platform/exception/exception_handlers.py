from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger


ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]


def _detail_response(status_code: int, detail: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail})


async def service_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """NotFound / Conflict / Domain errors carry their own status code"""
    if not isinstance(exc, CustomBaseError):
        return await unhandled_error_handler(request, exc)
    return _detail_response(exc.status_code, exc.message)


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # Entity validators (e.g. negative movie price) raise plain ValueError
    return _detail_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def request_validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    Logger.base.info(
        f'⚠️ [VALIDATION] {request.method} {request.url.path} rejected ({len(errors)} error(s))'
    )
    return _detail_response(status.HTTP_400_BAD_REQUEST, jsonable_encoder(errors))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    if not getattr(exc, '_has_logged', False):
        Logger.base.exception(f'Unhandled error on {request.method} {request.url.path}: {exc}')
    return _detail_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


EXCEPTION_HANDLERS: list[tuple[type[Exception], ExceptionHandler]] = [
    (CustomBaseError, service_error_handler),
    (ValueError, value_error_handler),
    (RequestValidationError, request_validation_error_handler),
    (Exception, unhandled_error_handler),
]


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS:
        app.add_exception_handler(exception_class, handler)
