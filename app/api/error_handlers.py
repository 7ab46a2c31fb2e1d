# app/api/error_handlers.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.exceptions import AppError
from app.utils.logging import get_logger

logger = get_logger(__name__)


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=int(exc.status_code), content=exc.to_dict())


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    message = f"{field}: {first.get('msg', 'invalid value')}" if field else first.get("msg", "Invalid request")
    return JSONResponse(status_code=422, content={"status": 422, "message": message})


async def unhandled_error_handler(request: Request, exc: Exception):
    #szczegoly tylko w logu, klient dostaje ogolny komunikat
    logger.exception(f"Nieobsluzony blad {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"status": 500, "message": "Internal Server Error"})


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
