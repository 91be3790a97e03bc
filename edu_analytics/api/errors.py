# edu_analytics/api/errors.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from edu_analytics.utils.errors import DomainError


async def domain_error_handler(request: Request, exc: DomainError):
    logging.info(f"[api] {request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # cuerpo que ni siquiera es JSON válido: mismo formato que el resto de errores 400
    logging.info(f"[api] {request.method} {request.url.path} -> 400: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Requisição inválida"})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
