# routers/errors.py
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.errors import ServiceError, StatusCode


def error_response(code: StatusCode, message: str) -> JSONResponse:
    return JSONResponse(status_code=code.http_status,
                        content={"code": code.value, "message": message})


async def service_error_handler(request: Request, exc: ServiceError):
    return error_response(exc.code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
    return error_response(StatusCode.INVALID_ARGUMENT, "invalid request-> " + details)


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
