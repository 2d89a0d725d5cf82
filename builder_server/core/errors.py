# builder_server/core/errors.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


# -------------------------------
# Error taxonomy
# -------------------------------

class ServiceError(Exception):
    """
    Base class for errors that map onto an HTTP response.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str = SERVER_ERROR_MESSAGE):
        super().__init__(SERVER_ERROR_MESSAGE)
        self.detail = detail


# -------------------------------
# Error -> response mapping
# -------------------------------

def error_response(exc: ServiceError, expose_internal: bool = False) -> JSONResponse:
    body = {"success": False, "message": exc.message}
    if isinstance(exc, InternalError):
        body["error"] = exc.detail if expose_internal else SERVER_ERROR_MESSAGE
    return JSONResponse(status_code=exc.status_code, content=body)


def register_error_handlers(app: FastAPI, expose_internal: bool = False) -> None:

    @app.exception_handler(ServiceError)
    async def handle_service_error(request: Request, exc: ServiceError):
        return error_response(exc, expose_internal)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.debug("Rejected request body on %s: %s", request.url.path, exc.errors())
        return error_response(ValidationError("Invalid request body"))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_response(InternalError(str(exc)), expose_internal)
