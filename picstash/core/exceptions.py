# picstash/core/exceptions.py
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class PicstashError(Exception):
    """Base error rendered as a JSON {message[, error]} body"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def to_body(self) -> dict:
        body = {"message": self.message}
        if self.error is not None:
            body["error"] = self.error
        return body


class ValidationError(PicstashError):
    """Malformed or missing input"""
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(PicstashError):
    """Duplicate record (answered with 400, not 409)"""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(PicstashError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(PicstashError):
    """Wraps persistence and remote-call failures"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


async def picstash_error_handler(request: Request, exc: PicstashError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Wrongly typed request fields answer like any other ValidationError"""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    error = ValidationError("Invalid request body.", details)
    return JSONResponse(status_code=error.status_code, content=error.to_body())
