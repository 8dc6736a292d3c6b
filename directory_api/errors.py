"""
Error kinds of the directory service and their HTTP mapping.

Every kind is recovered at the boundary and rendered as a JSON body of the
form ``{"error": ...}``. No stack traces or internals reach clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    status_code = 500

    def __init__(self, message="Internal server error"):
        super().__init__(message)
        self.message = message

    @property
    def body(self):
        return {"error": self.message}


class EmptyBody(DirectoryError):
    status_code = 400

    def __init__(self):
        super().__init__("Request body is empty.")


class ValidationFailed(DirectoryError):
    """Missing/blank required fields, or a payload that is not a JSON object."""

    status_code = 400

    def __init__(self, message, missing=None):
        super().__init__(message)
        self.missing = list(missing or [])

    @classmethod
    def missing_fields(cls, names):
        return cls(f"Missing fields: {', '.join(names)}", missing=names)


class InvalidReference(DirectoryError):
    status_code = 400

    def __init__(self, name=None):
        super().__init__("Invalid department name.")
        self.name = name


class Conflict(DirectoryError):
    status_code = 409


class PersistenceFailure(DirectoryError):
    status_code = 422

    def __init__(self, messages):
        super().__init__("; ".join(messages))
        self.messages = list(messages)

    @property
    def body(self):
        return {"error": self.messages}


class NotFound(DirectoryError):
    status_code = 404

    def __init__(self, resource_type, resource_id):
        super().__init__(f"Record not found: {resource_type} {resource_id}")
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidQuery(DirectoryError):
    """Rejected pagination or sort parameters."""

    status_code = 400


def register_error_handlers(app: FastAPI) -> None:
    """Register the directory error handlers on the FastAPI application."""

    @app.exception_handler(DirectoryError)
    async def handle_directory_error(_request: Request, exc: DirectoryError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("Directory error: %s", exc.message)
        else:
            logger.warning("%s: %s", type(exc).__name__, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.body)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})
