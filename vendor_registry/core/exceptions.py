"""Application-level exceptions and FastAPI exception handlers."""


import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

class AppException(Exception):
    """Base application exception."""

    def __init__(self, message: str, status_code: int = 500, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.status_code = status_code
        self.code = code
        super().__init__(message)

class NotFoundError(AppException):
    def __init__(self, entity: str, entity_id: str | None = None):
        msg = f"{entity} not found" if not entity_id else f"{entity} '{entity_id}' not found"
        super().__init__(msg, status_code=404, code="NOT_FOUND")

class ValidationError(AppException):
    def __init__(self, message: str):
        super().__init__(message, status_code=400, code="VALIDATION_ERROR")

class StorageError(AppException):
    """Any database failure that is not a recognised constraint violation."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500, code="STORAGE_ERROR")

class AllocationError(AppException):
    """The id retry did not yield a usable id."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500, code="ID_ALLOCATION_FAILED")

# ---------------------------------------------------------------------------
# Constraint violations reported by repositories
# ---------------------------------------------------------------------------

class UniqueViolationError(AppException):
    """A uniqueness constraint rejected a write. `constraint` names the column."""

    def __init__(self, constraint: str, message: str, status_code: int, code: str):
        self.constraint = constraint
        super().__init__(message, status_code=status_code, code=code)

class EmailConflictError(UniqueViolationError):
    def __init__(
        self,
        message: str = "A vendor with this email already exists. Please use a different email address.",
    ):
        super().__init__("email", message, status_code=409, code="EMAIL_DUPLICATE")

class IdConflictError(UniqueViolationError):
    """Raised when another writer claimed the candidate id first. Retried by the service."""

    def __init__(self, entity_id: int):
        self.entity_id = entity_id
        super().__init__(
            "id", f"Id {entity_id} is already taken", status_code=500, code="ID_CONFLICT",
        )

# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

def _error_body(code: str, message: str) -> dict:
    return {"error": message, "code": code}

def register_exception_handlers(app: FastAPI) -> None:
    """Attach all custom exception handlers to the FastAPI app."""

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(exc.code, exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=_error_body("VALIDATION_ERROR", "Invalid request body"),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content=_error_body("NOT_FOUND", "Resource not found"),
        )

    @app.exception_handler(500)
    async def internal_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=_error_body("INTERNAL_ERROR", "An unexpected error occurred"),
        )
