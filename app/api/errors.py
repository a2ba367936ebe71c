from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.logging.logger import Log
from app.processor.exceptions import DocumentNotFoundError, FileTooLargeError


class ApiError(Exception):
    """Base exception for errors surfaced to HTTP callers."""

    status_code = status.HTTP_400_BAD_REQUEST


class UploadValidationError(ApiError):
    """Raised when an upload is missing, empty, too large or of the wrong type."""


class InvalidDocumentIdError(ApiError):
    """Raised when a document id in the path is not an integer."""


class DocumentAccessDeniedError(ApiError):
    """Raised when a document belongs to another session."""

    status_code = status.HTTP_403_FORBIDDEN


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    Log.info(f"{request.method} {request.url.path} rejected: {exc}")
    return _message(exc.status_code, str(exc))


async def handle_not_found(request: Request, exc: Exception) -> JSONResponse:
    return _message(status.HTTP_404_NOT_FOUND, "Document not found")


async def handle_file_too_large(request: Request, exc: Exception) -> JSONResponse:
    Log.info(f"{request.method} {request.url.path} rejected: {exc}")
    return _message(status.HTTP_400_BAD_REQUEST, str(exc))


async def handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render framework validation failures as 400s in the API error shape."""
    Log.info(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    if any(_is_file_field(error.get("loc", ())) for error in exc.errors()):
        return _message(status.HTTP_400_BAD_REQUEST, "No file uploaded")
    return _message(status.HTTP_400_BAD_REQUEST, "Invalid request")


def _is_file_field(loc: tuple[object, ...] | list[object]) -> bool:
    return len(loc) >= 2 and loc[0] == "body" and loc[-1] == "file"


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    Log.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, handle_api_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation)  # type: ignore[arg-type]
    app.add_exception_handler(DocumentNotFoundError, handle_not_found)
    app.add_exception_handler(FileTooLargeError, handle_file_too_large)
    app.add_exception_handler(Exception, handle_unexpected)
