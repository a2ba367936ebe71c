from collections.abc import AsyncIterator
from pathlib import Path, PurePath

from fastapi import UploadFile

from app.api.errors import UploadValidationError
from app.config.settings import Settings
from app.database.models import FileType
from app.processor.file_store import UploadFileStore

CHUNK_SIZE = 64 * 1024


def validate_upload(
    file: UploadFile | None, settings: Settings
) -> tuple[UploadFile, FileType]:
    """Check presence, extension and declared size of an upload.

    Raises:
        UploadValidationError: if the upload is not acceptable.
    """
    if file is None or not file.filename:
        raise UploadValidationError("No file uploaded")
    extension = PurePath(file.filename).suffix.lower().lstrip(".")
    allowed = {t.lower() for t in settings.allowed_file_types} & {t.value for t in FileType}
    if extension not in allowed:
        raise UploadValidationError("Only PDF and DOCX files are allowed")
    if file.size is not None and file.size > settings.max_upload_size_bytes:
        raise UploadValidationError(_too_large_message(settings))
    return file, FileType(extension)


async def save_upload(
    file: UploadFile,
    file_type: FileType,
    file_store: UploadFileStore,
    settings: Settings,
) -> tuple[Path, int]:
    """Stream an upload into the file store and return its path and size.

    Raises:
        UploadValidationError: if the file is empty.
        FileTooLargeError: if the streamed size exceeds the limit.
    """
    path, size = await file_store.save(
        _iter_chunks(file),
        suffix=f".{file_type.value}",
        max_bytes=settings.max_upload_size_bytes,
    )
    if size == 0:
        await file_store.remove(path)
        raise UploadValidationError("Uploaded file is empty")
    return path, size


async def _iter_chunks(file: UploadFile) -> AsyncIterator[bytes]:
    while chunk := await file.read(CHUNK_SIZE):
        yield chunk


def _too_large_message(settings: Settings) -> str:
    return f"File exceeds the {settings.max_upload_size_bytes // (1024 * 1024)} MB limit"
