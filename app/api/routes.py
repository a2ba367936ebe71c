from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from app.api.dependencies import AppContainer, get_container, get_session_id
from app.api.errors import DocumentAccessDeniedError, InvalidDocumentIdError
from app.api.schemas import (
    DocumentCreatedResponse,
    DocumentDetailResponse,
    DocumentListItem,
    ErrorResponse,
)
from app.api.uploads import save_upload, validate_upload
from app.database.models import DocumentRecord
from app.database.repositories.base import DocumentRepository
from app.logging.logger import Log
from app.processor.exceptions import DocumentNotFoundError

router = APIRouter(prefix="/documents", tags=["documents"])

_ERRORS = {
    400: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    response_model=DocumentCreatedResponse,
    responses={400: {"model": ErrorResponse}},
)
async def upload_document(
    file: UploadFile | None = File(None),
    session_id: str = Depends(get_session_id),
    container: AppContainer = Depends(get_container),
) -> DocumentCreatedResponse:
    """Accept a PDF/DOCX upload and start processing it in the background."""
    settings = container.settings
    upload, file_type = validate_upload(file, settings)
    path, size = await save_upload(upload, file_type, container.file_store, settings)

    try:
        document = container.doc_repo.create(
            session_id=session_id,
            file_name=upload.filename or "",
            file_type=file_type,
            file_size=size,
        )
    except Exception:
        await container.file_store.remove(path)
        raise
    Log.info(f"Document {document.id} uploaded: {document.file_name} ({size} bytes)")

    container.task_runner.submit(
        container.processor.process(document.id, path),
        name=f"process-document-{document.id}",
    )
    return DocumentCreatedResponse.from_record(document)


@router.get("", response_model=list[DocumentListItem])
async def list_documents(
    session_id: str = Depends(get_session_id),
    container: AppContainer = Depends(get_container),
) -> list[DocumentListItem]:
    """List the caller's documents, newest first."""
    documents = container.doc_repo.list_by_session(session_id)
    return [DocumentListItem.from_record(d) for d in documents]


@router.get("/{document_id}", response_model=DocumentDetailResponse, responses=_ERRORS)
async def get_document(
    document_id: str,
    session_id: str = Depends(get_session_id),
    container: AppContainer = Depends(get_container),
) -> DocumentDetailResponse:
    """Return one document including its summary or processing error."""
    document = _get_owned_document(container.doc_repo, document_id, session_id)
    return DocumentDetailResponse.from_record(document)


@router.delete(
    "/{document_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS,
)
async def delete_document(
    document_id: str,
    session_id: str = Depends(get_session_id),
    container: AppContainer = Depends(get_container),
) -> Response:
    """Delete one of the caller's documents."""
    document = _get_owned_document(container.doc_repo, document_id, session_id)
    container.doc_repo.delete(document.id)
    Log.info(f"Document {document.id} deleted by its session")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _get_owned_document(
    doc_repo: DocumentRepository,
    raw_id: str,
    session_id: str,
) -> DocumentRecord:
    try:
        document_id = int(raw_id)
    except ValueError as exc:
        raise InvalidDocumentIdError("Invalid document ID") from exc
    document = doc_repo.find_by_id(document_id)
    if document is None:
        raise DocumentNotFoundError(f"Document {document_id} not found")
    if document.session_id != session_id:
        raise DocumentAccessDeniedError("Unauthorized access to document")
    return document
