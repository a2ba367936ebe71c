import uuid
from dataclasses import dataclass

from fastapi import Request

from app.config.settings import Settings
from app.database.repositories.base import DocumentRepository
from app.processor.file_store import UploadFileStore
from app.processor.processor import Processor
from app.worker.task_runner import BackgroundTaskRunner

SESSION_ID_KEY = "sid"


@dataclass
class AppContainer:
    """Shared services wired once per application."""

    settings: Settings
    doc_repo: DocumentRepository
    file_store: UploadFileStore
    processor: Processor
    task_runner: BackgroundTaskRunner


def get_container(request: Request) -> AppContainer:
    return request.app.state.container


def get_session_id(request: Request) -> str:
    """Return the caller's anonymous session id, issuing one on first use."""
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_ID_KEY] = session_id
    return session_id
