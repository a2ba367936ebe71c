import asyncio
import contextlib
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from app.api.dependencies import AppContainer
from app.api.errors import register_exception_handlers
from app.api.routes import router as documents_router
from app.config.settings import Settings
from app.database.repositories.base import DocumentRepository
from app.database.repositories.memory_document_repository import InMemoryDocumentRepository
from app.extraction.text_extractor import TextExtractor
from app.logging.logger import Log
from app.processor.file_store import UploadFileStore
from app.processor.processor import build_processor
from app.summarization.base import BaseSummarizer
from app.worker.sweeper import ExpirySweeper
from app.worker.task_runner import BackgroundTaskRunner


def create_app(
    settings: Settings | None = None,
    doc_repo: DocumentRepository | None = None,
    text_extractor: TextExtractor | None = None,
    summarizer: BaseSummarizer | None = None,
) -> FastAPI:
    """Build the FastAPI application and wire its services."""
    settings = settings or Settings()
    doc_repo = doc_repo or InMemoryDocumentRepository()
    file_store = UploadFileStore(Path(settings.upload_dir))
    container = AppContainer(
        settings=settings,
        doc_repo=doc_repo,
        file_store=file_store,
        processor=build_processor(
            settings,
            doc_repo,
            file_store,
            text_extractor=text_extractor,
            summarizer=summarizer,
        ),
        task_runner=BackgroundTaskRunner(),
    )
    sweeper = ExpirySweeper(
        doc_repo,
        interval_seconds=settings.cleanup_interval_seconds,
        max_age_hours=settings.document_expiry_hours,
    )

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        sweep_task = asyncio.create_task(sweeper.run(), name="expiry-sweeper")
        Log.info(f"Legal summarizer started (env={settings.app_env})")
        try:
            yield
        finally:
            sweep_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await sweep_task
            await container.task_runner.shutdown()
            Log.info("Legal summarizer stopped")

    app = FastAPI(title="Legal Document Summarizer", version="1.0.0", lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age_seconds,
        https_only=settings.app_env == "production",
    )
    register_exception_handlers(app)
    app.include_router(documents_router, prefix="/api")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.app_env}

    return app
