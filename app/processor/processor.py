from pathlib import Path

from app.config.settings import Settings
from app.database.repositories.base import DocumentRepository
from app.extraction.exceptions import ExtractionError
from app.extraction.text_extractor import TextExtractor, build_text_extractor
from app.logging.logger import Log
from app.processor.file_store import UploadFileStore
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import (
    ExtractTextStep,
    LoadDocumentStep,
    MarkFailedStep,
    PersistExtractedStep,
    PersistSummaryStep,
    SummarizeStep,
)
from app.summarization.base import BaseSummarizer
from app.summarization.factory import SummarizerFactory


def describe_failure(exc: Exception) -> str:
    """Human-readable processing error stored on the document."""
    if isinstance(exc, ExtractionError):
        return f"Failed to extract text from document: {exc}"
    return f"Failed to process document: {exc}"


class Processor:
    """Orchestrates one pipeline run per uploaded document.

    Pipeline: load -> extract -> persist text -> summarize -> persist summary.
    Each step runs at most once; there are no retries.
    """

    def __init__(
        self,
        steps: list[PipelineStep],
        failed_step: PipelineStep,
        file_store: UploadFileStore,
    ) -> None:
        self._steps = steps
        self._failed_step = failed_step
        self._file_store = file_store

    async def process(self, document_id: int, file_path: Path) -> PipelineContext:
        """Run the pipeline for a document, then remove its uploaded file.

        On a step failure the error is recorded on the document and re-raised.
        """
        Log.info(f"Started processing document {document_id} at {file_path}")
        context = PipelineContext(document_id=document_id, file_path=Path(file_path))
        try:
            for step in self._steps:
                context = await step.run(context)
                if context.aborted:
                    return context
        except Exception as exc:
            context.error_message = describe_failure(exc)
            await self._failed_step.run(context)
            raise
        finally:
            await self._file_store.remove(context.file_path)
        Log.info(f"Completed processing document {document_id}")
        return context


def build_processor(
    settings: Settings,
    doc_repo: DocumentRepository,
    file_store: UploadFileStore,
    text_extractor: TextExtractor | None = None,
    summarizer: BaseSummarizer | None = None,
) -> Processor:
    """Build a Processor with all required adapters."""
    if text_extractor is None:
        text_extractor = build_text_extractor(settings)
    if summarizer is None:
        summarizer = SummarizerFactory.create(settings)
    steps: list[PipelineStep] = [
        LoadDocumentStep(doc_repo=doc_repo),
        ExtractTextStep(text_extractor=text_extractor),
        PersistExtractedStep(doc_repo=doc_repo),
        SummarizeStep(summarizer=summarizer),
        PersistSummaryStep(doc_repo=doc_repo),
    ]
    return Processor(
        steps=steps,
        failed_step=MarkFailedStep(doc_repo=doc_repo),
        file_store=file_store,
    )
