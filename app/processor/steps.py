import asyncio
from collections.abc import Callable
from datetime import datetime

from app.database.models import utcnow
from app.database.repositories.base import DocumentRepository
from app.extraction.text_extractor import TextExtractor
from app.logging.logger import Log
from app.processor.exceptions import DocumentNotFoundError
from app.processor.models import ProcessingState
from app.processor.pipeline import PipelineContext, PipelineStep
from app.summarization.base import BaseSummarizer


def advance(context: PipelineContext, state: ProcessingState) -> None:
    if context.state.is_terminal:
        raise ValueError(
            f"Document {context.document_id} is already {context.state.value}, "
            f"cannot move to {state.value}"
        )
    Log.info(f"Document {context.document_id}: {context.state.value} -> {state.value}")
    context.state = state


class LoadDocumentStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    async def run(self, context: PipelineContext) -> PipelineContext:
        document = self._doc_repo.find_by_id(context.document_id)
        if document is None:
            Log.warning(f"Document {context.document_id} not found, aborting pipeline run")
            context.aborted = True
            return context
        context.document = document
        Log.info(
            f"Processing document {document.id}: {document.file_name} ({document.file_type})"
        )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before extraction")
        advance(context, ProcessingState.EXTRACTING)
        context.extracted_text = await asyncio.to_thread(
            self._text_extractor.extract,
            context.file_path,
            context.document.file_type,
        )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars from document {context.document_id}"
        )
        return context


class PersistExtractedStep(PipelineStep):
    def __init__(self, doc_repo: DocumentRepository) -> None:
        self._doc_repo = doc_repo

    async def run(self, context: PipelineContext) -> PipelineContext:
        context.document = self._doc_repo.update(
            context.document_id,
            original_text=context.extracted_text,
        )
        advance(context, ProcessingState.EXTRACTED)
        return context


class SummarizeStep(PipelineStep):
    def __init__(self, summarizer: BaseSummarizer) -> None:
        self._summarizer = summarizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        advance(context, ProcessingState.SUMMARIZING)
        context.summary = await asyncio.to_thread(
            self._summarizer.summarize, context.extracted_text
        )
        if context.summary.degraded:
            Log.warning(f"Document {context.document_id} received a degraded summary")
        return context


class PersistSummaryStep(PipelineStep):
    def __init__(
        self,
        doc_repo: DocumentRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._doc_repo = doc_repo
        self._clock = clock

    async def run(self, context: PipelineContext) -> PipelineContext:
        if context.summary is None:
            raise ValueError("PipelineContext.summary must be set before persist")
        context.document = self._doc_repo.update(
            context.document_id,
            summary=context.summary,
            processed_at=self._clock(),
        )
        advance(context, ProcessingState.SUMMARIZED)
        return context


class MarkFailedStep(PipelineStep):
    def __init__(
        self,
        doc_repo: DocumentRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._doc_repo = doc_repo
        self._clock = clock

    async def run(self, context: PipelineContext) -> PipelineContext:
        advance(context, ProcessingState.FAILED)
        try:
            context.document = self._doc_repo.update(
                context.document_id,
                processing_error=context.error_message,
                processed_at=self._clock(),
            )
        except DocumentNotFoundError:
            Log.warning(
                f"Document {context.document_id} was removed before its failure was recorded"
            )
            return context
        Log.error(f"Document {context.document_id} marked as failed: {context.error_message}")
        return context
