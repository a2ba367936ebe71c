from dataclasses import asdict
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.database.models import DocumentRecord, FileType, ProcessingStatus
from app.summarization.models import Severity, Summary


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PartySchema(CamelModel):
    name: str
    role: str


class DateItemSchema(CamelModel):
    event: str
    date: str


class TermSchema(CamelModel):
    title: str
    description: str


class RiskSchema(CamelModel):
    title: str
    description: str
    severity: Severity


class SummarySchema(CamelModel):
    parties: list[PartySchema]
    obligations: list[str]
    dates: list[DateItemSchema]
    terms: list[TermSchema]
    risks: list[RiskSchema]
    raw: str
    degraded: bool = False

    @classmethod
    def from_summary(cls, summary: Summary) -> "SummarySchema":
        return cls.model_validate(asdict(summary))


class DocumentCreatedResponse(CamelModel):
    """Returned by the upload endpoint before processing starts."""

    id: int
    file_name: str
    file_size: int
    file_type: FileType
    uploaded_at: datetime

    @classmethod
    def from_record(cls, document: DocumentRecord) -> "DocumentCreatedResponse":
        return cls(
            id=document.id,
            file_name=document.file_name,
            file_size=document.file_size,
            file_type=document.file_type,
            uploaded_at=document.uploaded_at,
        )


class DocumentListItem(DocumentCreatedResponse):
    processed_at: datetime | None
    is_processed: bool

    @classmethod
    def from_record(cls, document: DocumentRecord) -> "DocumentListItem":
        return cls(
            id=document.id,
            file_name=document.file_name,
            file_size=document.file_size,
            file_type=document.file_type,
            uploaded_at=document.uploaded_at,
            processed_at=document.processed_at,
            is_processed=document.is_processed,
        )


class DocumentDetailResponse(DocumentListItem):
    status: ProcessingStatus
    summary: SummarySchema | None
    processing_error: str | None

    @classmethod
    def from_record(cls, document: DocumentRecord) -> "DocumentDetailResponse":
        return cls(
            id=document.id,
            file_name=document.file_name,
            file_size=document.file_size,
            file_type=document.file_type,
            uploaded_at=document.uploaded_at,
            processed_at=document.processed_at,
            is_processed=document.is_processed,
            status=document.status,
            summary=(
                SummarySchema.from_summary(document.summary)
                if document.summary is not None
                else None
            ),
            processing_error=document.processing_error,
        )


class ErrorResponse(BaseModel):
    message: str
