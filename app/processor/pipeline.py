from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from app.database.models import DocumentRecord
from app.processor.models import ProcessingState
from app.summarization.models import Summary


@dataclass(slots=True)
class PipelineContext:
    document_id: int
    file_path: Path
    state: ProcessingState = ProcessingState.UPLOADED
    document: DocumentRecord | None = None
    extracted_text: str = ""
    summary: Summary | None = None
    error_message: str = ""
    aborted: bool = False


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
