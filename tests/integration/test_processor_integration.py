import asyncio
from pathlib import Path

import pytest

from app.config.settings import Settings
from app.database.models import FileType, ProcessingStatus
from app.database.repositories.memory_document_repository import InMemoryDocumentRepository
from app.extraction.exceptions import PdfExtractionError
from app.processor.file_store import UploadFileStore
from app.processor.processor import build_processor


def _store_upload(
    repo: InMemoryDocumentRepository,
    upload_dir: Path,
    name: str,
    data: bytes,
    file_type: FileType,
) -> tuple[int, Path]:
    upload_dir.mkdir(parents=True, exist_ok=True)
    path = upload_dir / name
    path.write_bytes(data)
    document = repo.create(
        session_id="session-1", file_name=name, file_type=file_type, file_size=len(data)
    )
    return document.id, path


@pytest.mark.integration
class TestProcessorPipeline:
    def test_pdf_is_extracted_and_summarized(
        self, test_settings: Settings, contract_pdf_bytes: bytes
    ) -> None:
        repo = InMemoryDocumentRepository()
        upload_dir = Path(test_settings.upload_dir)
        processor = build_processor(test_settings, repo, UploadFileStore(upload_dir))
        document_id, path = _store_upload(
            repo, upload_dir, "contract.pdf", contract_pdf_bytes, FileType.PDF
        )

        asyncio.run(processor.process(document_id, path))

        stored = repo.find_by_id(document_id)
        assert stored is not None
        assert stored.original_text is not None
        assert "SERVICE AGREEMENT" in stored.original_text
        assert "Payment is due within 30 days" in stored.original_text
        assert stored.summary is not None
        assert stored.summary.parties[0].name == "PARTY_A"
        assert stored.status is ProcessingStatus.SUMMARIZED
        assert not path.exists()

    def test_docx_is_extracted_and_summarized(
        self, test_settings: Settings, sample_docx_bytes: bytes
    ) -> None:
        repo = InMemoryDocumentRepository()
        upload_dir = Path(test_settings.upload_dir)
        processor = build_processor(test_settings, repo, UploadFileStore(upload_dir))
        document_id, path = _store_upload(
            repo, upload_dir, "nda.docx", sample_docx_bytes, FileType.DOCX
        )

        asyncio.run(processor.process(document_id, path))

        stored = repo.find_by_id(document_id)
        assert stored is not None
        assert stored.original_text is not None
        assert "Non-Disclosure Agreement" in stored.original_text
        assert "Term | Two years" in stored.original_text
        assert stored.is_processed is True

    def test_pymupdf_engine(self, tmp_path: Path, contract_pdf_bytes: bytes) -> None:
        settings = Settings(
            _env_file=None,
            upload_dir=str(tmp_path / "uploads"),
            summarization_provider="example",
            pdf_engine="pymupdf",
        )
        repo = InMemoryDocumentRepository()
        upload_dir = Path(settings.upload_dir)
        processor = build_processor(settings, repo, UploadFileStore(upload_dir))
        document_id, path = _store_upload(
            repo, upload_dir, "contract.pdf", contract_pdf_bytes, FileType.PDF
        )

        asyncio.run(processor.process(document_id, path))

        stored = repo.find_by_id(document_id)
        assert stored is not None
        assert stored.original_text is not None
        assert "SERVICE AGREEMENT" in stored.original_text

    def test_corrupted_pdf_marks_document_failed(self, test_settings: Settings) -> None:
        repo = InMemoryDocumentRepository()
        upload_dir = Path(test_settings.upload_dir)
        processor = build_processor(test_settings, repo, UploadFileStore(upload_dir))
        document_id, path = _store_upload(
            repo, upload_dir, "broken.pdf", b"definitely not a pdf", FileType.PDF
        )

        with pytest.raises(PdfExtractionError):
            asyncio.run(processor.process(document_id, path))

        stored = repo.find_by_id(document_id)
        assert stored is not None
        assert stored.status is ProcessingStatus.FAILED
        assert stored.summary is None
        assert not path.exists()
