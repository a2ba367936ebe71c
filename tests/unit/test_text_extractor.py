from pathlib import Path
from unittest.mock import MagicMock

import pytest

from app.config.settings import Settings
from app.database.models import FileType
from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import (
    PdfExtractionError,
    TextExtractionError,
    UnsupportedFileTypeError,
)
from app.extraction.text_extractor import TextExtractor, build_text_extractor


def _make_extractor() -> tuple[TextExtractor, MagicMock, MagicMock]:
    pdf = MagicMock(spec=BaseTextExtractor)
    docx = MagicMock(spec=BaseTextExtractor)
    pdf.extract.return_value = "pdf text"
    docx.extract.return_value = "docx text"
    return TextExtractor({FileType.PDF: pdf, FileType.DOCX: docx}), pdf, docx


class TestDispatch:
    def test_pdf_goes_to_pdf_adapter(self, tmp_path: Path) -> None:
        extractor, pdf, docx = _make_extractor()
        path = tmp_path / "a.pdf"
        path.write_bytes(b"%PDF")
        assert extractor.extract(path, FileType.PDF) == "pdf text"
        pdf.extract.assert_called_once_with(b"%PDF")
        docx.extract.assert_not_called()

    def test_docx_goes_to_docx_adapter(self, tmp_path: Path) -> None:
        extractor, pdf, docx = _make_extractor()
        path = tmp_path / "a.docx"
        path.write_bytes(b"PK")
        assert extractor.extract(path, "docx") == "docx text"
        pdf.extract.assert_not_called()

    def test_file_type_is_case_insensitive(self, tmp_path: Path) -> None:
        extractor, _pdf, _docx = _make_extractor()
        path = tmp_path / "a.pdf"
        path.write_bytes(b"%PDF")
        assert extractor.extract(path, "PDF") == "pdf text"


class TestFailures:
    def test_unsupported_type_raises_before_reading(self, tmp_path: Path) -> None:
        extractor, _pdf, _docx = _make_extractor()
        with pytest.raises(UnsupportedFileTypeError, match="txt"):
            extractor.extract(tmp_path / "missing.txt", "txt")

    def test_missing_file_raises_extraction_error(self, tmp_path: Path) -> None:
        extractor, _pdf, _docx = _make_extractor()
        with pytest.raises(TextExtractionError, match="Failed to read"):
            extractor.extract(tmp_path / "missing.pdf", FileType.PDF)

    def test_adapter_error_propagates_with_cause(self, tmp_path: Path) -> None:
        extractor, pdf, _docx = _make_extractor()
        pdf.extract.side_effect = PdfExtractionError("corrupt")
        path = tmp_path / "a.pdf"
        path.write_bytes(b"junk")
        with pytest.raises(PdfExtractionError, match="corrupt"):
            extractor.extract(path, FileType.PDF)


class TestBuildTextExtractor:
    def test_pdf_round_trip_yields_text(self, tmp_path: Path, sample_pdf_bytes: bytes) -> None:
        extractor = build_text_extractor(Settings(_env_file=None))
        path = tmp_path / "contract.pdf"
        path.write_bytes(sample_pdf_bytes)
        assert "Hello PDF World" in extractor.extract(path, FileType.PDF)

    def test_docx_round_trip_yields_text(self, tmp_path: Path, sample_docx_bytes: bytes) -> None:
        extractor = build_text_extractor(Settings(_env_file=None))
        path = tmp_path / "nda.docx"
        path.write_bytes(sample_docx_bytes)
        assert "Non-Disclosure Agreement" in extractor.extract(path, FileType.DOCX)

    def test_disallowed_type_is_unsupported(
        self, tmp_path: Path, sample_docx_bytes: bytes
    ) -> None:
        extractor = build_text_extractor(Settings(_env_file=None, allowed_file_types=["pdf"]))
        path = tmp_path / "nda.docx"
        path.write_bytes(sample_docx_bytes)
        with pytest.raises(UnsupportedFileTypeError):
            extractor.extract(path, FileType.DOCX)
