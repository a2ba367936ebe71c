from app.config.settings import Settings
from app.database.models import FileType
from app.extraction.base import BasePdfExtractor, BaseTextExtractor
from app.extraction.docx_adapter import DocxAdapter
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter

PDF_ENGINES: dict[str, type[BasePdfExtractor]] = {
    "pdfplumber": PdfPlumberAdapter,
    "pymupdf": PyMuPdfAdapter,
}


class ExtractorFactory:
    """Builds one extraction adapter per accepted file type."""

    @classmethod
    def create_adapters(cls, settings: Settings) -> dict[FileType, BaseTextExtractor]:
        """Map every file type in ``allowed_file_types`` to its adapter.

        Types left out of the settings get no adapter, so the extractor
        rejects them as unsupported.

        Raises:
            ValueError: if ``pdf_engine`` names an unknown engine.
        """
        allowed = {t.lower() for t in settings.allowed_file_types}
        adapters: dict[FileType, BaseTextExtractor] = {}
        if FileType.PDF.value in allowed:
            adapters[FileType.PDF] = cls.create_pdf_extractor(settings.pdf_engine)
        if FileType.DOCX.value in allowed:
            adapters[FileType.DOCX] = DocxAdapter()
        return adapters

    @classmethod
    def create_pdf_extractor(cls, engine: str) -> BasePdfExtractor:
        adapter_cls = PDF_ENGINES.get(engine.lower())
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(PDF_ENGINES)}"
            )
        return adapter_cls()
