import io

import pdfplumber
from pdfminer.pdfdocument import PDFPasswordIncorrect

from app.extraction.base import BasePdfExtractor
from app.extraction.exceptions import PdfExtractionError


class PdfPlumberAdapter(BasePdfExtractor):
    """Extracts text from PDF using pdfplumber.

    Encrypted documents that need a user password are reported as password
    protected rather than as a generic parse failure.
    """

    def extract(self, data: bytes) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            if _is_password_error(exc):
                raise PdfExtractionError("PDF is password protected") from exc
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        return "\n".join(pages).strip()


def _is_password_error(exc: BaseException) -> bool:
    # pdfplumber may wrap pdfminer errors, keeping the original as an argument or cause
    candidates = [exc, exc.__cause__, exc.__context__, *exc.args]
    return any(isinstance(c, PDFPasswordIncorrect) for c in candidates)
