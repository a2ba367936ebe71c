import io

import docx

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import DocxExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts text from DOCX using python-docx.

    Body paragraphs come first, followed by table cells row by row.
    """

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            lines = [paragraph.text for paragraph in document.paragraphs]
            for table in document.tables:
                for row in table.rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        lines.append(" | ".join(cells))
            return "\n".join(line for line in lines if line.strip()).strip()
        except Exception as exc:
            raise DocxExtractionError(f"python-docx extraction failed: {exc}") from exc
