import io

import pdfplumber

from app.extraction.base import MAX_EXTRACTED_CHARS, BaseTextExtractor, pdf_placeholder
from app.extraction.exceptions import ExtractionError


class PdfPlumberAdapter(BaseTextExtractor):
    """Extracts text from PDF using pdfplumber."""

    def extract(self, data: bytes, file_name: str) -> str:
        try:
            with pdfplumber.open(io.BytesIO(data)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise ExtractionError(f"pdfplumber extraction failed: {exc}") from exc
        text = "\n".join(pages).strip()
        return text[:MAX_EXTRACTED_CHARS] if text else pdf_placeholder(file_name)
