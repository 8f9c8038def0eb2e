import pymupdf

from app.extraction.base import MAX_EXTRACTED_CHARS, BaseTextExtractor, pdf_placeholder
from app.extraction.exceptions import ExtractionError


class PyMuPdfAdapter(BaseTextExtractor):
    """Extracts text from PDF using PyMuPDF."""

    def extract(self, data: bytes, file_name: str) -> str:
        try:
            with pymupdf.open(stream=data, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise ExtractionError(f"pymupdf extraction failed: {exc}") from exc
        text = "\n".join(pages).strip()
        return text[:MAX_EXTRACTED_CHARS] if text else pdf_placeholder(file_name)
