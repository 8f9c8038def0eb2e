"""Best-effort PDF text scraper.

Scans the raw bytes for ``/Length ... stream ... endstream`` regions and keeps
their printable characters. Compressed or filtered streams come out as noise
and PDFs without stream markers fall back to a placeholder, so this is a
heuristic, not a content-stream decoder.
"""

import re
from typing import ClassVar

from app.extraction.base import MAX_EXTRACTED_CHARS, BaseTextExtractor, pdf_placeholder
from app.extraction.exceptions import ExtractionError


class StreamScanAdapter(BaseTextExtractor):
    """Extracts text from PDF bytes by scraping raw stream regions."""

    _STREAM_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"/Length\s+(\d+).*?stream\s*(.*?)\s*endstream",
        re.DOTALL,
    )
    _NON_PRINTABLE_RE: ClassVar[re.Pattern[str]] = re.compile(r"[^\x20-\x7E]")

    def extract(self, data: bytes, file_name: str) -> str:
        try:
            text = bytes(data).decode("utf-8", errors="replace")
        except (TypeError, ValueError) as exc:
            raise ExtractionError("Failed to extract text from PDF") from exc

        regions = [
            self._NON_PRINTABLE_RE.sub(" ", match.group(2)).strip()
            for match in self._STREAM_RE.finditer(text)
        ]
        if not regions:
            return pdf_placeholder(file_name)
        return " ".join(regions)[:MAX_EXTRACTED_CHARS]
