from abc import ABC, abstractmethod

MAX_EXTRACTED_CHARS = 2000


def pdf_placeholder(file_name: str) -> str:
    """Text stored for a PDF whose content could not be scraped."""
    return f"PDF content from {file_name}"


class BaseTextExtractor(ABC):
    """Contract for all text extraction adapters."""

    @abstractmethod
    def extract(self, data: bytes, file_name: str) -> str:
        """Extract plain text from raw file bytes.

        Args:
            data: Raw file content.
            file_name: Original file name, used for placeholder text.

        Returns:
            Extracted text as a single string.

        Raises:
            ExtractionError: if the bytes cannot be read.
        """
