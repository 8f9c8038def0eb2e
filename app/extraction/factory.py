from app.config.settings import Settings
from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.extraction.ocr_adapter import TesseractOcrAdapter
from app.extraction.pdfplumber_adapter import PdfPlumberAdapter
from app.extraction.pymupdf_adapter import PyMuPdfAdapter
from app.extraction.stream_scan_adapter import StreamScanAdapter

PDF_MEDIA_TYPE = "application/pdf"


class TextExtractorFactory:
    """Selects the text extractor for a declared media type."""

    PDF_ADAPTERS: dict[str, type[BaseTextExtractor]] = {
        "stream_scan": StreamScanAdapter,
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    def __init__(self, pdf_extractor: BaseTextExtractor, image_extractor: BaseTextExtractor) -> None:
        self._pdf_extractor = pdf_extractor
        self._image_extractor = image_extractor

    @classmethod
    def create(cls, settings: Settings) -> "TextExtractorFactory":
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.PDF_ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.PDF_ADAPTERS)}"
            )
        return cls(
            pdf_extractor=adapter_cls(),
            image_extractor=TesseractOcrAdapter(language=settings.ocr_language),
        )

    def for_media_type(self, media_type: str) -> BaseTextExtractor:
        if media_type == PDF_MEDIA_TYPE:
            return self._pdf_extractor
        if media_type.startswith("image/"):
            return self._image_extractor
        raise ExtractionError(f"No text extractor for media type '{media_type}'")
