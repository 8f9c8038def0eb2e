import io

import pytesseract
from PIL import Image

from app.extraction.base import BaseTextExtractor
from app.extraction.exceptions import ExtractionError
from app.logging.logger import Log


class TesseractOcrAdapter(BaseTextExtractor):
    """Recognizes text in raster images with Tesseract.

    The decoded image is held open only for the duration of one recognition
    call and is closed on success and on failure.
    """

    def __init__(self, language: str = "eng") -> None:
        self._language = language

    def extract(self, data: bytes, file_name: str) -> str:
        try:
            with Image.open(io.BytesIO(data)) as image:
                text: str = pytesseract.image_to_string(image, lang=self._language)
        except Exception as exc:
            raise ExtractionError(f"Failed to extract text from image: {exc}") from exc
        Log.debug(f"OCR recognized {len(text)} chars in {file_name}")
        return text
