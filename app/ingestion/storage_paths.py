import time
import uuid
from pathlib import PurePosixPath

from app.ingestion.validation import ACCEPTED_MEDIA_TYPES, PDF_MEDIA_TYPE

PDF_BUCKET = "pdf-documents"
IMAGE_BUCKET = "image-documents"


def bucket_for_media_type(media_type: str) -> str:
    if media_type.startswith("image/"):
        return IMAGE_BUCKET
    return PDF_BUCKET


def file_type_for_media_type(media_type: str) -> str:
    """Value stored in documents.file_type."""
    return "pdf" if media_type == PDF_MEDIA_TYPE else "image"


def file_extension(file_name: str, media_type: str) -> str:
    suffix = PurePosixPath(file_name).suffix.lstrip(".").lower()
    if suffix:
        return suffix
    extensions = ACCEPTED_MEDIA_TYPES.get(media_type, (".bin",))
    return extensions[0].lstrip(".")


def build_storage_path(
    user_id: str,
    file_name: str,
    media_type: str,
    now_ms: int | None = None,
    token: str | None = None,
) -> str:
    """Build the object path {user_id}/{timestamp}-{token}.{ext}."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    if token is None:
        token = uuid.uuid4().hex[:12]
    return f"{user_id}/{now_ms}-{token}.{file_extension(file_name, media_type)}"
