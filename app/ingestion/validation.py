import mimetypes
from pathlib import Path

from app.ingestion.exceptions import UploadRejectedError
from app.ingestion.models import IncomingFile

PDF_MEDIA_TYPE = "application/pdf"

# media type -> accepted extensions
ACCEPTED_MEDIA_TYPES: dict[str, tuple[str, ...]] = {
    PDF_MEDIA_TYPE: (".pdf",),
    "image/png": (".png",),
    "image/jpeg": (".jpg", ".jpeg"),
    "image/gif": (".gif",),
    "image/bmp": (".bmp",),
    "image/tiff": (".tif", ".tiff"),
    "image/webp": (".webp",),
}


def guess_media_type(path: Path) -> str:
    """Media type declared for a file on disk, from its extension."""
    suffix = path.suffix.lower()
    for media_type, extensions in ACCEPTED_MEDIA_TYPES.items():
        if suffix in extensions:
            return media_type
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def validate_upload(upload: IncomingFile, max_size_bytes: int) -> None:
    """Reject files the drop surface would not accept.

    Raises:
        UploadRejectedError: on unsupported media type, empty file or oversize file.
    """
    if upload.media_type not in ACCEPTED_MEDIA_TYPES:
        raise UploadRejectedError(
            f"{upload.name}: unsupported media type '{upload.media_type}'"
        )
    if upload.size == 0:
        raise UploadRejectedError(f"{upload.name}: file is empty")
    if upload.size > max_size_bytes:
        raise UploadRejectedError(
            f"{upload.name}: {upload.size} bytes exceeds the {max_size_bytes} byte limit"
        )
