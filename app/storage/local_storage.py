from pathlib import Path, PurePosixPath

from app.ingestion.exceptions import StorageError
from app.storage.base import BaseObjectStorage


class LocalObjectStorage(BaseObjectStorage):
    """Stores objects on the local filesystem: {root}/{bucket}/{path}."""

    def __init__(self, root: Path, public_base_url: str) -> None:
        self._root = root
        self._public_base_url = public_base_url.rstrip("/")

    def put(self, bucket: str, path: str, data: bytes) -> str:
        target = self._resolve(bucket, path)
        if target.exists():
            raise StorageError(f"Storage upload failed: {bucket}/{path} already exists")
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Storage upload failed: {exc}") from exc
        return self.public_url(bucket, path)

    def delete(self, bucket: str, path: str) -> None:
        try:
            self._resolve(bucket, path).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError(f"Storage delete failed: {exc}") from exc

    def public_url(self, bucket: str, path: str) -> str:
        return f"{self._public_base_url}/{bucket}/{path}"

    def _resolve(self, bucket: str, path: str) -> Path:
        relative = PurePosixPath(bucket, path)
        if relative.is_absolute() or ".." in relative.parts:
            raise StorageError(f"Invalid storage path: {relative}")
        return self._root.joinpath(*relative.parts)
