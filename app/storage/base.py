from abc import ABC, abstractmethod


class BaseObjectStorage(ABC):
    """Contract for binary object stores addressed by bucket and path."""

    @abstractmethod
    def put(self, bucket: str, path: str, data: bytes) -> str:
        """Store ``data`` and return its public URL.

        Raises:
            StorageError: if the object cannot be written.
        """

    @abstractmethod
    def delete(self, bucket: str, path: str) -> None:
        """Remove an object. Missing objects are not an error.

        Raises:
            StorageError: if the object exists but cannot be removed.
        """

    @abstractmethod
    def public_url(self, bucket: str, path: str) -> str:
        """Return the URL under which the object is served."""
