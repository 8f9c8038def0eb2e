class IngestionError(Exception):
    """Base exception for errors that end an upload task."""


class UploadRejectedError(IngestionError):
    """Raised when a file fails the acceptance checks and no task is created."""


class StorageError(IngestionError):
    """Raised when the uploaded bytes cannot be stored."""


class PersistenceError(IngestionError):
    """Raised when the document row cannot be written."""


class InvalidTaskTransitionError(IngestionError):
    """Raised on a status change the upload task lifecycle does not allow."""
