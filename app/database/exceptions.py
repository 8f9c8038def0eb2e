class DocumentNotFoundError(Exception):
    """Raised when a document cannot be found in the database."""
