class FanoutPersistenceError(Exception):
    """Raised when a role summary or the document severity cannot be written."""
