class NotificationError(Exception):
    """Raised when the notification audience cannot be resolved."""
