class SummarizationError(Exception):
    """Raised when the summarization provider cannot produce a summary."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the provider call fails due to network/infrastructure issues."""
