from abc import ABC, abstractmethod


class BaseSummarizationClient(ABC):
    """Contract for provider-specific summarization clients."""

    @abstractmethod
    def invoke(
        self,
        *,
        model: str,
        text: str,
        max_length: int,
        instruction: str = "",
    ) -> str:
        """Return the provider's summary of ``text``.

        Raises:
            SummarizationError: on any provider failure.
        """

    def close(self) -> None:  # noqa: B027
        """Release the client's connections. Clients without any keep the no-op."""
