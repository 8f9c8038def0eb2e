from typing import ClassVar

from app.config.settings import Settings
from app.logging.logger import Log
from app.summarization.client_base import BaseSummarizationClient
from app.summarization.huggingface_client_adapter import HuggingFaceClientAdapter
from app.summarization.openai_client_adapter import OpenAIClientAdapter
from app.summarization.summarizer import Summarizer


class SummarizerFactory:
    """Creates the summarizer with the configured provider client."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("huggingface", "openai", "openai_compatible")
    # chat providers do not serve the per-role summarization model
    MODEL_REQUIRED: ClassVar[tuple[str, ...]] = ("openai", "openai_compatible")

    @classmethod
    def create(cls, settings: Settings) -> Summarizer:
        """Create a summarizer from application settings.

        An empty API key is a valid configuration: the summarizer then runs
        in fallback-only mode.

        Raises:
            ValueError: on an unknown provider, or a chat provider configured
                without ``summarization_model`` or a required base URL.
        """
        provider = settings.summarization_provider.lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown summarization provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        if not settings.summarization_api_key:
            Log.warning("Summarization API key not found. Using extractive fallback summaries.")
            return Summarizer(client=None)

        model = settings.summarization_model.strip() or None
        if provider in cls.MODEL_REQUIRED and model is None:
            raise ValueError(
                f"summarization_model is required for summarization_provider={provider}"
            )
        return Summarizer(client=cls._create_client(provider, settings), model=model)

    @classmethod
    def _create_client(cls, provider: str, settings: Settings) -> BaseSummarizationClient:
        base_url = settings.summarization_base_url.strip() or None
        if provider == "huggingface":
            return HuggingFaceClientAdapter(
                api_key=settings.summarization_api_key,
                timeout_seconds=settings.summarization_timeout_seconds,
                base_url=base_url,
            )
        if provider == "openai_compatible" and base_url is None:
            raise ValueError(
                "summarization_base_url is required for summarization_provider=openai_compatible"
            )
        return OpenAIClientAdapter(
            api_key=settings.summarization_api_key,
            timeout_seconds=settings.summarization_timeout_seconds,
            base_url=base_url,
        )
