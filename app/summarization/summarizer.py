"""Role-aware summarizer with an extractive fallback."""

import re

from app.logging.logger import Log
from app.summarization.client_base import BaseSummarizationClient
from app.summarization.fallback import extractive_summary
from app.summarization.models import SummaryResult, SummarySource
from app.summarization.roles import get_role_config

MAX_PROVIDER_INPUT_CHARS = 4000

_WHITESPACE_RE = re.compile(r"\s+")


def prepare_text(content: str, title: str = "") -> str:
    """Collapse whitespace, prefix the title and cap the provider payload."""
    text = _WHITESPACE_RE.sub(" ", content or "").strip()
    if title:
        text = f"Document: {title}\n\nContent: {text}"
    if len(text) > MAX_PROVIDER_INPUT_CHARS:
        text = text[:MAX_PROVIDER_INPUT_CHARS] + "..."
    return text


class Summarizer:
    """Summarizes a document for one role.

    Without a client (no provider credential configured) every call uses the
    extractive fallback. Provider failures fall back once and are never
    raised to the caller. ``model`` replaces the per-role model id for
    providers that do not serve the default summarization model.
    """

    def __init__(
        self,
        client: BaseSummarizationClient | None = None,
        model: str | None = None,
    ) -> None:
        self._client = client
        self._model = model

    @property
    def provider_enabled(self) -> bool:
        return self._client is not None

    def summarize(self, content: str, role_code: str, title: str = "") -> SummaryResult:
        config = get_role_config(role_code)
        if self._client is None:
            return self._fallback(content)

        text = prepare_text(content, title)
        Log.debug(f"Summarization input for {role_code}: {len(text)} chars")
        try:
            summary = self._client.invoke(
                model=self._model or config.model,
                text=text,
                max_length=config.max_length,
                instruction=config.prompt,
            )
        except Exception as exc:
            Log.warning(f"Summarization provider failed for {role_code}, using fallback: {exc}")
            return self._fallback(content)
        return SummaryResult(summary=summary.strip(), source=SummarySource.PROVIDER)

    def close(self) -> None:
        if self._client is not None:
            self._client.close()

    @staticmethod
    def _fallback(content: str) -> SummaryResult:
        return SummaryResult(summary=extractive_summary(content), source=SummarySource.FALLBACK)
