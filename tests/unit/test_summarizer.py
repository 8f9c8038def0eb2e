from unittest.mock import MagicMock

import pytest

from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import SummarizationNetworkError
from app.summarization.fallback import extractive_summary
from app.summarization.models import SummarySource
from app.summarization.roles import ROLE_CODES, ROLE_CONFIGS
from app.summarization.summarizer import Summarizer, prepare_text

CONTENT = "The northern depot will close for maintenance during the first week of May."


def _make_client(return_value: str = "Provider summary.") -> MagicMock:
    client = MagicMock(spec=BaseSummarizationClient)
    client.invoke.return_value = return_value
    return client


class TestPrepareText:
    def test_collapses_whitespace(self) -> None:
        assert prepare_text("a \n\n b\tc") == "a b c"

    def test_prefixes_title(self) -> None:
        assert prepare_text("body", "memo.pdf") == "Document: memo.pdf\n\nContent: body"

    def test_truncates_long_input(self) -> None:
        text = prepare_text("x" * 5000)
        assert len(text) == 4003
        assert text.endswith("...")


class TestSummarizeWithoutProvider:
    def test_every_role_uses_fallback(self) -> None:
        summarizer = Summarizer(client=None)
        assert summarizer.provider_enabled is False
        for role_code in ROLE_CODES:
            result = summarizer.summarize(CONTENT, role_code, "memo.pdf")
            assert result.source is SummarySource.FALLBACK
            assert result.summary == extractive_summary(CONTENT)

    def test_unknown_role_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown role"):
            Summarizer(client=None).summarize(CONTENT, "JANITOR")


class TestSummarizeWithProvider:
    def test_returns_stripped_provider_summary(self) -> None:
        client = _make_client("  Provider summary.  ")
        result = Summarizer(client).summarize(CONTENT, "HR", "memo.pdf")
        assert result.summary == "Provider summary."
        assert result.source is SummarySource.PROVIDER

    def test_passes_role_settings(self) -> None:
        client = _make_client()
        Summarizer(client).summarize(CONTENT, "SAFETY", "memo.pdf")

        kwargs = client.invoke.call_args.kwargs
        assert kwargs["model"] == "facebook/bart-large-cnn"
        assert kwargs["max_length"] == 250
        assert kwargs["instruction"] == ROLE_CONFIGS["SAFETY"].prompt
        assert kwargs["text"].startswith("Document: memo.pdf\n\nContent: ")

    def test_executive_uses_longest_summary(self) -> None:
        client = _make_client()
        Summarizer(client).summarize(CONTENT, "EXECUTIVE")
        assert client.invoke.call_args.kwargs["max_length"] == 300

    def test_falls_back_on_provider_error(self) -> None:
        client = _make_client()
        client.invoke.side_effect = SummarizationNetworkError("Hugging Face API error: 503")
        result = Summarizer(client).summarize(CONTENT, "HR")
        assert result.source is SummarySource.FALLBACK
        assert result.summary == extractive_summary(CONTENT)

    def test_falls_back_on_unexpected_error(self) -> None:
        client = _make_client()
        client.invoke.side_effect = RuntimeError("boom")
        result = Summarizer(client).summarize("", "HR")
        assert result.source is SummarySource.FALLBACK

    def test_configured_model_replaces_role_model(self) -> None:
        client = _make_client()
        Summarizer(client, model="gpt-4o-mini").summarize(CONTENT, "PROCUREMENT")
        kwargs = client.invoke.call_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["max_length"] == 200


class TestClose:
    def test_closes_client(self) -> None:
        client = _make_client()
        Summarizer(client).close()
        client.close.assert_called_once()

    def test_without_client_is_noop(self) -> None:
        Summarizer(client=None).close()
