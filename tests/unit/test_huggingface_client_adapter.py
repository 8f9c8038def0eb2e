import json
from collections.abc import Callable

import httpx
import pytest

from app.summarization.exceptions import SummarizationError, SummarizationNetworkError
from app.summarization.huggingface_client_adapter import HuggingFaceClientAdapter


def _make_adapter(handler: Callable[[httpx.Request], httpx.Response]) -> HuggingFaceClientAdapter:
    return HuggingFaceClientAdapter(
        api_key="hf_test",
        timeout_seconds=30,
        base_url="https://hf.test/models",
        transport=httpx.MockTransport(handler),
    )


def _invoke(adapter: HuggingFaceClientAdapter) -> str:
    return adapter.invoke(model="facebook/bart-large-cnn", text="Some text", max_length=200)


class TestHuggingFaceClientAdapter:
    def test_returns_summary_text(self) -> None:
        adapter = _make_adapter(
            lambda request: httpx.Response(200, json=[{"summary_text": "Short summary."}])
        )
        assert _invoke(adapter) == "Short summary."

    def test_accepts_generated_text(self) -> None:
        adapter = _make_adapter(
            lambda request: httpx.Response(200, json=[{"generated_text": "Generated."}])
        )
        assert _invoke(adapter) == "Generated."

    def test_sends_model_url_payload_and_token(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"summary_text": "ok"}])

        _invoke(_make_adapter(handler))

        request = seen[0]
        assert str(request.url) == "https://hf.test/models/facebook/bart-large-cnn"
        assert request.headers["Authorization"] == "Bearer hf_test"
        body = json.loads(request.content)
        assert body["inputs"] == "Some text"
        assert body["parameters"] == {
            "max_length": 200,
            "min_length": 50,
            "do_sample": False,
            "early_stopping": True,
        }

    def test_raises_network_error_on_error_status(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(503, json={"error": "loading"}))
        with pytest.raises(SummarizationNetworkError, match="503"):
            _invoke(adapter)

    def test_raises_network_error_on_connection_failure(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SummarizationNetworkError, match="network error"):
            _invoke(_make_adapter(handler))

    def test_raises_on_invalid_json(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, content=b"not json"))
        with pytest.raises(SummarizationError, match="Invalid JSON"):
            _invoke(adapter)

    def test_raises_on_unexpected_shape(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, json={"error": "loading"}))
        with pytest.raises(SummarizationError, match="Unexpected response payload shape"):
            _invoke(adapter)

    def test_raises_on_empty_summary(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, json=[{"summary_text": " "}]))
        with pytest.raises(SummarizationError, match="empty summary"):
            _invoke(adapter)

    def test_close_closes_http_client(self) -> None:
        adapter = _make_adapter(lambda request: httpx.Response(200, json=[]))
        adapter.close()
        assert adapter._client.is_closed
