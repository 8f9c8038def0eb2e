from typing import Any

import httpx

from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import SummarizationError, SummarizationNetworkError

HUGGINGFACE_API_URL = "https://api-inference.huggingface.co/models"


class HuggingFaceClientAdapter(BaseSummarizationClient):
    """Summarization client for the Hugging Face inference API.

    Summarization models such as BART take no instruction text, so the
    ``instruction`` argument is not sent.
    """

    MIN_LENGTH = 50

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = (base_url or HUGGINGFACE_API_URL).rstrip("/")
        self._client = httpx.Client(
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=timeout_seconds,
            transport=transport,
        )

    def invoke(
        self,
        *,
        model: str,
        text: str,
        max_length: int,
        instruction: str = "",
    ) -> str:
        payload = {
            "inputs": text,
            "parameters": {
                "max_length": max_length,
                "min_length": self.MIN_LENGTH,
                "do_sample": False,
                "early_stopping": True,
            },
        }
        try:
            response = self._client.post(f"{self._base_url}/{model}", json=payload)
        except httpx.HTTPError as exc:
            raise SummarizationNetworkError(f"Hugging Face network error: {exc}") from exc

        if response.is_error:
            raise SummarizationNetworkError(
                f"Hugging Face API error: {response.status_code}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise SummarizationError(f"Invalid JSON response: {exc}") from exc
        return self._summary_from(body)

    def close(self) -> None:
        self._client.close()

    @staticmethod
    def _summary_from(body: Any) -> str:
        if not isinstance(body, list) or not body or not isinstance(body[0], dict):
            raise SummarizationError("Unexpected response payload shape")
        summary = body[0].get("summary_text") or body[0].get("generated_text") or ""
        if not isinstance(summary, str) or not summary.strip():
            raise SummarizationError("Provider returned an empty summary")
        return summary
