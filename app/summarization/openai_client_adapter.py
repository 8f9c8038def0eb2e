import httpx
import openai

from app.summarization.client_base import BaseSummarizationClient
from app.summarization.exceptions import SummarizationError, SummarizationNetworkError


class OpenAIClientAdapter(BaseSummarizationClient):
    """Summarization client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def invoke(
        self,
        *,
        model: str,
        text: str,
        max_length: int,
        instruction: str = "",
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=0.0,
                max_tokens=max_length,
                messages=[
                    {"role": "system", "content": instruction},
                    {"role": "user", "content": text},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SummarizationNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise SummarizationNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise SummarizationError("AI returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise SummarizationError("AI returned empty response")
        return content

    def close(self) -> None:
        self._client.close()
