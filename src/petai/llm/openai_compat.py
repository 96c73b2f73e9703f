"""Shared backend for OpenAI-compatible chat completion APIs.

Groq and OpenAI expose the same /chat/completions and /models endpoints, so
their providers differ only in base URL and identity.
"""

import asyncio
import json

import httpx

from petai.core.logging import get_logger
from petai.llm.base import (
    AnalysisBrief,
    ExchangeAnalysis,
    LLMProvider,
    PriorState,
    ProviderError,
)
from petai.llm.prompts import exchange_prompt, user_message_prompt

logger = get_logger("llm.openai_compat")

# Statuses worth another attempt
RETRYABLE_STATUS = {408, 409, 429, 500, 502, 503, 504}


class OpenAICompatibleProvider(LLMProvider):
    """Chat-completions provider over httpx."""

    base_url: str
    retry_backoff: float = 0.5  # seconds, doubled per attempt
    max_tokens: int = 512

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "",
        timeout: int = 2000,
        max_retries: int = 2,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.timeout = timeout  # milliseconds
        self.max_retries = max_retries
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        return self.provider_type.value

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout / 1000,
                transport=self._transport,
            )
        return self._client

    async def _chat(self, messages: list[dict[str, str]]) -> str:
        """Send a JSON-mode chat request and return the reply text."""
        payload = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.max_tokens,
            "temperature": 0.2,
            "response_format": {"type": "json_object"},
        }
        logger.debug(f"{self.name} request: model={self.model}, timeout={self.timeout}ms")

        attempt = 0
        error: ProviderError
        cause: Exception | None
        while True:
            try:
                response = await self.client.post("/chat/completions", json=payload)
            except httpx.TimeoutException as e:
                logger.warning(f"{self.name} request timed out after {self.timeout}ms")
                error = ProviderError(f"{self.name} request timed out after {self.timeout}ms", self.name)
                cause = e
            except httpx.TransportError as e:
                logger.warning(f"{self.name} connection error: {e}")
                error = ProviderError(f"{self.name} connection error: {e}", self.name)
                cause = e
            except httpx.RequestError as e:
                # Corrupt body, redirect loop: not transient
                logger.error(f"{self.name} request failed: {e}")
                raise ProviderError(f"{self.name} request failed: {e}", self.name) from e
            else:
                if response.status_code not in RETRYABLE_STATUS:
                    if response.is_error:
                        logger.error(f"{self.name} HTTP error: {response.status_code} - {response.text[:200]}")
                        raise ProviderError(
                            f"{self.name} HTTP error {response.status_code}: {response.text[:200]}",
                            self.name,
                            response.status_code,
                        )
                    return self._extract_content(response)

                logger.warning(f"{self.name} HTTP {response.status_code}, retryable")
                error = ProviderError(
                    f"{self.name} HTTP error {response.status_code}: {response.text[:200]}",
                    self.name,
                    response.status_code,
                )
                cause = None

            if attempt >= max(0, self.max_retries):
                raise error from cause

            await asyncio.sleep(self.retry_backoff * 2**attempt)
            attempt += 1
            logger.debug(f"{self.name} retry {attempt}/{self.max_retries}")

    def _extract_content(self, response: httpx.Response) -> str:
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ProviderError(f"{self.name} returned an unexpected response shape", self.name) from e
        if not isinstance(content, str):
            raise ProviderError(f"{self.name} returned no message content", self.name)

        usage = data.get("usage") or {}
        logger.debug(
            f"{self.name} usage: {usage.get('prompt_tokens', 0)} in, "
            f"{usage.get('completion_tokens', 0)} out"
        )
        return content

    def _parse_json_object(self, content: str) -> dict:
        text = content.strip()
        # Some models wrap JSON in a markdown fence despite JSON mode
        if text.startswith("```"):
            # Opening line may carry a language tag in any case
            first, sep, rest = text.partition("\n")
            text = rest if sep else first.lstrip("`")
            text = text.strip().removesuffix("```")
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise ProviderError(f"{self.name} reply is not valid JSON", self.name) from e
        if not isinstance(parsed, dict):
            raise ProviderError(f"{self.name} reply is not a JSON object", self.name)
        return parsed

    async def analyze_user_message(
        self,
        user_message: str,
        session_history: list[str],
    ) -> AnalysisBrief:
        content = await self._chat(user_message_prompt(user_message, session_history))
        parsed = self._parse_json_object(content)

        summary = parsed.get("summary")
        intent = parsed.get("intent")
        if not isinstance(summary, str) or not isinstance(intent, str):
            raise ProviderError(f"{self.name} reply lacks summary/intent strings", self.name)
        return AnalysisBrief(summary=summary, intent=intent)

    async def analyze_exchange(
        self,
        user_request: str,
        actions: list[str],
        session_history: list[str],
        project_context: str | None = None,
        prior_state: PriorState | None = None,
    ) -> ExchangeAnalysis:
        messages = exchange_prompt(
            user_request, actions, session_history, project_context, prior_state
        )
        content = await self._chat(messages)
        return self._parse_json_object(content)

    async def test_connection(self) -> bool:
        """Check that the API answers and accepts the key."""
        if not self.model or not self.timeout or self.timeout <= 0:
            raise ProviderError(
                f"{self.name} provider misconfigured: model={self.model!r}, timeout={self.timeout!r}",
                self.name,
            )
        if not self.api_key:
            logger.warning(f"{self.name} connection test skipped: no API key")
            return False

        try:
            response = await self.client.get("/models")
        except httpx.HTTPError as e:
            logger.warning(f"{self.name} connection test failed: {e}")
            return False

        if response.status_code != 200:
            logger.warning(f"{self.name} connection test failed: HTTP {response.status_code}")
            return False
        return True

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
