"""
LLM provider interface.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ProviderType(Enum):
    GROQ = "groq"
    OPENAI = "openai"


def provider_id(provider: "ProviderType | str") -> str:
    """Normalize a provider enum or name to its identifier string."""
    if isinstance(provider, ProviderType):
        return provider.value
    return str(provider).strip().lower()


# Structured exchange analysis; its fields belong to the consumer's schema
ExchangeAnalysis = dict[str, Any]

# Caller state handed back to the backend as prompt context
PriorState = Mapping[str, Any]


@dataclass(frozen=True)
class AnalysisBrief:
    """Short analysis of a single user message."""

    summary: str
    intent: str


class ProviderError(Exception):
    """Backend failure: network, authentication or unusable response."""

    def __init__(self, message: str, provider: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code


class UnsupportedProviderError(ValueError):
    """Provider identifier is not in the supported set."""

    def __init__(self, provider: object, supported: list[str]):
        self.provider = provider
        self.supported = supported
        super().__init__(
            f"Unsupported AI provider: {provider}. Supported providers: {', '.join(supported)}"
        )


class LLMProvider(ABC):
    """Abstract LLM provider."""

    provider_type: ProviderType

    @abstractmethod
    async def analyze_user_message(
        self,
        user_message: str,
        session_history: list[str],
    ) -> AnalysisBrief:
        """
        Summarize a user message and classify its intent.

        Args:
            user_message: Message text, may be empty
            session_history: Prior turns, oldest first

        Returns:
            AnalysisBrief with summary and intent

        Raises:
            ProviderError: Backend unreachable, credential rejected or
                reply not in the expected shape
        """
        ...

    @abstractmethod
    async def analyze_exchange(
        self,
        user_request: str,
        actions: list[str],
        session_history: list[str],
        project_context: str | None = None,
        prior_state: PriorState | None = None,
    ) -> ExchangeAnalysis:
        """
        Analyze a request together with the actions taken in response.

        Args:
            user_request: The request that started the exchange
            actions: Actions performed, in order
            session_history: Prior turns, oldest first
            project_context: Optional description of the project
            prior_state: Optional state from the previous analysis

        Returns:
            Structured analysis as a JSON object

        Raises:
            ProviderError: Same conditions as analyze_user_message
        """
        ...

    @abstractmethod
    async def test_connection(self) -> bool:
        """Check if the backend is reachable and accepts the credential."""
        ...

    async def close(self) -> None:
        """Release network resources."""

    async def __aenter__(self) -> "LLMProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
