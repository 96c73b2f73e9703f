"""Groq API provider."""

from petai.llm.base import ProviderType
from petai.llm.openai_compat import OpenAICompatibleProvider

GROQ_BASE = "https://api.groq.com/openai/v1"


class GroqProvider(OpenAICompatibleProvider):
    """Groq chat completions (OpenAI-compatible)."""

    provider_type = ProviderType.GROQ
    base_url = GROQ_BASE
