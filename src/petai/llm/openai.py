"""OpenAI API provider."""

from petai.llm.base import ProviderType
from petai.llm.openai_compat import OpenAICompatibleProvider

OPENAI_BASE = "https://api.openai.com/v1"


class OpenAIProvider(OpenAICompatibleProvider):
    """OpenAI chat completions."""

    provider_type = ProviderType.OPENAI
    base_url = OPENAI_BASE
