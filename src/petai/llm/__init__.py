"""
LLM module - language model provider abstraction.

Providers:
- groq: Groq API (OpenAI-compatible)
- openai: OpenAI API

Backends are loaded by the factory only when selected.
"""

from petai.llm.base import (
    AnalysisBrief,
    ExchangeAnalysis,
    LLMProvider,
    ProviderError,
    ProviderType,
    UnsupportedProviderError,
)
from petai.llm.config import ProviderConfig, ValidationResult, create_config_from_env, validate_config
from petai.llm.factory import create_provider, supported_providers

__all__ = [
    "AnalysisBrief",
    "ExchangeAnalysis",
    "LLMProvider",
    "ProviderConfig",
    "ProviderError",
    "ProviderType",
    "UnsupportedProviderError",
    "ValidationResult",
    "create_config_from_env",
    "create_provider",
    "supported_providers",
    "validate_config",
]
