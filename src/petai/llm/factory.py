"""Provider factory.

Maps a provider identifier to its backend class. Backend modules are imported
only when selected, so unused backends never load.
"""

import importlib

from petai.core.logging import get_logger
from petai.llm.base import LLMProvider, ProviderType, UnsupportedProviderError, provider_id
from petai.llm.config import DEFAULT_MAX_RETRIES, ProviderConfig

logger = get_logger("llm.factory")

# identifier -> "module:Class"
PROVIDER_REGISTRY: dict[str, str] = {
    ProviderType.GROQ.value: "petai.llm.groq:GroqProvider",
    ProviderType.OPENAI.value: "petai.llm.openai:OpenAIProvider",
}


def supported_providers() -> list[str]:
    """Identifiers accepted by create_provider."""
    return sorted(PROVIDER_REGISTRY)


def _load_provider_class(path: str) -> type[LLMProvider]:
    module_name, _, class_name = path.partition(":")
    module = importlib.import_module(module_name)
    return getattr(module, class_name)


def create_provider(config: ProviderConfig) -> LLMProvider:
    """Create a new provider instance for the configured backend.

    The config is not validated here; call validate_config first.

    Args:
        config: Provider configuration

    Returns:
        Fresh LLMProvider instance (no network I/O performed)

    Raises:
        UnsupportedProviderError: If config.provider is not registered
    """
    key = provider_id(config.provider)
    path = PROVIDER_REGISTRY.get(key)
    if path is None:
        raise UnsupportedProviderError(config.provider, supported_providers())

    provider_cls = _load_provider_class(path)
    max_retries = DEFAULT_MAX_RETRIES if config.max_retries is None else config.max_retries

    logger.debug(f"Creating {key} provider: model={config.model}, timeout={config.timeout}ms")
    return provider_cls(
        api_key=config.api_key,
        model=config.model,
        timeout=config.timeout,
        max_retries=max_retries,
    )
