"""
Provider configuration from environment variables.

Selection: PET_AI_PROVIDER (groq | openai, default openai)
Per provider: PET_<P>_API_KEY or <P>_API_KEY, PET_<P>_MODEL, PET_<P>_TIMEOUT
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from petai.core.logging import get_logger
from petai.llm.base import ProviderType, provider_id

logger = get_logger("llm.config")

DEFAULT_PROVIDER = ProviderType.OPENAI
DEFAULT_TIMEOUT_MS = 2000
DEFAULT_MAX_RETRIES = 2


@dataclass(frozen=True)
class ProviderEnv:
    """Environment variable names and defaults for one provider."""

    api_key_vars: tuple[str, str]  # namespaced first, generic fallback second
    model_var: str
    timeout_var: str
    default_model: str


PROVIDER_ENV: dict[ProviderType, ProviderEnv] = {
    ProviderType.GROQ: ProviderEnv(
        api_key_vars=("PET_GROQ_API_KEY", "GROQ_API_KEY"),
        model_var="PET_GROQ_MODEL",
        timeout_var="PET_GROQ_TIMEOUT",
        default_model="openai/gpt-oss-20b",
    ),
    ProviderType.OPENAI: ProviderEnv(
        api_key_vars=("PET_OPENAI_API_KEY", "OPENAI_API_KEY"),
        model_var="PET_OPENAI_MODEL",
        timeout_var="PET_OPENAI_TIMEOUT",
        default_model="gpt-3.5-turbo",
    ),
}


@dataclass(frozen=True)
class ProviderConfig:
    """Backend selection and connection settings."""

    provider: str
    api_key: str | None
    model: str
    timeout: int  # milliseconds
    max_retries: int | None = DEFAULT_MAX_RETRIES


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: str | None = None


def _parse_provider(raw: str | None) -> ProviderType:
    value = (raw or "").strip().lower()
    if not value:
        return DEFAULT_PROVIDER
    try:
        return ProviderType(value)
    except ValueError:
        logger.debug(f"Unknown PET_AI_PROVIDER '{raw}', using {DEFAULT_PROVIDER.value}")
        return DEFAULT_PROVIDER


def _parse_timeout(raw: str | None, var_name: str) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT_MS
    try:
        return int(raw.strip(), 10)
    except ValueError:
        logger.debug(f"{var_name}={raw!r} is not an integer, using {DEFAULT_TIMEOUT_MS}ms")
        return DEFAULT_TIMEOUT_MS


def create_config_from_env(
    environ: Mapping[str, str] | None = None,
    *,
    max_retries: int | None = None,
) -> ProviderConfig:
    """Resolve provider configuration from an environment snapshot.

    Args:
        environ: Variables to read (defaults to os.environ)
        max_retries: Override for the default retry count

    Returns:
        ProviderConfig; not validated
    """
    env = os.environ if environ is None else environ

    provider = _parse_provider(env.get("PET_AI_PROVIDER"))
    names = PROVIDER_ENV[provider]

    namespaced, generic = names.api_key_vars
    api_key = env.get(namespaced) or env.get(generic) or None
    model = env.get(names.model_var) or names.default_model
    timeout = _parse_timeout(env.get(names.timeout_var), names.timeout_var)

    config = ProviderConfig(
        provider=provider.value,
        api_key=api_key,
        model=model,
        timeout=timeout,
        max_retries=DEFAULT_MAX_RETRIES if max_retries is None else max_retries,
    )
    logger.debug(
        f"Resolved config: provider={config.provider}, model={config.model}, "
        f"timeout={config.timeout}ms, api_key={'set' if api_key else 'missing'}"
    )
    return config


def _api_key_hint(provider: str) -> str:
    try:
        names = PROVIDER_ENV[ProviderType(provider_id(provider))]
    except ValueError:
        names = PROVIDER_ENV[DEFAULT_PROVIDER]
    return " or ".join(names.api_key_vars)


def validate_config(config: ProviderConfig) -> ValidationResult:
    """Check that a configuration is complete.

    Checks run in order (api_key, model, timeout); the first failure wins.
    """
    if not config.api_key:
        return ValidationResult(
            is_valid=False,
            error=f"API key not found. Please set {_api_key_hint(config.provider)} environment variable.",
        )

    if not config.model:
        return ValidationResult(
            is_valid=False,
            error=f"Model not specified for {provider_id(config.provider)} provider.",
        )

    if not config.timeout or config.timeout <= 0:
        return ValidationResult(is_valid=False, error="Timeout must be a positive number.")

    return ValidationResult(is_valid=True)
