"""
CLI entry point.

Commands:
- config: Show resolved provider configuration
- health: Check provider connectivity
- analyze: Analyze a user message

Flags:
- --debug: Enable debug logging
"""

import asyncio
import logging
import sys

from pydantic import ValidationError

from petai.core.config import get_settings, load_environ
from petai.core.logging import get_logger, setup_logging
from petai.llm.base import ProviderError, UnsupportedProviderError
from petai.llm.config import ProviderConfig, create_config_from_env, validate_config
from petai.llm.factory import create_provider

USAGE = """Usage: petai [--debug] <command>
Commands: config, health, analyze <message>
Flags: --debug (enable debug logging)"""


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid settings: {e}")
        return 1

    debug_mode = "--debug" in args
    if debug_mode:
        args.remove("--debug")

    log_level = logging.DEBUG if debug_mode else settings.log_level
    setup_logging(level=log_level, log_file=settings.log_file)
    logger = get_logger("cli")

    if not args:
        print(USAGE)
        return 1

    command, rest = args[0], args[1:]
    config = create_config_from_env(load_environ())
    logger.debug(f"Command: {command}, provider: {config.provider}")

    if command == "config":
        return _show_config(config)

    if command == "health":
        return asyncio.run(_health_check(config))

    if command == "analyze":
        if not rest:
            print("Usage: petai analyze <message>")
            return 1
        return asyncio.run(_analyze(config, " ".join(rest)))

    print(f"Unknown command: {command}")
    return 1


def _mask(api_key: str | None) -> str:
    if not api_key:
        return "(not set)"
    if len(api_key) <= 8:
        return "****"
    return f"{api_key[:4]}...{api_key[-4:]}"


def _show_config(config: ProviderConfig) -> int:
    """Print configuration and validation result."""
    print(f"Provider:    {config.provider}")
    print(f"Model:       {config.model}")
    print(f"Timeout:     {config.timeout}ms")
    print(f"Max retries: {config.max_retries}")
    print(f"API key:     {_mask(config.api_key)}")

    validation = validate_config(config)
    if not validation.is_valid:
        print(f"Invalid: {validation.error}")
        return 1
    print("Valid")
    return 0


async def _health_check(config: ProviderConfig) -> int:
    """Check provider connectivity."""
    validation = validate_config(config)
    if not validation.is_valid:
        print(f"Config validation failed: {validation.error}")
        return 1

    try:
        provider = create_provider(config)
    except UnsupportedProviderError as e:
        print(f"Failed to create provider: {e}")
        return 1

    print(f"Checking {config.provider} ({config.model})...")
    async with provider:
        connected = await provider.test_connection()
    print(f"  {config.provider}: {'OK' if connected else 'FAILED'}")
    return 0 if connected else 1


async def _analyze(config: ProviderConfig, message: str) -> int:
    """Analyze a single user message."""
    validation = validate_config(config)
    if not validation.is_valid:
        print(f"Config validation failed: {validation.error}")
        return 1

    try:
        provider = create_provider(config)
    except UnsupportedProviderError as e:
        print(f"Failed to create provider: {e}")
        return 1

    try:
        async with provider:
            brief = await provider.analyze_user_message(message, [])
    except ProviderError as e:
        print(f"Analysis failed: {e}")
        return 1

    print(f"Summary: {brief.summary}")
    print(f"Intent:  {brief.intent}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
