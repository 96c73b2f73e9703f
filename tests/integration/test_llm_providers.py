"""
Integration tests for LLM providers.

Run with: uv run pytest tests/integration -v
Requires: API keys in the environment or .env
"""

import pytest

from petai.core.config import load_environ
from petai.llm.base import AnalysisBrief
from petai.llm.config import create_config_from_env, validate_config
from petai.llm.factory import create_provider

# Mark all tests in this module as integration tests
pytestmark = pytest.mark.integration


def _live_config(provider: str):
    environ = {**load_environ(), "PET_AI_PROVIDER": provider}
    # Live calls get more headroom than the interactive default
    environ.setdefault(f"PET_{provider.upper()}_TIMEOUT", "15000")
    config = create_config_from_env(environ)
    validation = validate_config(config)
    if not validation.is_valid:
        pytest.skip(validation.error)
    return config


@pytest.fixture(params=["groq", "openai"])
def config(request):
    return _live_config(request.param)


@pytest.mark.asyncio
async def test_connection(config):
    """Provider API is accessible with the configured key."""
    async with create_provider(config) as provider:
        assert await provider.test_connection(), f"{config.provider} connection test failed"


@pytest.mark.asyncio
async def test_analyze_user_message(config):
    async with create_provider(config) as provider:
        brief = await provider.analyze_user_message(
            "Help me implement a new feature for user authentication", []
        )

    assert isinstance(brief, AnalysisBrief)
    assert brief.summary
    print(f"{config.provider}: {brief.summary!r} ({brief.intent})")


@pytest.mark.asyncio
async def test_analyze_exchange(config):
    async with create_provider(config) as provider:
        analysis = await provider.analyze_exchange(
            "Add a unit test for the parser",
            ["Read src/parser.py", "Created tests/test_parser.py", "Ran pytest: 12 passed"],
            ["Fix the tokenizer bug"],
            project_context="Python expression parser",
        )

    assert isinstance(analysis, dict)
    assert analysis
