"""
petai - one interface over several LLM backends.

Package structure:
- core: Settings and logging
- llm: Provider contract, environment config, factory and backends
"""

__version__ = "0.1.0"
