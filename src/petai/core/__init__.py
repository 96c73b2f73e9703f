"""
Core module - settings and logging.

Components:
- config: Process settings via pydantic-settings
- logging: Logging setup
"""

from petai.core.config import Settings

__all__ = ["Settings"]
