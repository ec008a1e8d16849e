"""Shared search engine instance built from settings."""

from functools import lru_cache

from .core.engine import SearchEngine


@lru_cache()
def get_default_engine() -> SearchEngine:
    """Get the engine configured from environment settings.

    Engines are immutable, so one instance can serve every caller and thread.
    """
    return SearchEngine.from_settings()
