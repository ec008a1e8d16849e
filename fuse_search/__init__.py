"""
Fuse Search - approximate substring matching with the Bitap algorithm.

This package scores how well a pattern occurs in a text while tolerating
typos and positional drift, and ranks lists of strings or of weighted
multi-field items by that score.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .engine_instance import get_default_engine
from .models import (
    ClosedRange,
    CollectionItemResult,
    FieldMatchResult,
    ListSearchResult,
    Pattern,
    Searchable,
    SearchResult,
    WeightedField,
)

__all__ = [
    "SearchEngine",
    "get_default_engine",
    "ClosedRange",
    "CollectionItemResult",
    "FieldMatchResult",
    "ListSearchResult",
    "Pattern",
    "Searchable",
    "SearchResult",
    "WeightedField",
]
