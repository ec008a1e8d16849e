"""Data models for fuzzy search."""

from .response import (
    ClosedRange,
    SearchResult,
    ListSearchResult,
    FieldMatchResult,
    CollectionItemResult,
)
from .request import SearchOptions, WeightedField, Searchable
from .pattern import Pattern

__all__ = [
    "ClosedRange",
    "SearchResult",
    "ListSearchResult",
    "FieldMatchResult",
    "CollectionItemResult",
    "SearchOptions",
    "WeightedField",
    "Searchable",
    "Pattern",
]
