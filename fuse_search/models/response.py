"""Result models returned by the search engine."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ClosedRange(BaseModel):
    """Inclusive range of matched character indices."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="Index of the first matched character")
    end: int = Field(..., ge=0, description="Index of the last matched character")

    @model_validator(mode="after")
    def validate_bounds(self) -> "ClosedRange":
        """Reject ranges whose start lies after their end."""
        if self.start > self.end:
            raise ValueError(f"Range start {self.start} is after end {self.end}")
        return self

    def __len__(self) -> int:
        return self.end - self.start + 1


class SearchResult(BaseModel):
    """Score and matched ranges for a single string."""

    model_config = ConfigDict(frozen=True)

    score: float = Field(..., ge=0.0, le=1.0, description="Match score (0 = perfect, 1 = no match)")
    ranges: List[ClosedRange] = Field(default_factory=list, description="Matched character ranges")


class ListSearchResult(BaseModel):
    """Search result tagged with the index of the string it came from."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the string in the searched list")
    score: float = Field(..., ge=0.0, le=1.0, description="Match score (0 = perfect, 1 = no match)")
    ranges: List[ClosedRange] = Field(default_factory=list, description="Matched character ranges")


class FieldMatchResult(BaseModel):
    """Weighted match of one field of a collection item."""

    model_config = ConfigDict(frozen=True)

    field_value: str = Field(..., description="The searched field text")
    score: float = Field(..., ge=0.0, le=1.0, description="Weighted score of this field")
    ranges: List[ClosedRange] = Field(default_factory=list, description="Matched character ranges")


class CollectionItemResult(BaseModel):
    """Aggregated match of a multi-field collection item."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the item in the searched collection")
    score: float = Field(..., ge=0.0, le=1.0, description="Mean of the weighted field scores")
    field_results: List[FieldMatchResult] = Field(
        default_factory=list, description="Per-field matches that contributed to the score"
    )
