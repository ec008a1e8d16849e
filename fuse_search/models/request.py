"""Input models: engine options and weighted searchable fields."""

from typing import Any, Protocol, Sequence, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchOptions(BaseModel):
    """Validated, immutable engine configuration."""

    model_config = ConfigDict(frozen=True)

    location: int = Field(default=0, ge=0, description="Expected match position in the text")
    distance: int = Field(
        default=100, ge=0, description="How far a match may drift from location (0 = exact location)"
    )
    threshold: float = Field(default=0.6, ge=0.0, le=1.0, description="Maximum acceptable score")
    max_pattern_length: int = Field(default=32, ge=1, description="Longest pattern that will be searched")
    is_case_sensitive: bool = Field(default=False, description="Whether comparisons keep letter case")
    tokenize: bool = Field(
        default=False, description="Also search individual words and average with the full pattern"
    )


class WeightedField(BaseModel):
    """A searchable text value with its weight.

    Weights are limited to [0, 1]. A weight of 1 leaves the field's score
    unchanged, any other weight scales it by ``1 - weight``; weights above 1
    would turn scores negative, so they are rejected with a ValidationError.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The field's text value")
    weight: float = Field(default=1.0, ge=0.0, le=1.0, description="Relative importance of the field")

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        """Allow missing values to be searched as empty text."""
        if v is None:
            return ""
        return v

    @classmethod
    def coerce(cls, value: Any) -> "WeightedField":
        """
        Convert a field description into a WeightedField.

        Accepts a WeightedField, a ``(name, weight)`` pair or a bare string.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls(name=value)
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(name=value[0], weight=value[1])
        raise TypeError(f"Cannot interpret {value!r} as a weighted field")


@runtime_checkable
class Searchable(Protocol):
    """Anything exposing an ordered list of weighted fields."""

    @property
    def weighted_fields(self) -> Sequence[Any]:
        ...
