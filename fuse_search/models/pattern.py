"""Compiled search pattern."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.utilities import calculate_pattern_alphabet


class Pattern(BaseModel):
    """Precompiled pattern reused across many searches."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Normalized pattern text")
    length: int = Field(..., gt=0, description="Length of the pattern text")
    mask: int = Field(..., description="Bit marking a full match (1 << (length - 1))")
    alphabet: Dict[str, int] = Field(..., description="Character to position bit-mask")

    @model_validator(mode="after")
    def validate_consistency(self) -> "Pattern":
        """Ensure the length and full-match mask agree with the text."""
        if self.length != len(self.text):
            raise ValueError("Pattern length does not match its text")
        if self.mask != 1 << (self.length - 1):
            raise ValueError("Pattern mask must be 1 << (length - 1)")
        return self

    @classmethod
    def compile(cls, text: str) -> "Pattern":
        """
        Compile already normalized text into a pattern.

        Args:
            text: Non-empty pattern text

        Returns:
            Compiled pattern
        """
        if not text:
            raise ValueError("Pattern text cannot be empty")

        length = len(text)
        return cls(
            text=text,
            length=length,
            mask=1 << (length - 1),
            alphabet=calculate_pattern_alphabet(text),
        )

    def char_mask(self, char: str) -> int:
        """Return the bit-mask for a character, 0 if it is not in the pattern."""
        return self.alphabet.get(char, 0)
