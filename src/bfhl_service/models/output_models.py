"""
Output data models for the BFHL service.

CategorizationResult is the value produced by one classify() call. It is
immutable and carries no identity; the HTTP layer merges it with the user
identity fields to build the response body.
"""

from pydantic import BaseModel, ConfigDict, Field


class CategorizationResult(BaseModel):
    """
    Categorized breakdown of a token sequence.

    Every input token appears in exactly one of odd_numbers + even_numbers,
    alphabets or special_characters, and each list keeps input order.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    odd_numbers: list[str] = Field(
        default_factory=list,
        description="Numeric tokens (original form) whose integer value is odd",
    )
    even_numbers: list[str] = Field(
        default_factory=list,
        description="Numeric tokens (original form) whose integer value is even",
    )
    alphabets: list[str] = Field(
        default_factory=list,
        description="Purely alphabetic tokens, upper-cased",
    )
    special_characters: list[str] = Field(
        default_factory=list,
        description="Tokens that are neither numeric nor purely alphabetic",
    )
    sum: str = Field(
        default="0",
        description="Decimal string of the integer sum of all numeric tokens",
        examples=["339"],
    )
    concat_string: str = Field(
        default="",
        description="Reversed concatenation of alphabets with alternating caps",
        examples=["Ra"],
    )

    @property
    def token_count(self) -> int:
        """Total number of classified tokens."""
        return (
            len(self.odd_numbers)
            + len(self.even_numbers)
            + len(self.alphabets)
            + len(self.special_characters)
        )
