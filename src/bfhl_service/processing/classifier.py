"""
Token classification and transformation core.

classify() takes an ordered sequence of strings and returns a
CategorizationResult. It is pure: no I/O, no logging, no shared state, so it
is safe to call concurrently from any number of request handlers.

Numeric parse policy:
    Surrounding whitespace is ignored. A token is numeric when the remainder
    is an optional sign followed by ASCII digits with an optional fractional
    part ("12", "-5", "+7", "2.5", "5.", ".5"). Exponents, hex literals,
    "Infinity"/"NaN" and digit-group underscores are not numeric. The integer
    value of a numeric token is its decimal value truncated toward zero, so
    "2.5" counts as 2 (even) and "-2.5" as -2 (even).
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import ROUND_DOWN, Decimal
from typing import Union

from bfhl_service.models.enums import TokenCategory
from bfhl_service.models.output_models import CategorizationResult
from bfhl_service.processing.exceptions import InvalidInputError

# re.ASCII keeps \d from matching non-ASCII digits such as "٣"
NUMERIC_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
ALPHABETIC_PATTERN = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class NumericParse:
    """A token that parsed as a number; value is truncated toward zero."""

    value: int


@dataclass(frozen=True)
class NotNumeric:
    """A token that is not a number."""


NOT_NUMERIC = NotNumeric()

ParseResult = Union[NumericParse, NotNumeric]


def parse_number(token: str) -> ParseResult:
    """
    Parse a token as a number.

    Total over str: never raises, returns NOT_NUMERIC for anything outside
    the accepted grammar (see module docstring).

    Args:
        token: Raw token text

    Returns:
        NumericParse with the truncated integer value, or NOT_NUMERIC

    Examples:
        >>> parse_number("334")
        NumericParse(value=334)
        >>> parse_number("-2.5")
        NumericParse(value=-2)
        >>> parse_number("4a")
        NotNumeric()
    """
    text = token.strip()
    if not NUMERIC_PATTERN.fullmatch(text):
        return NOT_NUMERIC

    # Decimal avoids float rounding on long tokens ("9007199254740993")
    value = Decimal(text).to_integral_value(rounding=ROUND_DOWN)
    return NumericParse(value=int(value))


def is_alphabetic(token: str) -> bool:
    """True if the token is one or more ASCII letters."""
    return ALPHABETIC_PATTERN.fullmatch(token) is not None


def inspect_token(token: str) -> tuple[TokenCategory, ParseResult]:
    """
    Categorize a token and keep its numeric parse.

    The one place the NUMERIC, ALPHABETIC, SPECIAL priority is decided.
    """
    parsed = parse_number(token)
    if isinstance(parsed, NumericParse):
        return TokenCategory.NUMERIC, parsed
    if is_alphabetic(token):
        return TokenCategory.ALPHABETIC, parsed
    return TokenCategory.SPECIAL, parsed


def categorize(token: str) -> TokenCategory:
    """Return the single category a token belongs to."""
    category, _ = inspect_token(token)
    return category


def build_concat_string(alphabets: Sequence[str]) -> str:
    """
    Reverse the concatenated alphabets and alternate caps starting upper.

    >>> build_concat_string(["A", "R"])
    'Ra'
    """
    reversed_chars = "".join(alphabets)[::-1]
    return "".join(
        char.upper() if index % 2 == 0 else char.lower()
        for index, char in enumerate(reversed_chars)
    )


def _check_tokens(tokens: object) -> Sequence[str]:
    # str and bytes are sequences too, but never a valid token list
    if isinstance(tokens, (str, bytes, bytearray)) or not isinstance(tokens, Sequence):
        raise InvalidInputError(
            "Input must be a sequence of strings",
            received_type=type(tokens).__name__,
        )

    for index, token in enumerate(tokens):
        if not isinstance(token, str):
            raise InvalidInputError(
                "Every element must be a string",
                received_type=type(token).__name__,
                index=index,
            )

    return tokens


def classify(tokens: Sequence[str]) -> CategorizationResult:
    """
    Classify tokens into odd/even numbers, alphabets and special characters.

    Args:
        tokens: Ordered sequence of strings

    Returns:
        CategorizationResult with every token in exactly one bucket, input
        order preserved within each bucket

    Raises:
        InvalidInputError: If tokens is not a sequence or holds a non-string
    """
    tokens = _check_tokens(tokens)

    odd_numbers: list[str] = []
    even_numbers: list[str] = []
    alphabets: list[str] = []
    special_characters: list[str] = []
    total = 0

    for token in tokens:
        category, parsed = inspect_token(token)
        if category is TokenCategory.NUMERIC:
            total += parsed.value
            # Python's % is non-negative for a positive modulus, so -5 is odd
            if parsed.value % 2 == 0:
                even_numbers.append(token)
            else:
                odd_numbers.append(token)
        elif category is TokenCategory.ALPHABETIC:
            alphabets.append(token.upper())
        else:
            special_characters.append(token)

    return CategorizationResult(
        odd_numbers=odd_numbers,
        even_numbers=even_numbers,
        alphabets=alphabets,
        special_characters=special_characters,
        sum=str(total),
        concat_string=build_concat_string(alphabets),
    )
