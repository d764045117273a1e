"""
Enumerations for BFHL data models.
"""

from enum import Enum


class TokenCategory(str, Enum):
    """
    Closed set of token categories.

    Every input token falls into exactly one category. Categories are tested
    in declaration order: a token is NUMERIC before it can be ALPHABETIC, and
    SPECIAL catches everything else.
    """

    NUMERIC = "numeric"
    ALPHABETIC = "alphabetic"
    SPECIAL = "special"
