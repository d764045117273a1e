"""
Classification core and response identity helpers.

- classifier.py: classify(), parse_number() and the tagged parse results
- identity.py: user_id / email / roll_number attached by the HTTP layer
- exceptions.py: ProcessingError hierarchy
"""

from .classifier import (
    NOT_NUMERIC,
    NotNumeric,
    NumericParse,
    build_concat_string,
    categorize,
    classify,
    inspect_token,
    is_alphabetic,
    parse_number,
)
from .exceptions import InvalidInputError, ProcessingError
from .identity import UserInfo, generate_user_id, get_user_info

__all__ = [
    # Classifier
    "classify",
    "categorize",
    "inspect_token",
    "parse_number",
    "is_alphabetic",
    "build_concat_string",
    "NumericParse",
    "NotNumeric",
    "NOT_NUMERIC",
    # Identity
    "UserInfo",
    "generate_user_id",
    "get_user_info",
    # Exceptions (for API error handling)
    "ProcessingError",
    "InvalidInputError",
]
