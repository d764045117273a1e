"""Unit tests for the numeric parse policy and token categories."""

import pytest

from bfhl_service.models.enums import TokenCategory
from bfhl_service.processing.classifier import (
    NOT_NUMERIC,
    NotNumeric,
    NumericParse,
    categorize,
    is_alphabetic,
    parse_number,
)


class TestParseNumber:
    """Accepted grammar and truncation toward zero."""

    @pytest.mark.parametrize(
        "token,value",
        [
            ("0", 0),
            ("1", 1),
            ("334", 334),
            ("-5", -5),
            ("+7", 7),
            ("-0", 0),
            ("007", 7),
            ("2.5", 2),
            ("-2.5", -2),
            ("3.9", 3),
            ("-3.9", -3),
            ("5.", 5),
            (".5", 0),
            ("-.5", 0),
            (" 12 ", 12),
            ("\t42\n", 42),
            ("123456789012345678901234567890", 123456789012345678901234567890),
        ],
    )
    def test_numeric(self, token, value):
        assert parse_number(token) == NumericParse(value=value)

    @pytest.mark.parametrize(
        "token",
        [
            "",
            " ",
            "\t",
            "a",
            "4a",
            "a4",
            "1e3",
            "1E3",
            "0x1F",
            "0b101",
            "Infinity",
            "-Infinity",
            "NaN",
            "1_000",
            "1,000",
            "1.2.3",
            "--1",
            "+-1",
            "-",
            "+",
            ".",
            "-.",
            "1 2",
            "٣",
            "１２",
        ],
    )
    def test_not_numeric(self, token):
        assert parse_number(token) is NOT_NUMERIC

    def test_not_numeric_is_singleton_value(self):
        assert NOT_NUMERIC == NotNumeric()

    def test_never_raises_on_arbitrary_text(self, random_tokens):
        for token in random_tokens(count=500, seed=99):
            assert isinstance(parse_number(token), (NumericParse, NotNumeric))


class TestIsAlphabetic:
    """ASCII letters only."""

    @pytest.mark.parametrize("token", ["a", "Z", "abc", "XyZ", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"])
    def test_alphabetic(self, token):
        assert is_alphabetic(token)

    @pytest.mark.parametrize("token", ["", " ", "ab c", "a1", "é", "ß", "a-b", "abc\n"])
    def test_not_alphabetic(self, token):
        assert not is_alphabetic(token)


class TestCategorize:
    """Numeric is tested before alphabetic; special catches the rest."""

    @pytest.mark.parametrize(
        "token,category",
        [
            ("1", TokenCategory.NUMERIC),
            ("2.5", TokenCategory.NUMERIC),
            ("a", TokenCategory.ALPHABETIC),
            ("NaN", TokenCategory.ALPHABETIC),
            ("Infinity", TokenCategory.ALPHABETIC),
            ("$", TokenCategory.SPECIAL),
            ("4a", TokenCategory.SPECIAL),
            ("1e3", TokenCategory.SPECIAL),
            (" ", TokenCategory.SPECIAL),
        ],
    )
    def test_categorize(self, token, category):
        assert categorize(token) is category
