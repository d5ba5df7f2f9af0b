"""Tests for NumberStringSummer."""

from __future__ import annotations

import pytest

from strcalc.calculator.summer import NumberStringSummer, split_header, sum_numbers
from strcalc.core.config import CalculatorConfig
from strcalc.core.exceptions import (
    InvalidNumberFormatError,
    MalformedHeaderError,
    NegativeNumbersNotAllowed,
    StringCalculatorError,
)


@pytest.fixture
def summer():
    return NumberStringSummer(CalculatorConfig(default_delimiter=","))


class TestSum:
    @pytest.mark.parametrize(
        ("numbers", "expected"),
        [
            ("", 0),
            ("1", 1),
            ("1,2", 3),
            ("1,2,3,4,5", 15),
            ("1\n2,3", 6),
            ("1\n2\n3", 6),
            ("0,0", 0),
        ],
    )
    def test_default_delimiter(self, summer, numbers, expected):
        assert summer.sum(numbers) == expected

    def test_custom_single_char_delimiter(self, summer):
        assert summer.sum("//;\n1;2") == 3

    def test_custom_multi_char_delimiter(self, summer):
        assert summer.sum("//;;\n1;;2;;3") == 6

    def test_custom_delimiter_accepts_newlines(self, summer):
        assert summer.sum("//***\n1***2\n3") == 6

    def test_custom_delimiter_replaces_comma(self, summer):
        with pytest.raises(InvalidNumberFormatError):
            summer.sum("//;\n1,2")

    def test_regex_metacharacters_are_literal(self, summer):
        assert summer.sum("//.*\n4.*5") == 9

    def test_header_with_empty_payload(self, summer):
        assert summer.sum("//;\n") == 0

    def test_repeated_calls_agree(self, summer):
        assert summer.sum("10,20\n30") == summer.sum("10,20\n30") == 60


class TestNegatives:
    def test_message_lists_negatives_in_input_order(self, summer):
        with pytest.raises(NegativeNumbersNotAllowed) as exc_info:
            summer.sum("1,-2,3,-4")
        assert "-2, -4" in str(exc_info.value)
        assert str(exc_info.value) == "negative numbers not allowed: -2, -4"

    def test_order_is_not_sorted(self, summer):
        with pytest.raises(NegativeNumbersNotAllowed) as exc_info:
            summer.sum("-1,-5,-3")
        assert exc_info.value.negatives == [-1, -5, -3]
        assert str(exc_info.value).endswith("-1, -5, -3")

    def test_single_negative_with_custom_delimiter(self, summer):
        with pytest.raises(NegativeNumbersNotAllowed, match="negative numbers not allowed: -7"):
            summer.sum("//|\n3|-7")

    def test_is_a_value_error(self, summer):
        with pytest.raises(ValueError):
            summer.sum("-1")


class TestMalformedInput:
    @pytest.mark.parametrize("numbers", ["1,a", "1,2.5", "1,,2", "1,2,", "x"])
    def test_invalid_tokens_are_rejected(self, summer, numbers):
        with pytest.raises(InvalidNumberFormatError):
            summer.sum(numbers)

    def test_invalid_token_is_reported(self, summer):
        with pytest.raises(InvalidNumberFormatError) as exc_info:
            summer.sum("1,two,3")
        assert exc_info.value.token == "two"

    def test_oversized_number_is_rejected(self, summer):
        with pytest.raises(InvalidNumberFormatError) as exc_info:
            summer.sum("1," + "1" * 5000)
        assert exc_info.value.token == "1" * 5000

    def test_header_without_newline(self, summer):
        with pytest.raises(MalformedHeaderError, match="missing newline"):
            summer.sum("//;1;2")

    def test_header_with_empty_delimiter(self, summer):
        with pytest.raises(MalformedHeaderError, match="empty delimiter"):
            summer.sum("//\n1,2")

    def test_all_errors_share_base(self, summer):
        for numbers in ("-1", "a", "//;"):
            with pytest.raises(StringCalculatorError):
                summer.sum(numbers)


class TestSplitHeader:
    def test_no_header_uses_default(self):
        assert split_header("1,2", ",") == (",", "1,2")

    def test_header_splits_on_first_newline_only(self):
        assert split_header("//#\n1#2\n3") == ("#", "1#2\n3")


def test_configured_default_delimiter():
    summer = NumberStringSummer(CalculatorConfig(default_delimiter=";"))
    assert summer.sum("1;2\n3") == 6


def test_sum_numbers_free_function():
    assert sum_numbers("1\n2,3") == 6
