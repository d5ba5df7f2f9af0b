"""String calculator: sums delimited number strings."""

from __future__ import annotations

from strcalc.calculator.summer import NumberStringSummer, sum_numbers
from strcalc.core.exceptions import (
    InvalidNumberFormatError,
    MalformedHeaderError,
    NegativeNumbersNotAllowed,
    StringCalculatorError,
)

__all__ = [
    "InvalidNumberFormatError",
    "MalformedHeaderError",
    "NegativeNumbersNotAllowed",
    "NumberStringSummer",
    "StringCalculatorError",
    "sum_numbers",
]
