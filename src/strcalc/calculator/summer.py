"""NumberStringSummer: sums a delimited string of integers.

Input grammar::

    [ "//" <delimiter> "\\n" ] <numbers payload>

Newlines in the payload are interchangeable with the active delimiter.
Negative numbers are rejected, all of them reported in input order.
"""

from __future__ import annotations

import re

from strcalc.core.config import CalculatorConfig
from strcalc.core.exceptions import (
    InvalidNumberFormatError,
    MalformedHeaderError,
    NegativeNumbersNotAllowed,
)
from strcalc.core.types import Delimiter, NumbersPayload, Total

HEADER_MARKER = "//"
NEWLINE = "\n"

_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def split_header(numbers: str, default: Delimiter = ",") -> tuple[Delimiter, NumbersPayload]:
    """Return the active delimiter and the numbers payload."""
    if not numbers.startswith(HEADER_MARKER):
        return default, numbers

    header, sep, payload = numbers.partition(NEWLINE)
    if not sep:
        raise MalformedHeaderError(header, "missing newline after delimiter")
    delimiter = header[len(HEADER_MARKER):]
    if not delimiter:
        raise MalformedHeaderError(header, "empty delimiter")
    return delimiter, payload


def parse_numbers(payload: NumbersPayload, delimiter: Delimiter) -> list[int]:
    """Split ``payload`` on ``delimiter`` (or newline) into integers."""
    if not payload:
        return []
    normalized = payload.replace(NEWLINE, delimiter)
    values = []
    for token in normalized.split(delimiter):
        if not _INTEGER_RE.fullmatch(token):
            raise InvalidNumberFormatError(token)
        try:
            values.append(int(token))
        except ValueError as exc:
            raise InvalidNumberFormatError(token) from exc
    return values


class NumberStringSummer:
    """Stateless service summing delimited number strings."""

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config or CalculatorConfig()

    @property
    def default_delimiter(self) -> Delimiter:
        return self._config.default_delimiter

    def sum(self, numbers: str) -> Total:
        """Sum ``numbers``.

        Raises:
            NegativeNumbersNotAllowed: any parsed value is below zero.
            InvalidNumberFormatError: a token is not an integer.
            MalformedHeaderError: the ``//`` header is incomplete.
        """
        if not numbers:
            return 0

        delimiter, payload = split_header(numbers, self.default_delimiter)
        values = parse_numbers(payload, delimiter)

        negatives = [n for n in values if n < 0]
        if negatives:
            raise NegativeNumbersNotAllowed(negatives)

        return sum(values)


_default_summer = NumberStringSummer(CalculatorConfig.model_construct(default_delimiter=","))


def sum_numbers(numbers: str) -> Total:
    """Sum ``numbers`` with the default comma delimiter."""
    return _default_summer.sum(numbers)
