"""String calculator exception hierarchy."""

from __future__ import annotations


class StringCalculatorError(Exception):
    """Base exception for all string calculator errors."""


class NegativeNumbersNotAllowed(StringCalculatorError, ValueError):
    """One or more parsed numbers were negative."""

    def __init__(self, negatives: list[int]) -> None:
        self.negatives = list(negatives)
        joined = ", ".join(str(n) for n in self.negatives)
        super().__init__(f"negative numbers not allowed: {joined}")


class InvalidNumberFormatError(StringCalculatorError, ValueError):
    """A token could not be parsed as an integer."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"invalid number: {token!r}")


class MalformedHeaderError(StringCalculatorError, ValueError):
    """Custom delimiter header is missing its newline or its delimiter."""

    def __init__(self, header: str, reason: str) -> None:
        self.header = header
        self.reason = reason
        super().__init__(f"malformed delimiter header {header!r}: {reason}")
