"""Protocol interfaces for string calculator abstractions.

Structural typing only; any object with a matching ``sum`` method qualifies.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from strcalc.core.types import Total


@runtime_checkable
class INumberSummer(Protocol):
    """Sums a delimited number string."""

    def sum(self, numbers: str) -> Total: ...
