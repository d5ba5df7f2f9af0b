"""Type aliases used across the string calculator."""

from __future__ import annotations

Delimiter = str
NumbersPayload = str
Total = int
