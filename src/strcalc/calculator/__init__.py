from __future__ import annotations

from strcalc.calculator.summer import NumberStringSummer, sum_numbers

__all__ = ["NumberStringSummer", "sum_numbers"]
