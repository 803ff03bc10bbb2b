"""Salary valuation helpers shared by the roster, filter and ranking layers."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional


VALUE_BANDS: tuple[str, ...] = (
    "excellent",
    "good",
    "fair",
    "overpaid",
    "very-overpaid",
)

# Upper bounds are exclusive; anything at or above the last one is very-overpaid.
_BAND_UPPER_BOUNDS: tuple[tuple[float, str], ...] = (
    (-20.0, "excellent"),
    (-10.0, "good"),
    (10.0, "fair"),
    (20.0, "overpaid"),
)

_TENTH = Decimal("0.1")
# Wide enough to quantize any finite float without InvalidOperation.
_ROUNDING_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def compute_value_pct(actual: float, estimated: Optional[float]) -> float:
    """Return how far ``actual`` sits above (+) or below (-) ``estimated``, in percent.

    A missing or zero estimate yields ``0.0``.
    """

    if not estimated:
        return 0.0
    return (actual - estimated) / estimated * 100


def classify_value(value_pct: float) -> str:
    for upper, band in _BAND_UPPER_BOUNDS:
        if value_pct < upper:
            return band
    return VALUE_BANDS[-1]


def format_value_pct(value_pct: float) -> str:
    """Render a value percentage as ``+12.3%`` / ``-4.0%`` / ``0.0%``."""

    sign = "+" if value_pct > 0 else ""
    # Exact ties round away from zero (0.25 -> 0.3).
    rounded = Decimal(value_pct).quantize(_TENTH, context=_ROUNDING_CONTEXT)
    return f"{sign}{rounded}%"


def format_money(amount: float) -> str:
    return f"${amount:,.0f}"


__all__ = [
    "VALUE_BANDS",
    "classify_value",
    "compute_value_pct",
    "format_money",
    "format_value_pct",
]
