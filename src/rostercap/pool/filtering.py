"""Helpers for slicing the available player pool by search criteria."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from rostercap.models import PlayerRecord


SalaryOperator = Literal[">=", "<="]
ValueFilter = Literal["all", "underpaid", "fair", "overpaid"]

UNDERPAID_THRESHOLD = -10.0
OVERPAID_THRESHOLD = 10.0


@dataclass(frozen=True)
class FilterCriteria:
    """Filtering configuration for the available pool.

    ``salary_value`` is compared against the ACE salary and only applies when
    it is a positive number.
    """

    query: str = ""
    salary_operator: SalaryOperator = ">="
    salary_value: float | None = None
    positions: tuple[str, ...] = ()
    value_filter: ValueFilter = "all"


def reset_filters() -> FilterCriteria:
    return FilterCriteria()


def _matches_value_filter(player: PlayerRecord, value_filter: ValueFilter) -> bool:
    if value_filter == "underpaid":
        return player.value_pct < UNDERPAID_THRESHOLD
    if value_filter == "fair":
        return UNDERPAID_THRESHOLD <= player.value_pct <= OVERPAID_THRESHOLD
    if value_filter == "overpaid":
        return player.value_pct > OVERPAID_THRESHOLD
    return True


def _passes_criteria(player: PlayerRecord, criteria: FilterCriteria) -> bool:
    query = criteria.query.lower()
    if query and query not in player.name.lower():
        return False

    threshold = criteria.salary_value
    if threshold is not None and threshold > 0:
        if criteria.salary_operator == ">=" and player.ace < threshold:
            return False
        if criteria.salary_operator == "<=" and player.ace > threshold:
            return False

    if criteria.positions and player.position not in criteria.positions:
        return False

    return _matches_value_filter(player, criteria.value_filter)


def filter_players(
    pool: Sequence[PlayerRecord],
    criteria: FilterCriteria | None = None,
) -> list[PlayerRecord]:
    """Return the players passing every criterion.

    Underpaid results are ordered best value first and overpaid results worst
    value first; other filters keep the pool order.
    """

    criteria = criteria or FilterCriteria()
    filtered = [player for player in pool if _passes_criteria(player, criteria)]

    if criteria.value_filter == "underpaid":
        filtered.sort(key=lambda player: player.value_pct)
    elif criteria.value_filter == "overpaid":
        filtered.sort(key=lambda player: player.value_pct, reverse=True)
    return filtered


__all__ = [
    "FilterCriteria",
    "SalaryOperator",
    "ValueFilter",
    "filter_players",
    "reset_filters",
]
