"""Roster configuration for supported leagues."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class RosterRules:
    league: str
    capacity: int
    salary_cap: float
    positions: Tuple[str, ...]

    def with_overrides(
        self,
        *,
        capacity: Optional[int] = None,
        salary_cap: Optional[float] = None,
    ) -> "RosterRules":
        """Return a copy with a different roster size and/or cap."""

        if capacity is not None and capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity!r}")
        if salary_cap is not None and salary_cap < 0:
            raise ValueError(f"salary_cap must be non-negative, got {salary_cap!r}")
        return replace(
            self,
            capacity=self.capacity if capacity is None else capacity,
            salary_cap=self.salary_cap if salary_cap is None else salary_cap,
        )


_ROSTER_RULES: Dict[str, RosterRules] = {
    "NBA": RosterRules(
        league="NBA",
        capacity=10,
        salary_cap=150_000_000,
        positions=("PG", "SG", "SF", "PF", "C"),
    ),
}

DEFAULT_LEAGUE = "NBA"


def iter_rules() -> Iterable[RosterRules]:
    """Return an iterator of all configured rule sets."""

    return _ROSTER_RULES.values()


def get_rules(league: str = DEFAULT_LEAGUE) -> RosterRules:
    """Fetch rules for a league, raising KeyError if missing."""

    key = league.upper()
    if key not in _ROSTER_RULES:
        raise KeyError(f"No roster rules configured for league={league!r}")
    return _ROSTER_RULES[key]
