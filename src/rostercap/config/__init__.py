"""Configuration helpers for roster rules."""

from .roster import DEFAULT_LEAGUE, RosterRules, get_rules, iter_rules

__all__ = [
    "DEFAULT_LEAGUE",
    "RosterRules",
    "get_rules",
    "iter_rules",
]
