"""Roster summaries and team/owner value rankings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from statistics import fmean
from typing import Iterable, Mapping, Sequence

from rostercap.config import RosterRules, get_rules
from rostercap.ingest import UNKNOWN_OWNER
from rostercap.models import PlayerRecord
from rostercap.roster import cap_used
from rostercap.valuation import classify_value


_MULTI_TEAM_MARKER = re.compile(r"\s*\d+TM", re.IGNORECASE)


@dataclass(frozen=True)
class RosterSummary:
    total_players: int
    count_by_position: Mapping[str, int]
    mean_value_pct: float
    mean_value_band: str
    cap_used: float
    cap_remaining: float


@dataclass(frozen=True)
class TeamRanking:
    rank: int
    team: str
    owner: str
    count: int
    mean_value_pct: float


def summarize_roster(
    selected: Sequence[PlayerRecord],
    rules: RosterRules | None = None,
) -> RosterSummary:
    """Count roster players by position and average their value percentage.

    Every configured position appears in ``count_by_position``; positions
    outside the configuration are not counted. An empty roster averages 0.
    """

    rules = rules or get_rules()
    counts = {position: 0 for position in rules.positions}
    for player in selected:
        if player.position in counts:
            counts[player.position] += 1

    mean_value = fmean(player.value_pct for player in selected) if selected else 0.0
    used = cap_used(selected)
    return RosterSummary(
        total_players=len(selected),
        count_by_position=counts,
        mean_value_pct=mean_value,
        mean_value_band=classify_value(mean_value),
        cap_used=used,
        cap_remaining=rules.salary_cap - used,
    )


def clean_team(team: str | None) -> str:
    """Drop multi-team markers such as ``2TM`` and surrounding whitespace."""

    return _MULTI_TEAM_MARKER.sub("", team or "").strip()


def _round_tenth(value: float) -> float:
    # Halves round toward positive infinity.
    return math.floor(value * 10 + 0.5) / 10


def rank_teams(
    players: Iterable[PlayerRecord],
    owners: Mapping[str, str] | None = None,
) -> list[TeamRanking]:
    """Rank teams by average value percentage, best value (lowest) first.

    Averages are compared after rounding to one decimal; equal rounded
    averages put the team with more players first. Players without a team
    are left out.
    """

    owners = owners or {}
    totals: dict[str, list[float]] = {}
    for player in players:
        team = clean_team(player.team)
        if not team:
            continue
        totals.setdefault(team, []).append(player.value_pct)

    rows = [
        (team, owners.get(team, UNKNOWN_OWNER), len(values), fmean(values))
        for team, values in totals.items()
    ]
    rows.sort(key=lambda row: (_round_tenth(row[3]), -row[2]))

    return [
        TeamRanking(rank=index, team=team, owner=owner, count=count, mean_value_pct=mean)
        for index, (team, owner, count, mean) in enumerate(rows, start=1)
    ]


__all__ = [
    "RosterSummary",
    "TeamRanking",
    "clean_team",
    "rank_teams",
    "summarize_roster",
]
