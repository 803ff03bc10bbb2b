"""Data series behind the salary scatter plot and the per-team share charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from rostercap.ingest import UNKNOWN_OWNER
from rostercap.models import PlayerRecord

from .rankings import clean_team


AXIS_HEADROOM = 1.1


@dataclass(frozen=True)
class ScatterPoint:
    label: str
    salary: float
    ace: float


@dataclass(frozen=True)
class ScatterSeries:
    points: tuple[ScatterPoint, ...]
    max_salary: float
    max_ace: float

    @property
    def break_even_max(self) -> float:
        """End of the salary == ACE diagonal drawn across the chart."""

        return max(self.max_salary, self.max_ace)


@dataclass(frozen=True)
class PlayerShare:
    name: str
    salary_pct: float
    ace_pct: float


@dataclass(frozen=True)
class TeamShares:
    team: str
    players: tuple[PlayerShare, ...]


def salary_scatter(players: Sequence[PlayerRecord]) -> ScatterSeries:
    points = tuple(
        ScatterPoint(label=player.name, salary=player.salary, ace=player.ace)
        for player in players
    )
    max_salary = max((point.salary for point in points), default=0.0) * AXIS_HEADROOM
    max_ace = max((point.ace for point in points), default=0.0) * AXIS_HEADROOM
    return ScatterSeries(points=points, max_salary=max_salary, max_ace=max_ace)


def _share(part: float, total: float) -> float:
    return part / total * 100 if total else 0.0


def team_shares(players: Iterable[PlayerRecord]) -> list[TeamShares]:
    """Each player's share of their team's total salary and total ACE, in percent.

    Teams keep first-seen order. Blank and ``Unknown`` teams are skipped.
    """

    grouped: dict[str, list[PlayerRecord]] = {}
    for player in players:
        team = clean_team(player.team)
        if not team or team == UNKNOWN_OWNER:
            continue
        grouped.setdefault(team, []).append(player)

    result: list[TeamShares] = []
    for team, members in grouped.items():
        total_salary = sum(player.salary for player in members)
        total_ace = sum(player.ace for player in members)
        result.append(
            TeamShares(
                team=team,
                players=tuple(
                    PlayerShare(
                        name=player.name,
                        salary_pct=_share(player.salary, total_salary),
                        ace_pct=_share(player.ace, total_ace),
                    )
                    for player in members
                ),
            )
        )
    return result


__all__ = [
    "PlayerShare",
    "ScatterPoint",
    "ScatterSeries",
    "TeamShares",
    "salary_scatter",
    "team_shares",
]
