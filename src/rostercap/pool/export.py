"""CSV export helpers for rosters and filtered pools."""

from __future__ import annotations

import csv
from io import StringIO
from typing import Sequence

from rostercap.models import PlayerRecord
from rostercap.valuation import format_value_pct


EXPORT_HEADERS: tuple[str, ...] = ("Player", "Team", "Pos", "SALARY", "ACE", "Value")


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def export_roster_to_csv(players: Sequence[PlayerRecord]) -> str:
    """Serialize players using the same column names the salary CSV is read with."""

    buffer = StringIO()
    writer = csv.writer(buffer)
    writer.writerow(EXPORT_HEADERS)
    for player in players:
        writer.writerow([
            player.name,
            player.team,
            player.position,
            _number(player.salary),
            _number(player.ace),
            format_value_pct(player.value_pct),
        ])
    return buffer.getvalue()


__all__ = [
    "EXPORT_HEADERS",
    "export_roster_to_csv",
]
