"""Admission checks for adding a player to a roster."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence

from rostercap.config import RosterRules
from rostercap.models import PlayerRecord


# The cap is measured in ACE (model-estimated) salary, both for the running
# total and for the incoming player.
CAP_FIELD = "ace"


class RejectionReason(str, Enum):
    ROSTER_FULL = "roster_full"
    EXCEEDS_CAP = "exceeds_cap"

    @property
    def message(self) -> str:
        if self is RejectionReason.ROSTER_FULL:
            return "Roster is full!"
        return "Not enough cap space!"


@dataclass(frozen=True)
class Admission:
    admitted: bool
    reason: Optional[RejectionReason] = None


ADMITTED = Admission(admitted=True)


def cap_used(players: Iterable[PlayerRecord]) -> float:
    return sum(getattr(player, CAP_FIELD) for player in players)


def can_admit(
    player: PlayerRecord,
    selected: Sequence[PlayerRecord],
    rules: RosterRules,
) -> Admission:
    """Decide whether ``player`` may join ``selected``.

    Capacity is checked before the cap, so a full roster is always reported
    as ``ROSTER_FULL`` even when cap space remains.
    """

    if len(selected) >= rules.capacity:
        return Admission(admitted=False, reason=RejectionReason.ROSTER_FULL)
    if cap_used(selected) + getattr(player, CAP_FIELD) > rules.salary_cap:
        return Admission(admitted=False, reason=RejectionReason.EXCEEDS_CAP)
    return ADMITTED
