"""In-memory roster board holding the available pool and the selected roster."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from rostercap.config import RosterRules, get_rules
from rostercap.models import PlayerRecord

from .constraints import RejectionReason, can_admit, cap_used


logger = logging.getLogger(__name__)


class MoveStatus(str, Enum):
    ADDED = "added"
    REJECTED = "rejected"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class MoveResult:
    status: MoveStatus
    player: Optional[PlayerRecord] = None
    reason: Optional[RejectionReason] = None

    @property
    def ok(self) -> bool:
        return self.status is MoveStatus.ADDED


@dataclass(frozen=True)
class BoardSnapshot:
    available: Tuple[PlayerRecord, ...]
    selected: Tuple[PlayerRecord, ...]
    cap_used: float
    cap_remaining: float


def _default_order(players: List[PlayerRecord]) -> None:
    players.sort(key=lambda player: player.ace, reverse=True)


class RosterBoard:
    """Owns two disjoint player collections and moves players between them.

    Every player is either in ``available`` (kept sorted by ACE, highest
    first) or in ``selected`` (in the order players were picked). Moves into
    ``selected`` go through :func:`can_admit`; rejected or unknown moves
    leave both collections untouched.
    """

    def __init__(
        self,
        players: Iterable[PlayerRecord] = (),
        *,
        rules: RosterRules | None = None,
    ) -> None:
        self.rules = rules or get_rules()
        self._available: List[PlayerRecord] = []
        self._selected: List[PlayerRecord] = []
        self.load(players)

    def load(self, players: Iterable[PlayerRecord]) -> None:
        """Replace the pool with ``players`` and clear the roster.

        Only the first player with a given name is kept.
        """

        unique: dict[str, PlayerRecord] = {}
        for player in players:
            if player.name in unique:
                logger.debug("Dropping duplicate player %r", player.name)
                continue
            unique[player.name] = player
        self._available = list(unique.values())
        _default_order(self._available)
        self._selected = []
        logger.debug("Board loaded with %s available players", len(self._available))

    @property
    def available(self) -> Tuple[PlayerRecord, ...]:
        return tuple(self._available)

    @property
    def selected(self) -> Tuple[PlayerRecord, ...]:
        return tuple(self._selected)

    @property
    def cap_used(self) -> float:
        return cap_used(self._selected)

    @property
    def cap_remaining(self) -> float:
        return self.rules.salary_cap - self.cap_used

    def all_players(self) -> List[PlayerRecord]:
        return [*self._available, *self._selected]

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            available=self.available,
            selected=self.selected,
            cap_used=self.cap_used,
            cap_remaining=self.cap_remaining,
        )

    def move_to_selected(self, name: str) -> MoveResult:
        index = next(
            (idx for idx, player in enumerate(self._available) if player.name == name),
            None,
        )
        if index is None:
            logger.debug("No available player named %r", name)
            return MoveResult(status=MoveStatus.NOT_FOUND)

        player = self._available[index]
        admission = can_admit(player, self._selected, self.rules)
        if not admission.admitted:
            logger.info("Rejected %s: %s", player.name, admission.reason.value)
            return MoveResult(status=MoveStatus.REJECTED, player=player, reason=admission.reason)

        self._available.pop(index)
        self._selected.append(player)
        logger.info(
            "Added %s (%s/%s players, cap remaining %.0f)",
            player.name,
            len(self._selected),
            self.rules.capacity,
            self.cap_remaining,
        )
        return MoveResult(status=MoveStatus.ADDED, player=player)

    def move_to_available(self, index: int) -> Optional[PlayerRecord]:
        """Return the roster player at ``index`` to the pool.

        Out-of-range indexes (including negative ones) are ignored.
        """

        if not 0 <= index < len(self._selected):
            logger.debug("No roster slot at index %s", index)
            return None

        player = self._selected.pop(index)
        self._available.append(player)
        _default_order(self._available)
        logger.info("Removed %s from roster", player.name)
        return player
