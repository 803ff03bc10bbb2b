"""Roster state and admission rules."""

from .board import BoardSnapshot, MoveResult, MoveStatus, RosterBoard
from .constraints import CAP_FIELD, Admission, RejectionReason, can_admit, cap_used

__all__ = [
    "Admission",
    "BoardSnapshot",
    "CAP_FIELD",
    "MoveResult",
    "MoveStatus",
    "RejectionReason",
    "RosterBoard",
    "can_admit",
    "cap_used",
]
