"""Persistence of vote notification state."""

from .branch import StateBranch
from .manager import StateManager
from .models import VoteState, VoteStateEntry, VoteStatus

__all__ = [
    "StateBranch",
    "StateManager",
    "VoteState",
    "VoteStateEntry",
    "VoteStatus",
]
