"""Reminder dispatch and the end-to-end notification run."""

from .dispatcher import DispatchReport, NotificationDispatcher
from .workflow import RunResult, run_vote_notification

__all__ = [
    "DispatchReport",
    "NotificationDispatcher",
    "RunResult",
    "run_vote_notification",
]
