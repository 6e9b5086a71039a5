"""Vote tracking: which votes need reminders and who still owes a vote."""

from .filter import FilterResult, filter_issues
from .members import load_tsc_members
from .models import Reviewer, VoteProgress
from .resolver import VoteCommentNotFoundError, VoteResolver

__all__ = [
    "FilterResult",
    "Reviewer",
    "VoteCommentNotFoundError",
    "VoteProgress",
    "VoteResolver",
    "filter_issues",
    "load_tsc_members",
]
