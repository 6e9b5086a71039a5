"""Select the votes whose members should be reminded on this run."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from ..github_client.models import GitHubIssue
from ..state.models import VoteState, VoteStatus
from ..utils.dates import ensure_utc, utcnow


class FilterResult(BaseModel):
    """Issues to notify plus the state skeleton for this run."""

    issues_to_notify: list[GitHubIssue] = Field(default_factory=list)
    state: VoteState = Field(default_factory=VoteState)


def filter_issues(
    issues: list[GitHubIssue],
    state: VoteState,
    days: int,
    now: datetime | None = None,
) -> FilterResult:
    """Pick open votes that were never notified or not within ``days``.

    The returned state is a copy: issues seen for the first time get an open
    entry without a notification timestamp, reopened votes are marked open
    again, and entries for votes no longer open are marked closed. The input
    state is left untouched and no timestamps are changed here.

    Args:
        issues: Issues currently labelled as open votes
        state: State restored from the previous run
        days: Minimum days between reminders; 0 forces every open vote
        now: Reference time, defaults to the current UTC time

    Returns:
        FilterResult with eligible issues in input order and the new state
    """
    if days < 0:
        raise ValueError(f"Vote buffer must not be negative, got {days}")

    now = ensure_utc(now) if now is not None else utcnow()
    buffer = timedelta(days=days)
    new_state = state.model_copy(deep=True)

    issues_to_notify = []
    open_numbers = set()
    for issue in issues:
        if issue.number in open_numbers:
            continue
        open_numbers.add(issue.number)

        entry = new_state.ensure_open(issue.number)
        if entry.last_notified is None or now - entry.last_notified >= buffer:
            issues_to_notify.append(issue)

    for number in new_state.issue_numbers(VoteStatus.OPEN):
        if number not in open_numbers:
            new_state.mark_closed(number)

    return FilterResult(issues_to_notify=issues_to_notify, state=new_state)
