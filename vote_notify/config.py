"""Run settings for the vote notifier."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

from .state.branch import DEFAULT_STATE_BRANCH
from .state.manager import DEFAULT_STATE_DIR, DEFAULT_STATE_FILE
from .voting.members import DEFAULT_MAINTAINERS_FILE

VOTE_OPEN_LABEL = "gitvote/open"

# Scheduled runs remind at most every 5 days; manual dispatch always sends.
SCHEDULED_BUFFER_DAYS = 5
MANUAL_BUFFER_DAYS = 0
MANUAL_DISPATCH_EVENT = "workflow_dispatch"


class NotificationMethod(str, Enum):
    """Channels used to remind members."""

    EMAIL = "email"
    SLACK = "slack"
    BOTH = "both"

    @property
    def uses_slack(self) -> bool:
        return self in (NotificationMethod.SLACK, NotificationMethod.BOTH)

    @property
    def uses_email(self) -> bool:
        return self in (NotificationMethod.EMAIL, NotificationMethod.BOTH)


def buffer_days_for_event(event_name: str | None) -> int:
    """Vote buffer for the event that triggered the run.

    Args:
        event_name: GitHub Actions event name (GITHUB_EVENT_NAME)

    Returns:
        0 for manual dispatch, the scheduled buffer otherwise
    """
    if event_name == MANUAL_DISPATCH_EVENT:
        return MANUAL_BUFFER_DAYS
    return SCHEDULED_BUFFER_DAYS


def parse_repository(repository: str) -> tuple[str, str]:
    """Split an ``owner/name`` repository string.

    Raises:
        ValueError: If the string is not in owner/name form
    """
    parts = repository.strip().split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(
            f"Invalid repository '{repository}'. Expected format: owner/name"
        )
    return parts[0], parts[1]


class NotifySettings(BaseModel):
    """Parameters of a single notification run."""

    org: str = Field(..., description="Repository owner holding the votes")
    repo: str = Field(..., description="Repository name holding the votes")
    label: str = Field(VOTE_OPEN_LABEL, description="Label marking open votes")
    days: int = Field(
        SCHEDULED_BUFFER_DAYS,
        ge=0,
        description="Minimum days between reminders for the same vote",
    )
    method: NotificationMethod = Field(
        NotificationMethod.BOTH, description="Channels to notify on"
    )
    maintainers_file: Path = Field(
        Path(DEFAULT_MAINTAINERS_FILE), description="Roster of maintainers"
    )
    state_dir: Path = Field(
        Path(DEFAULT_STATE_DIR), description="Checkout of the state branch"
    )
    state_file: str = Field(DEFAULT_STATE_FILE, description="State file name")
    state_branch: str = Field(
        DEFAULT_STATE_BRANCH, description="Branch the state file is stored on"
    )
    use_state_branch: bool = Field(
        True, description="Check out and push the state branch around the run"
    )
    dry_run: bool = Field(
        False, description="Resolve reminders without sending or saving anything"
    )
