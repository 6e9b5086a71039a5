"""Data models for persisted vote state."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..utils.dates import ensure_utc


class VoteStatus(str, Enum):
    """Lifecycle of a vote as seen by the notifier."""

    OPEN = "open"
    CLOSED = "closed"


class VoteStateEntry(BaseModel):
    """State tracked for a single vote issue."""

    status: VoteStatus = Field(
        VoteStatus.OPEN, description="Whether the vote is still open"
    )
    last_notified: datetime | None = Field(
        None, description="When members were last reminded about this vote (UTC)"
    )

    @field_validator("last_notified")
    @classmethod
    def normalize_timezone(cls, value: datetime | None) -> datetime | None:
        return ensure_utc(value) if value is not None else None


class VoteState(BaseModel):
    """Notification state for every vote the notifier has seen.

    Entries are keyed by issue number rendered as a string, matching the
    layout of ``vote_status.json``:

        {"123": {"status": "open", "last_notified": "2024-09-01T00:00:00Z"}}
    """

    entries: dict[str, VoteStateEntry] = Field(default_factory=dict)

    @classmethod
    def from_json_dict(cls, data: dict[str, Any]) -> "VoteState":
        """Build state from the flat mapping stored on disk."""
        return cls.model_validate({"entries": data})

    def to_json_dict(self) -> dict[str, Any]:
        """Flat, JSON-serializable mapping for storage."""
        return {
            key: entry.model_dump(mode="json") for key, entry in self.entries.items()
        }

    def get(self, issue_number: int) -> VoteStateEntry | None:
        return self.entries.get(str(issue_number))

    def ensure_open(self, issue_number: int) -> VoteStateEntry:
        """Return the entry for an open issue, creating or reopening it."""
        key = str(issue_number)
        entry = self.entries.get(key)
        if entry is None:
            entry = VoteStateEntry(status=VoteStatus.OPEN)
            self.entries[key] = entry
        else:
            entry.status = VoteStatus.OPEN
        return entry

    def mark_closed(self, issue_number: int) -> None:
        entry = self.entries.get(str(issue_number))
        if entry is not None:
            entry.status = VoteStatus.CLOSED

    def mark_notified(self, issue_number: int, when: datetime) -> None:
        """Record a notification, never moving last_notified backwards."""
        entry = self.ensure_open(issue_number)
        when = ensure_utc(when)
        if entry.last_notified is None or when > entry.last_notified:
            entry.last_notified = when

    def issue_numbers(self, status: VoteStatus | None = None) -> list[int]:
        """Issue numbers in state, optionally limited to one status."""
        return sorted(
            int(key)
            for key, entry in self.entries.items()
            if status is None or entry.status == status
        )
