"""Models for reviewers and vote progress."""

from pydantic import BaseModel, ConfigDict, Field


class Reviewer(BaseModel):
    """A maintainer entry from MAINTAINERS.yaml.

    Only the fields needed for reminders are modelled; other keys in the
    file (twitter, repos, availableForHire, ...) are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(..., description="Display name of the maintainer")
    github: str = Field(..., description="GitHub login used to match votes")
    email: str | None = Field(None, description="Address for email reminders")
    slack: str | None = Field(None, description="Slack member id for direct messages")
    is_tsc_member: bool = Field(
        False,
        alias="isTscMember",
        description="Whether the maintainer votes on TSC decisions",
    )


class VoteProgress(BaseModel):
    """Outcome of resolving who still has to vote on an issue."""

    left_to_vote: list[Reviewer] = Field(
        default_factory=list, description="TSC members who have not voted yet"
    )
    days_since_start: int = Field(
        ..., description="Whole days since the vote was opened"
    )
    vote_comment_url: str = Field(
        ..., description="Link to the comment that opened the vote"
    )
