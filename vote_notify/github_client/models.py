"""Pydantic models for GitHub data structures.

These models map to the subset of GitHub's REST API v3 responses that the
vote reminder needs.
API Reference: https://docs.github.com/en/rest/issues
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GitHubUser(BaseModel):
    """GitHub user model representing a user account.

    Maps to GitHub REST API User object.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    login: str = Field(..., description="GitHub username/login (string)")
    id: int = Field(..., description="Unique user identifier (integer)")


class GitHubLabel(BaseModel):
    """GitHub label model representing repository labels.

    Maps to GitHub REST API Label object.
    API Reference: https://docs.github.com/en/rest/issues/labels
    """

    name: str = Field(..., description="Name of the label (string)")
    color: str = Field(
        ..., description="Hexadecimal color code without leading # (string)"
    )
    description: str | None = Field(
        None, description="Short description of the label (string, max 100 characters)"
    )


class GitHubReaction(BaseModel):
    """Reaction left on an issue comment.

    Votes are cast by reacting to the comment that opened the vote.
    API Reference: https://docs.github.com/en/rest/reactions/reactions
    """

    id: int = Field(..., description="Unique reaction identifier (integer)")
    user: GitHubUser = Field(..., description="User who reacted")
    content: str = Field(..., description="Reaction type, e.g. '+1', '-1', 'eyes'")


class GitHubComment(BaseModel):
    """GitHub comment model representing issue/PR comments.

    Maps to GitHub REST API Issue Comment object.
    API Reference: https://docs.github.com/en/rest/issues/comments
    """

    id: int = Field(..., description="Unique comment identifier (integer)")
    user: GitHubUser = Field(..., description="Comment author details")
    body: str = Field(..., description="Text content of the comment (string)")
    html_url: str = Field(..., description="Browser URL of the comment (string)")
    created_at: datetime = Field(
        ..., description="Timestamp of comment creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last comment update (ISO 8601)"
    )


class GitHubIssue(BaseModel):
    """GitHub issue model representing repository issues.

    Maps to GitHub REST API Issue object.
    API Reference: https://docs.github.com/en/rest/issues/issues
    """

    number: int = Field(..., description="Issue number within the repository (integer)")
    title: str = Field(..., description="Short description/title of the issue (string)")
    html_url: str = Field(..., description="Browser URL of the issue (string)")
    state: str = Field(..., description="Current state: 'open', 'closed' (string)")
    labels: list[GitHubLabel] = Field(
        default_factory=list, description="Array of labels attached to the issue"
    )
    user: GitHubUser = Field(..., description="Creator/author of the issue")
    comments: list[GitHubComment] = Field(
        default_factory=list, description="All comments on the issue"
    )
    created_at: datetime = Field(
        ..., description="Timestamp of issue creation (ISO 8601)"
    )
    updated_at: datetime = Field(
        ..., description="Timestamp of last issue update (ISO 8601)"
    )

    @property
    def label_names(self) -> set[str]:
        """Names of all labels on the issue."""
        return {label.name for label in self.labels}
