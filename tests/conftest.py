"""Test configuration and fixtures."""

from datetime import datetime, timezone
from pathlib import Path

import pytest

from vote_notify.github_client.models import (
    GitHubComment,
    GitHubIssue,
    GitHubLabel,
    GitHubReaction,
    GitHubUser,
)
from vote_notify.voting.models import Reviewer, VoteProgress

NOW = datetime(2024, 9, 10, 9, 0, 0, tzinfo=timezone.utc)

MAINTAINERS_YAML = """\
- name: Alice Example
  github: alice
  email: alice@example.com
  slack: U01ALICE
  isTscMember: true
  repos:
    - community
- name: Bob Example
  github: Bob
  email: bob@example.com
  slack: U02BOB
  isTscMember: true
- name: Carol Example
  github: carol
  slack: U03CAROL
  isTscMember: false
"""


def make_issue(
    number: int,
    comments: list[GitHubComment] | None = None,
    title: str | None = None,
) -> GitHubIssue:
    """Build an open vote issue."""
    return GitHubIssue(
        number=number,
        title=title or f"Vote on proposal {number}",
        html_url=f"https://github.com/testorg/testrepo/issues/{number}",
        state="open",
        labels=[GitHubLabel(name="gitvote/open", color="ededed")],
        user=GitHubUser(login="proposer", id=1),
        comments=comments or [],
        created_at=datetime(2024, 9, 1, tzinfo=timezone.utc),
        updated_at=datetime(2024, 9, 1, tzinfo=timezone.utc),
    )


def make_vote_comment(
    comment_id: int = 500,
    created_at: datetime = datetime(2024, 9, 3, 8, 0, 0, tzinfo=timezone.utc),
    login: str = "git-vote[bot]",
    body: str = "## Vote created\n\n@asyncapi/tsc_members please vote",
) -> GitHubComment:
    return GitHubComment(
        id=comment_id,
        user=GitHubUser(login=login, id=99),
        body=body,
        html_url=f"https://github.com/testorg/testrepo/issues/1#issuecomment-{comment_id}",
        created_at=created_at,
        updated_at=created_at,
    )


def make_reaction(login: str, content: str = "+1", reaction_id: int = 1) -> GitHubReaction:
    return GitHubReaction(
        id=reaction_id, user=GitHubUser(login=login, id=reaction_id), content=content
    )


@pytest.fixture
def alice() -> Reviewer:
    return Reviewer(
        name="Alice Example",
        github="alice",
        email="alice@example.com",
        slack="U01ALICE",
        is_tsc_member=True,
    )


@pytest.fixture
def bob() -> Reviewer:
    return Reviewer(
        name="Bob Example",
        github="Bob",
        email="bob@example.com",
        slack="U02BOB",
        is_tsc_member=True,
    )


@pytest.fixture
def tsc_members(alice: Reviewer, bob: Reviewer) -> list[Reviewer]:
    return [alice, bob]


@pytest.fixture
def vote_issue() -> GitHubIssue:
    return make_issue(1, comments=[make_vote_comment()])


@pytest.fixture
def vote_progress(tsc_members: list[Reviewer]) -> VoteProgress:
    return VoteProgress(
        left_to_vote=tsc_members,
        days_since_start=7,
        vote_comment_url="https://github.com/testorg/testrepo/issues/1#issuecomment-500",
    )


@pytest.fixture
def maintainers_file(tmp_path: Path) -> Path:
    path = tmp_path / "MAINTAINERS.yaml"
    path.write_text(MAINTAINERS_YAML, encoding="utf-8")
    return path
