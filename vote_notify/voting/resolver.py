"""Work out which TSC members have not voted on an issue yet."""

from datetime import datetime

from rich.console import Console

from ..github_client.client import GitHubClient
from ..github_client.models import GitHubComment, GitHubIssue, GitHubReaction
from ..utils.dates import days_between, utcnow
from .models import Reviewer, VoteProgress

console = Console()

VOTE_BOT_LOGIN = "git-vote[bot]"
VOTE_CREATED_MARKER = "Vote created"


class VoteCommentNotFoundError(LookupError):
    """Raised when an issue has no comment opening a vote."""

    def __init__(self, issue_number: int):
        self.issue_number = issue_number
        super().__init__(f"No vote comment found on issue #{issue_number}")


def find_vote_comment(issue: GitHubIssue) -> GitHubComment:
    """Return the most recent comment in which the vote bot opened a vote."""
    for comment in reversed(issue.comments):
        if (
            comment.user.login == VOTE_BOT_LOGIN
            and VOTE_CREATED_MARKER in comment.body
        ):
            return comment
    raise VoteCommentNotFoundError(issue.number)


def members_left_to_vote(
    members: list[Reviewer], reactions: list[GitHubReaction]
) -> list[Reviewer]:
    """Members without any reaction on the vote comment.

    Logins are compared case-insensitively.
    """
    voters = {reaction.user.login.lower() for reaction in reactions}
    return [member for member in members if member.github.lower() not in voters]


class VoteResolver:
    """Resolves vote progress for issues of one repository."""

    def __init__(self, client: GitHubClient, org: str, repo: str):
        self.client = client
        self.org = org
        self.repo = repo

    def resolve(
        self,
        issue: GitHubIssue,
        members: list[Reviewer],
        now: datetime | None = None,
    ) -> VoteProgress:
        """Find the members who still owe a vote on ``issue``.

        Args:
            issue: Open vote issue, with comments loaded
            members: TSC roster
            now: Reference time for the elapsed days, defaults to now

        Returns:
            VoteProgress for the issue

        Raises:
            VoteCommentNotFoundError: If the vote bot never opened a vote here
        """
        vote_comment = find_vote_comment(issue)
        reactions = self.client.get_comment_reactions(
            self.org, self.repo, issue.number, vote_comment.id
        )
        left_to_vote = members_left_to_vote(members, reactions)

        console.print(
            f"Issue #{issue.number}: {len(members) - len(left_to_vote)} of "
            f"{len(members)} TSC members voted"
        )

        return VoteProgress(
            left_to_vote=left_to_vote,
            days_since_start=days_between(
                vote_comment.created_at, now if now is not None else utcnow()
            ),
            vote_comment_url=vote_comment.html_url,
        )
