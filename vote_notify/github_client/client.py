"""GitHub API client using PyGitHub."""

import os
import time

from github import Github
from github.GithubException import (
    GithubException,
    RateLimitExceededException,
    UnknownObjectException,
)
from github.Issue import Issue
from github.IssueComment import IssueComment
from github.Label import Label
from github.NamedUser import NamedUser
from github.Reaction import Reaction
from github.Repository import Repository
from rich.console import Console

from .models import GitHubComment, GitHubIssue, GitHubLabel, GitHubReaction, GitHubUser

console = Console()


class GitHubClient:
    """GitHub API client with rate limiting and authentication."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)

    def _check_rate_limit(self) -> None:
        """Check rate limit and sleep if necessary."""
        try:
            rate_limit = self.github.get_rate_limit()
        except GithubException as e:
            console.print(f"Warning: Could not check GitHub rate limit: {e}")
            return

        remaining = rate_limit.rate.remaining
        console.print(f"GitHub API rate limit: {remaining} requests remaining")

        if remaining < 10:
            reset_time = rate_limit.rate.reset.timestamp()
            sleep_time = max(reset_time - time.time() + 1, 0)
            console.print(f"Rate limit low, sleeping for {sleep_time:.1f} seconds...")
            time.sleep(sleep_time)

    def _convert_user(self, github_user: NamedUser) -> GitHubUser:
        """Convert PyGitHub user to our model."""
        return GitHubUser(login=github_user.login, id=github_user.id)

    def _convert_label(self, github_label: Label) -> GitHubLabel:
        """Convert PyGitHub label to our model."""
        return GitHubLabel(
            name=github_label.name,
            color=github_label.color,
            description=github_label.description,
        )

    def _convert_comment(self, github_comment: IssueComment) -> GitHubComment:
        """Convert PyGitHub comment to our model."""
        return GitHubComment(
            id=github_comment.id,
            user=self._convert_user(github_comment.user),
            body=github_comment.body or "",
            html_url=github_comment.html_url,
            created_at=github_comment.created_at,
            updated_at=github_comment.updated_at,
        )

    def _convert_reaction(self, github_reaction: Reaction) -> GitHubReaction:
        """Convert PyGitHub reaction to our model."""
        return GitHubReaction(
            id=github_reaction.id,
            user=self._convert_user(github_reaction.user),
            content=github_reaction.content,
        )

    def _convert_issue(self, github_issue: Issue) -> GitHubIssue:
        """Convert PyGitHub issue to our model, including its comments."""
        labels = [self._convert_label(label) for label in github_issue.labels]
        comments = [
            self._convert_comment(comment) for comment in github_issue.get_comments()
        ]

        return GitHubIssue(
            number=github_issue.number,
            title=github_issue.title,
            html_url=github_issue.html_url,
            state=github_issue.state,
            labels=labels,
            user=self._convert_user(github_issue.user),
            comments=comments,
            created_at=github_issue.created_at,
            updated_at=github_issue.updated_at,
        )

    def get_repository(self, org: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{org}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {org}/{repo} not found")

    def list_issues(
        self,
        org: str,
        repo: str,
        labels: list[str] | None = None,
        state: str = "open",
    ) -> list[GitHubIssue]:
        """List repository issues carrying all of the given labels.

        Args:
            org: Organization name
            repo: Repository name
            labels: List of label names to filter by
            state: Issue state (open, closed, all)

        Returns:
            List of GitHubIssue objects with their comments
        """
        self._check_rate_limit()

        repository = self.get_repository(org, repo)

        try:
            if labels:
                github_issues = repository.get_issues(state=state, labels=labels)
            else:
                github_issues = repository.get_issues(state=state)

            result_issues = []
            for github_issue in github_issues:
                result_issues.append(self._convert_issue(github_issue))
                console.print(
                    f"Fetched issue #{github_issue.number}: {github_issue.title}"
                )
            return result_issues

        except RateLimitExceededException:
            console.print("Rate limit exceeded, waiting...")
            time.sleep(60)
            return self.list_issues(org, repo, labels=labels, state=state)
        except Exception as e:
            console.print(f"Error listing issues for {org}/{repo}: {e}")
            raise

    def get_comment_reactions(
        self, org: str, repo: str, issue_number: int, comment_id: int
    ) -> list[GitHubReaction]:
        """Get all reactions left on an issue comment.

        Args:
            org: Organization name
            repo: Repository name
            issue_number: Issue number the comment belongs to
            comment_id: Comment identifier

        Returns:
            List of GitHubReaction objects

        Raises:
            ValueError: If repository, issue or comment not found
        """
        self._check_rate_limit()

        try:
            repository = self.get_repository(org, repo)
            github_comment = repository.get_issue(issue_number).get_comment(comment_id)
            return [
                self._convert_reaction(reaction)
                for reaction in github_comment.get_reactions()
            ]

        except UnknownObjectException:
            raise ValueError(
                f"Comment {comment_id} on issue #{issue_number} not found "
                f"in {org}/{repo}"
            )
        except RateLimitExceededException:
            console.print("Rate limit exceeded during reaction fetch, waiting...")
            time.sleep(60)
            return self.get_comment_reactions(org, repo, issue_number, comment_id)
