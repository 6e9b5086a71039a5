"""End-to-end vote reminder run."""

from datetime import datetime

from github.GithubException import GithubException
from pydantic import BaseModel, Field
from rich.console import Console

from ..config import NotifySettings
from ..github_client.client import GitHubClient
from ..slack.client import SlackClient
from ..state.branch import StateBranch
from ..state.manager import StateManager
from ..state.models import VoteState
from ..utils.dates import ensure_utc, utcnow
from ..voting.filter import filter_issues
from ..voting.models import Reviewer
from ..voting.resolver import VoteCommentNotFoundError, VoteResolver
from .dispatcher import DispatchReport, NotificationDispatcher

console = Console()


class RunResult(BaseModel):
    """Summary of one notification run."""

    open_issues: list[int] = Field(
        default_factory=list, description="Open vote issues found"
    )
    notified_issues: list[int] = Field(
        default_factory=list, description="Issues whose reminders were processed"
    )
    skipped_issues: list[int] = Field(
        default_factory=list, description="Eligible issues whose votes could not be read"
    )
    state: VoteState = Field(default_factory=VoteState)
    report: DispatchReport = Field(default_factory=DispatchReport)
    alert_sent: bool = Field(False, description="Whether a failure alert was posted")


def run_vote_notification(
    settings: NotifySettings,
    github_client: GitHubClient,
    dispatcher: NotificationDispatcher,
    members: list[Reviewer],
    state_manager: StateManager,
    state_branch: StateBranch | None = None,
    slack_client: SlackClient | None = None,
    now: datetime | None = None,
) -> RunResult:
    """Remind TSC members about open votes they have not cast.

    Steps: restore state, list open votes, filter by the vote buffer,
    resolve who still has to vote, dispatch reminders, persist the new
    state and post one alert if any reminder failed.

    Args:
        settings: Run parameters
        github_client: Client for the repository holding the votes
        dispatcher: Sends reminders over the selected channels
        members: TSC roster
        state_manager: Reads and writes the state file
        state_branch: State branch to check out and push, None to skip git
        slack_client: Client used for the failure alert
        now: Reference time, defaults to the current UTC time

    Returns:
        RunResult describing what happened
    """
    now = ensure_utc(now) if now is not None else utcnow()

    if state_branch is not None:
        state_branch.checkout()
    initial_state = state_manager.load(initialize=not settings.dry_run)

    issues = github_client.list_issues(
        settings.org, settings.repo, labels=[settings.label], state="open"
    )
    filtered = filter_issues(issues, initial_state, settings.days, now=now)
    state = filtered.state

    console.print(
        f"Issues to notify: {[issue.number for issue in filtered.issues_to_notify]}"
    )

    result = RunResult(open_issues=[issue.number for issue in issues])
    resolver = VoteResolver(github_client, settings.org, settings.repo)
    report = DispatchReport()

    for issue in filtered.issues_to_notify:
        try:
            progress = resolver.resolve(issue, members, now=now)
        except VoteCommentNotFoundError as e:
            console.print(f"[yellow]Skipping issue #{issue.number}: {e}[/yellow]")
            result.skipped_issues.append(issue.number)
            continue
        except (ValueError, GithubException) as e:
            console.print(
                f"[red]Skipping issue #{issue.number}, could not read votes: {e}[/red]"
            )
            result.skipped_issues.append(issue.number)
            continue

        dispatcher.dispatch(issue, progress, report)
        state.mark_notified(issue.number, now)
        result.notified_issues.append(issue.number)

    result.state = state
    result.report = report

    if settings.dry_run:
        console.print("[yellow]Dry run: state not saved, no alert sent[/yellow]")
        return result

    state_manager.save(state)

    # The alert goes out even when the push below fails.
    if report.has_failures:
        console.print(f"[red]Failed recipients: {', '.join(report.failed_ids)}[/red]")
        if slack_client is not None:
            result.alert_sent = slack_client.send_failure_alert(report.failed_ids)

    if state_branch is not None:
        state_branch.commit_and_push(
            f"Update vote state for issues {result.notified_issues or 'none'}"
        )

    return result
