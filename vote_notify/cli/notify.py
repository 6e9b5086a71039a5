"""CLI command that reminds TSC members about open votes."""

import logging
import subprocess
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import (
    MANUAL_BUFFER_DAYS,
    NotificationMethod,
    NotifySettings,
    buffer_days_for_event,
    parse_repository,
)
from ..github_client.client import GitHubClient
from ..mail.client import MailClient
from ..notify.dispatcher import NotificationDispatcher
from ..notify.workflow import RunResult, run_vote_notification
from ..slack.client import SlackClient
from ..state.branch import StateBranch
from ..state.manager import StateManager
from ..voting.members import load_tsc_members
from .options import (
    DAYS_OPTION,
    DRY_RUN_OPTION,
    EVENT_OPTION,
    FORCE_OPTION,
    LABEL_OPTION,
    MAINTAINERS_OPTION,
    METHOD_OPTION,
    REPOSITORY_OPTION,
    STATE_BRANCH_OPTION,
    STATE_DIR_OPTION,
    STATE_FILE_OPTION,
    TOKEN_OPTION,
    USE_BRANCH_OPTION,
    VERBOSE_OPTION,
)

console = Console()
app = typer.Typer(help="Remind TSC members about open votes")

# Exit code when the run finished but some reminders could not be delivered.
EXIT_NOTIFICATION_FAILURES = 2


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _show_settings(settings: NotifySettings) -> None:
    table = Table(title="Notification Parameters")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Repository", f"{settings.org}/{settings.repo}")
    table.add_row("Label", settings.label)
    table.add_row("Method", settings.method.value)
    table.add_row("Vote Buffer", f"{settings.days} days")
    table.add_row("Maintainers", str(settings.maintainers_file))
    if settings.use_state_branch:
        table.add_row("State", f"{settings.state_branch}:{settings.state_file}")
    else:
        table.add_row("State", str(settings.state_dir / settings.state_file))
    if settings.dry_run:
        table.add_row("Dry Run", "yes")

    console.print(table)


def _show_result(result: RunResult) -> None:
    table = Table(title="Notification Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Open Votes", str(len(result.open_issues)))
    notified = ", ".join(map(str, result.notified_issues))
    table.add_row("Issues Notified", notified or "-")
    if result.skipped_issues:
        skipped = ", ".join(map(str, result.skipped_issues))
        table.add_row("Skipped (votes unreadable)", skipped)
    table.add_row("Reminders Sent", str(result.report.sent))
    table.add_row("Failed Recipients", str(len(result.report.failed_ids)))

    console.print(table)


@app.command()
def notify(
    repository: str = REPOSITORY_OPTION,
    label: str = LABEL_OPTION,
    method: NotificationMethod = METHOD_OPTION,
    days: int | None = DAYS_OPTION,
    event: str | None = EVENT_OPTION,
    force: bool = FORCE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    maintainers: Path = MAINTAINERS_OPTION,
    state_dir: Path = STATE_DIR_OPTION,
    state_file: str = STATE_FILE_OPTION,
    state_branch: str = STATE_BRANCH_OPTION,
    branch: bool = USE_BRANCH_OPTION,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Remind TSC members about open votes they have not cast.

    Scheduled runs skip votes reminded about within the last 5 days; manual
    dispatch (GITHUB_EVENT_NAME=workflow_dispatch) or --force reminds about
    every open vote. Failed recipients are reported once through the Slack
    alert webhook and make the command exit with code 2.

    Examples:
        vote-notify notify --repository asyncapi/community --method slack
        vote-notify notify -r myorg/governance --no-branch --dry-run
    """
    configure_logging(verbose)

    try:
        org, repo = parse_repository(repository)
    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    if force:
        buffer_days = MANUAL_BUFFER_DAYS
    elif days is not None:
        buffer_days = days
    else:
        buffer_days = buffer_days_for_event(event)

    settings = NotifySettings(
        org=org,
        repo=repo,
        label=label,
        days=buffer_days,
        method=method,
        maintainers_file=maintainers,
        state_dir=state_dir,
        state_file=state_file,
        state_branch=state_branch,
        use_state_branch=branch,
        dry_run=dry_run,
    )
    _show_settings(settings)

    try:
        members = load_tsc_members(settings.maintainers_file)
        console.print(f"👥 Loaded {len(members)} TSC members")

        github_client = GitHubClient(token=token)

        slack_client = SlackClient()
        if settings.method.uses_slack and not settings.dry_run:
            slack_client.config.validate()

        mail_client = None
        if settings.method.uses_email:
            mail_client = MailClient()
            if not settings.dry_run:
                mail_client.config.validate()

    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    dispatcher = NotificationDispatcher(
        settings.method,
        slack_client=slack_client if settings.method.uses_slack else None,
        mail_client=mail_client,
        dry_run=settings.dry_run,
    )
    state_manager = StateManager(settings.state_dir, settings.state_file)
    state_repo = StateBranch(
        branch=settings.state_branch, worktree_dir=settings.state_dir
    )

    try:
        result = run_vote_notification(
            settings,
            github_client,
            dispatcher,
            members,
            state_manager,
            state_branch=state_repo if settings.use_state_branch else None,
            slack_client=slack_client,
        )
    except subprocess.CalledProcessError as e:
        console.print(
            f"❌ [red]Git command failed: {' '.join(e.cmd)}\n{e.stderr}[/red]"
        )
        raise typer.Exit(1)
    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)
    finally:
        if mail_client is not None:
            mail_client.close()

    _show_result(result)

    if result.report.has_failures:
        console.print(
            f"⚠️  [yellow]Could not notify: {', '.join(result.report.failed_ids)}[/yellow]"
        )
        raise typer.Exit(EXIT_NOTIFICATION_FAILURES)

    console.print("✅ [green]Vote notifications complete[/green]")
