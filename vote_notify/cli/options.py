"""Standardized CLI option definitions shared by the commands."""

from pathlib import Path

import typer

from ..config import NotificationMethod, VOTE_OPEN_LABEL
from ..state.branch import DEFAULT_STATE_BRANCH
from ..state.manager import DEFAULT_STATE_DIR, DEFAULT_STATE_FILE
from ..voting.members import DEFAULT_MAINTAINERS_FILE

REPOSITORY_OPTION = typer.Option(
    ...,
    "--repository",
    "-r",
    envvar="GITHUB_REPOSITORY",
    help="Repository holding the votes as owner/name (defaults to GITHUB_REPOSITORY)",
)

LABEL_OPTION = typer.Option(
    VOTE_OPEN_LABEL, "--label", "-l", help="Label marking open votes"
)

METHOD_OPTION = typer.Option(
    NotificationMethod.BOTH,
    "--method",
    "-m",
    envvar="NOTIFY_METHOD",
    case_sensitive=False,
    help="Notification channel(s): email, slack or both",
)

DAYS_OPTION = typer.Option(
    None,
    "--days",
    min=0,
    help="Minimum days between reminders (default: 0 on manual dispatch, 5 otherwise)",
)

EVENT_OPTION = typer.Option(
    None,
    "--event",
    envvar="GITHUB_EVENT_NAME",
    help="Triggering event name, used to pick the default vote buffer",
)

FORCE_OPTION = typer.Option(
    False, "--force", "-f", help="Notify every open vote regardless of the buffer"
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Preview reminders without sending or saving"
)

MAINTAINERS_OPTION = typer.Option(
    Path(DEFAULT_MAINTAINERS_FILE),
    "--maintainers",
    help="Path to MAINTAINERS.yaml",
)

STATE_DIR_OPTION = typer.Option(
    Path(DEFAULT_STATE_DIR),
    "--state-dir",
    help="Directory the state branch is checked out into",
)

STATE_FILE_OPTION = typer.Option(
    DEFAULT_STATE_FILE, "--state-file", help="Name of the state file"
)

STATE_BRANCH_OPTION = typer.Option(
    DEFAULT_STATE_BRANCH, "--state-branch", help="Branch storing the state file"
)

USE_BRANCH_OPTION = typer.Option(
    True,
    "--branch/--no-branch",
    help="Check out and push the state branch (disable to use a local state dir)",
)

TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")
