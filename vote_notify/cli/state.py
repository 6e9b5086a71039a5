"""CLI commands for inspecting vote state and the TSC roster."""

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ..state.manager import StateManager
from ..voting.members import load_maintainers
from .options import MAINTAINERS_OPTION, STATE_DIR_OPTION, STATE_FILE_OPTION

console = Console()
app = typer.Typer(help="Inspect vote state and maintainers")


@app.command()
def state(
    state_dir: Path = STATE_DIR_OPTION,
    state_file: str = STATE_FILE_OPTION,
) -> None:
    """Show the notification state of every tracked vote.

    Reads the state file from a local checkout of the state branch, e.g.
    after `git worktree add .vote_state vote_state`.
    """
    file_path = state_dir / state_file
    if not file_path.is_file():
        console.print(f"❌ [red]Error: State file {file_path} does not exist[/red]")
        raise typer.Exit(1)

    vote_state = StateManager(state_dir, state_file).load(initialize=False)
    if not vote_state.entries:
        console.print("[yellow]No votes tracked yet[/yellow]")
        return

    table = Table(title="Vote State")
    table.add_column("Issue", style="cyan")
    table.add_column("Status", style="green")
    table.add_column("Last Notified", style="yellow")

    for number, entry in sorted(
        vote_state.entries.items(), key=lambda item: int(item[0])
    ):
        last_notified = (
            entry.last_notified.strftime("%Y-%m-%d %H:%M UTC")
            if entry.last_notified
            else "never"
        )
        table.add_row(f"#{number}", entry.status.value, last_notified)

    console.print(table)


@app.command()
def members(
    maintainers: Path = MAINTAINERS_OPTION,
    all_maintainers: bool = typer.Option(
        False, "--all", "-a", help="Include maintainers outside the TSC"
    ),
) -> None:
    """List the maintainers who receive vote reminders."""
    try:
        roster = load_maintainers(maintainers)
    except ValueError as e:
        console.print(f"❌ [red]Error: {e}[/red]")
        raise typer.Exit(1)

    if not all_maintainers:
        roster = [member for member in roster if member.is_tsc_member]

    table = Table(title="TSC Members" if not all_maintainers else "Maintainers")
    table.add_column("Name", style="cyan")
    table.add_column("GitHub", style="green")
    table.add_column("Slack", style="magenta")
    table.add_column("Email", style="yellow")
    if all_maintainers:
        table.add_column("TSC")

    for member in roster:
        row = [member.name, member.github, member.slack or "-", member.email or "-"]
        if all_maintainers:
            row.append("yes" if member.is_tsc_member else "no")
        table.add_row(*row)

    console.print(table)
    console.print(f"{len(roster)} member(s)")
