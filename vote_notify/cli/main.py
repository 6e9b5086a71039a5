"""Main CLI entry point."""

import typer
from rich.console import Console

from .notify import notify
from .state import members, state

app = typer.Typer(
    name="vote-notify",
    help="Remind TSC members about open governance votes",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="notify", context_settings={"help_option_names": ["-h", "--help"]})(
    notify
)
app.command(name="state", context_settings={"help_option_names": ["-h", "--help"]})(
    state
)
app.command(name="members", context_settings={"help_option_names": ["-h", "--help"]})(
    members
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from vote_notify import __version__

    console.print(f"Vote Notify v{__version__}")


if __name__ == "__main__":
    app()
