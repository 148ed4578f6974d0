"""Main CLI entry point."""

import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from .options import VERBOSE_OPTION
from .reconcile import reconcile, tracked

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="board-sync",
    help="Reconcile open issues and pull requests with GitHub project boards",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when verbose, else WARNING."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # PyGithub and urllib3 are noisy at DEBUG
    for name in ("github", "urllib3"):
        logging.getLogger(name).setLevel(logging.INFO if verbose else logging.WARNING)


@app.callback()
def main(verbose: bool = VERBOSE_OPTION) -> None:
    """Reconcile open issues and pull requests with GitHub project boards."""
    configure_logging(verbose)


app.command(
    name="reconcile", context_settings={"help_option_names": ["-h", "--help"]}
)(reconcile)
app.command(name="tracked", context_settings={"help_option_names": ["-h", "--help"]})(
    tracked
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from board_sync import __version__

    console.print(f"Issue Board Sync v{__version__}")


if __name__ == "__main__":
    app()
