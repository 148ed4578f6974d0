"""CLI commands for reconciling repositories against tracking boards."""

import json

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..config import ReconcileConfig
from ..errors import FetchWaveFailure, ReconcileError
from ..github_client.client import GitHubClient
from ..github_client.projects import ProjectBoardClient
from ..github_client.search import parse_exclusions
from ..reconcile.models import ReconcileSummary
from ..reconcile.orchestrator import Reconciler
from .options import (
    BOARD_LIMIT_OPTION,
    BOARD_OPTION,
    BUG_BOARD_OPTION,
    DRY_RUN_OPTION,
    EXCLUDE_REPO_OPTION,
    EXCLUDE_REPOS_OPTION,
    ITEM_LIMIT_OPTION,
    JSON_OPTION,
    OWNER_OPTION,
    PR_BOARD_OPTION,
    REPO_LIMIT_OPTION,
    TOKEN_OPTION,
    WORKERS_OPTION,
)

console = Console()

# Exit status when the run completed but some items could not be added.
EXIT_PARTIAL = 2


def reconcile(
    owner: str | None = OWNER_OPTION,
    bug_board: str | None = BUG_BOARD_OPTION,
    pr_board: str | None = PR_BOARD_OPTION,
    limit: int | None = ITEM_LIMIT_OPTION,
    repo_limit: int | None = REPO_LIMIT_OPTION,
    board_limit: int | None = BOARD_LIMIT_OPTION,
    workers: int | None = WORKERS_OPTION,
    exclude_repo: list[str] | None = EXCLUDE_REPO_OPTION,
    exclude_repos: str | None = EXCLUDE_REPOS_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    json_output: bool = JSON_OPTION,
    token: str | None = TOKEN_OPTION,
) -> None:
    """Add every open, untracked issue and pull request to its tracking board.

    Issues go to the bug board and pull requests to the PR board. Items
    already on a board are left alone.

    Examples:
        # Preview what would be added
        board-sync reconcile --owner kubescape --dry-run

        # Reconcile with custom boards, skipping a repository
        board-sync reconcile --owner myorg --bug-board 7 --pr-board 8 \\
            --exclude-repo website --workers 16
    """
    try:
        config = ReconcileConfig.from_env(
            owner=owner,
            bug_board=bug_board,
            pr_board=pr_board,
            item_limit=limit,
            repo_limit=repo_limit,
            board_limit=board_limit,
            max_workers=workers,
            excluded_repos=parse_exclusions(exclude_repo, exclude_repos),
        )
    except ValidationError as e:
        console.print(f"❌ Configuration error: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if not json_output:
        _print_parameters(config, dry_run)

    try:
        client = GitHubClient(token=token)
        reconciler = Reconciler(config, client, ProjectBoardClient(token=token))
        summary = reconciler.run(dry_run=dry_run)
    except ValueError as e:
        console.print(f"❌ Error: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)
    except FetchWaveFailure as e:
        console.print(f"❌ {e}", markup=False, soft_wrap=True)
        for outcome in e.failures:
            console.print(
                f"   {outcome.key}: {outcome.error}", markup=False, soft_wrap=True
            )
        raise typer.Exit(1)
    except ReconcileError as e:
        console.print(f"❌ {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(summary.model_dump_json(indent=2))
    else:
        _print_summary(summary)

    if summary.failed_count:
        raise typer.Exit(EXIT_PARTIAL)


def tracked(
    board: str = BOARD_OPTION,
    owner: str | None = OWNER_OPTION,
    board_limit: int | None = BOARD_LIMIT_OPTION,
    json_output: bool = JSON_OPTION,
    token: str | None = TOKEN_OPTION,
) -> None:
    """List the issue and pull request URLs currently on a board."""
    try:
        config = ReconcileConfig.from_env(owner=owner, board_limit=board_limit)
    except ValidationError as e:
        console.print(f"❌ Configuration error: {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    try:
        urls = ProjectBoardClient(token=token).list_board_items(
            config.owner, board, config.board_limit
        )
    except ReconcileError as e:
        console.print(f"❌ {e}", markup=False, soft_wrap=True)
        raise typer.Exit(1)

    if json_output:
        typer.echo(json.dumps(sorted(urls), indent=2))
        return

    for url in sorted(urls):
        console.print(url, highlight=False, soft_wrap=True)
    console.print(f"📋 {len(urls)} tracked items on board {board} ({config.owner})")


def _print_parameters(config: ReconcileConfig, dry_run: bool) -> None:
    params_table = Table(title="Reconcile Parameters")
    params_table.add_column("Parameter", style="cyan")
    params_table.add_column("Value", style="green")

    params_table.add_row("Owner", config.owner)
    params_table.add_row("Bug Board", config.bug_board)
    params_table.add_row("PR Board", config.pr_board)
    params_table.add_row("Item Limit", str(config.item_limit))
    params_table.add_row("Repo Limit", str(config.repo_limit))
    params_table.add_row("Workers", str(config.max_workers))
    if config.excluded_repos:
        params_table.add_row("Excluded Repos", ", ".join(config.excluded_repos))
    if dry_run:
        params_table.add_row("Mode", "Dry run")

    console.print(params_table)


def _print_summary(summary: ReconcileSummary) -> None:
    console.print(
        f"🔍 Scanned {summary.repositories} repositories of {summary.owner}"
    )

    results_table = Table(title="Reconcile Results")
    results_table.add_column("Class", style="cyan")
    results_table.add_column("Board", style="magenta")
    results_table.add_column("Fetched", justify="right")
    results_table.add_column("Tracked", justify="right")
    results_table.add_column("Untracked", justify="right", style="yellow")
    results_table.add_column("Added", justify="right", style="green")
    results_table.add_column("Failed", justify="right", style="red")

    for class_summary in summary.classes:
        results_table.add_row(
            class_summary.item_class.value,
            class_summary.board,
            str(class_summary.fetched),
            str(class_summary.tracked),
            str(len(class_summary.untracked)),
            str(len(class_summary.added)),
            str(len(class_summary.failed)),
        )
    console.print(results_table)

    if summary.dry_run:
        for class_summary in summary.classes:
            for url in class_summary.untracked:
                console.print(f"Would add {url}", highlight=False, soft_wrap=True)
        console.print("🧪 Dry run: no items were added")
        return

    for class_summary in summary.classes:
        for url, error in class_summary.failed.items():
            console.print(
                f"❌ Failed to add {url}: {error}",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )

    if summary.failed_count:
        console.print(
            f"⚠️  Added {summary.added_count} items, {summary.failed_count} failed"
        )
    else:
        console.print(f"✨ Added {summary.added_count} items")
