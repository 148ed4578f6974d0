"""Standardized CLI option definitions for consistent shorthand mappings.

Options default to None so that ``BOARD_SYNC_*`` environment variables and
the config defaults apply when a flag is not given.
"""

import typer

# Core options - used across most commands
OWNER_OPTION = typer.Option(
    None, "--owner", "-o", help="GitHub organization or user (default: kubescape)"
)

BUG_BOARD_OPTION = typer.Option(
    None, "--bug-board", help="Project number tracking issues (default: 4)"
)

PR_BOARD_OPTION = typer.Option(
    None, "--pr-board", help="Project number tracking pull requests (default: 5)"
)

BOARD_OPTION = typer.Option(..., "--board", "-b", help="Project number to read")

# Limit options
ITEM_LIMIT_OPTION = typer.Option(
    None,
    "--limit",
    "-l",
    help="Maximum open issues and pull requests fetched per repository",
)

REPO_LIMIT_OPTION = typer.Option(
    None, "--repo-limit", help="Maximum number of repositories to scan"
)

BOARD_LIMIT_OPTION = typer.Option(
    None, "--board-limit", help="Maximum number of entries read from a board"
)

WORKERS_OPTION = typer.Option(
    None, "--workers", "-w", help="Maximum concurrent tasks (default: CPU count)"
)

# Behavior options - control command behavior
DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Report untracked items without adding them"
)

JSON_OPTION = typer.Option(False, "--json", help="Print the summary as JSON")

VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

# Repository exclusion options
EXCLUDE_REPO_OPTION = typer.Option(
    None,
    "--exclude-repo",
    "-x",
    help="Repository to exclude from the scan (can be used multiple times)",
)

EXCLUDE_REPOS_OPTION = typer.Option(
    None,
    "--exclude-repos",
    help="Comma-separated list of repositories to exclude",
)

# Authentication options
TOKEN_OPTION = typer.Option(
    None, "--token", "-t", help="GitHub API token (defaults to GITHUB_TOKEN env var)"
)
