"""Project board access through the ``gh project`` CLI."""

import logging
import os
import subprocess
from collections.abc import Callable, Sequence

from pydantic import ValidationError

from ..errors import BoardReadFailure, DecodeFailure, WriteFailure
from .models import ProjectItemList

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess[str]]


class ProjectBoardClient:
    """Read and add items on GitHub project boards.

    When ``token`` is given it is exported to ``gh`` as ``GH_TOKEN``; otherwise
    ``gh`` uses its own configuration (``GH_TOKEN``, ``GITHUB_TOKEN`` or a
    stored login).
    """

    def __init__(
        self,
        token: str | None = None,
        gh_binary: str = "gh",
        runner: Runner = subprocess.run,
    ):
        self.token = token
        self.gh_binary = gh_binary
        self._run = runner

    def _gh(self, args: Sequence[str]) -> subprocess.CompletedProcess[str]:
        command = [self.gh_binary, *args]
        logger.debug("Running %s", " ".join(command))
        env = {**os.environ, "GH_TOKEN": self.token} if self.token else None
        return self._run(
            command, capture_output=True, text=True, check=False, env=env
        )

    def list_board_items(self, owner: str, board: str, limit: int) -> frozenset[str]:
        """Return the URLs of issues and pull requests linked from a board.

        Draft entries and entries without linked content are skipped.

        Args:
            owner: Organization or user owning the board
            board: Project number
            limit: Maximum number of board entries to read

        Raises:
            BoardReadFailure: If the CLI fails or cannot be started, or the
                board holds more than ``limit`` entries
            DecodeFailure: If the CLI output is not the expected JSON
        """
        args = [
            "project",
            "item-list",
            board,
            "--owner",
            owner,
            "-L",
            str(limit),
            "--format",
            "json",
        ]
        try:
            completed = self._gh(args)
        except OSError as e:
            raise BoardReadFailure(f"Failed to run {self.gh_binary}: {e}") from e
        except UnicodeDecodeError as e:
            raise DecodeFailure(
                f"Undecodable item-list output for board {board}: {e}"
            ) from e

        if completed.returncode != 0:
            raise BoardReadFailure(
                f"Failed to list items of board {board} for {owner}: "
                f"{_diagnostic(completed)}"
            )

        try:
            listing = ProjectItemList.model_validate_json(completed.stdout)
        except ValidationError as e:
            raise DecodeFailure(
                f"Unexpected item-list output for board {board}: {e}"
            ) from e

        # A truncated read would make tracked items look untracked.
        total = listing.total_count
        if total is not None and total > len(listing.items):
            raise BoardReadFailure(
                f"Board {board} holds {total} items but only "
                f"{len(listing.items)} were read; raise the board limit above {limit}"
            )

        urls = frozenset(item.url for item in listing.items if item.url)
        logger.info(
            "Board %s/%s: %d entries, %d linked items",
            owner,
            board,
            len(listing.items),
            len(urls),
        )
        return urls

    def add_board_item(self, owner: str, board: str, url: str) -> None:
        """Add an issue or pull request to a board.

        The board API does not deduplicate; adding a URL twice creates two
        entries.

        Raises:
            WriteFailure: If the CLI fails or cannot be started
        """
        args = ["project", "item-add", board, "--owner", owner, "--url", url]
        try:
            completed = self._gh(args)
        except OSError as e:
            raise WriteFailure(f"Failed to run {self.gh_binary}: {e}") from e
        except UnicodeDecodeError as e:
            raise WriteFailure(f"Undecodable item-add output for {url}: {e}") from e

        if completed.returncode != 0:
            raise WriteFailure(
                f"Failed to add {url} to board {board}: {_diagnostic(completed)}"
            )
        logger.debug("Added %s to board %s/%s", url, owner, board)


def _diagnostic(completed: subprocess.CompletedProcess[str]) -> str:
    output = (completed.stderr or completed.stdout or "").strip()
    return output or f"exit status {completed.returncode}"
