"""Sequence enumeration, fetch, board read, diff and write for one run."""

import logging
from typing import TYPE_CHECKING

from ..errors import FetchWaveFailure
from ..github_client.models import RepositoryRef
from ..github_client.search import filter_repositories
from .dispatcher import WaveDispatcher, WaveResult
from .engine import reconcile_class
from .item_set import ConcurrentItemSet
from .models import ClassSummary, ItemClass, ReconcileSummary

if TYPE_CHECKING:
    from ..config import ReconcileConfig
    from ..github_client.client import GitHubClient
    from ..github_client.projects import ProjectBoardClient

logger = logging.getLogger(__name__)


class Reconciler:
    """Files every open, untracked issue and pull request on its board.

    Read-side failures (listing, fetching, board reads) abort the run with
    the classified error. Write failures are collected per item and returned
    in the summary; the remaining writes of the wave still run.
    """

    def __init__(
        self,
        config: "ReconcileConfig",
        github: "GitHubClient",
        boards: "ProjectBoardClient",
    ):
        self.config = config
        self.github = github
        self.boards = boards

    def run(self, dry_run: bool = False) -> ReconcileSummary:
        """Reconcile both item classes and return the run summary.

        Every board is read before the first write wave starts.
        """
        repositories = self.enumerate_repositories()
        fetched = self.fetch_items(repositories)
        tracked = {item_class: self.read_board(item_class) for item_class in ItemClass}

        summary = ReconcileSummary(
            owner=self.config.owner,
            repositories=len(repositories),
            dry_run=dry_run,
        )
        for item_class in ItemClass:
            summary.classes.append(
                self.reconcile(
                    item_class,
                    fetched[item_class],
                    tracked[item_class],
                    dry_run=dry_run,
                )
            )
        return summary

    def enumerate_repositories(self) -> list[RepositoryRef]:
        repositories = self.github.list_repositories(
            self.config.owner, self.config.repo_limit
        )
        selected = filter_repositories(repositories, self.config.excluded_repos)
        if len(selected) != len(repositories):
            logger.info(
                "Excluded %d repositories", len(repositories) - len(selected)
            )
        return selected

    def fetch_items(
        self, repositories: list[RepositoryRef]
    ) -> dict[ItemClass, frozenset[str]]:
        """Fetch open issues and pulls of every repository in one wave.

        Returns complete snapshots only: if any fetch task fails the whole
        wave is reported as a ``FetchWaveFailure``.
        """
        issues = ConcurrentItemSet()
        pulls = ConcurrentItemSet()

        with WaveDispatcher(
            self.config.max_workers, name="fetch", fail_fast=True
        ) as dispatcher:
            for repo in repositories:
                dispatcher.submit(
                    repo.full_name, self._fetch_repository, repo, issues, pulls
                )
            result = dispatcher.wait()

        if not result.ok:
            for outcome in result.failures:
                logger.error("Fetch failed for %s: %s", outcome.key, outcome.error)
            raise FetchWaveFailure(result.failures, total=len(result.outcomes))

        return {ItemClass.ISSUE: issues.snapshot(), ItemClass.PULL: pulls.snapshot()}

    def _fetch_repository(
        self,
        repo: RepositoryRef,
        issues: ConcurrentItemSet,
        pulls: ConcurrentItemSet,
    ) -> int:
        limit = self.config.item_limit
        issue_urls = self.github.list_open_issues(repo, limit)
        pull_urls = self.github.list_open_pulls(repo, limit)
        issues.update(issue_urls)
        pulls.update(pull_urls)
        return len(issue_urls) + len(pull_urls)

    def read_board(self, item_class: ItemClass) -> frozenset[str]:
        return self.boards.list_board_items(
            self.config.owner,
            self.config.board_for(item_class),
            self.config.board_limit,
        )

    def reconcile(
        self,
        item_class: ItemClass,
        fetched: frozenset[str],
        tracked: frozenset[str],
        dry_run: bool = False,
    ) -> ClassSummary:
        """Diff one class against its board contents and add what is missing."""
        board = self.config.board_for(item_class)
        untracked = reconcile_class(item_class, fetched, tracked)

        summary = ClassSummary(
            item_class=item_class,
            board=board,
            fetched=len(fetched),
            tracked=len(tracked),
            untracked=sorted(untracked),
        )
        if dry_run or not untracked:
            return summary

        result = self.add_items(board, untracked)
        summary.added = sorted(outcome.key for outcome in result.succeeded)
        summary.failed = {
            outcome.key: str(outcome.error) for outcome in result.failures
        }
        return summary

    def add_items(self, board: str, urls: frozenset[str]) -> WaveResult:
        """Add each URL to ``board`` exactly once, in a fresh write wave."""
        with WaveDispatcher(
            self.config.max_workers, name=f"write-{board}"
        ) as dispatcher:
            for url in sorted(urls):
                dispatcher.submit(
                    url, self.boards.add_board_item, self.config.owner, board, url
                )
            result = dispatcher.wait()

        for outcome in result.failures:
            logger.warning(
                "Failed to add %s to board %s: %s", outcome.key, board, outcome.error
            )
        return result
