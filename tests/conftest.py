"""Test configuration and fixtures."""

import threading
from collections import Counter

import pytest

from board_sync.config import ReconcileConfig
from board_sync.errors import WriteFailure
from board_sync.github_client.models import RepositoryRef


class FakeGitHub:
    """In-memory repositories with open issue and pull request URLs."""

    def __init__(
        self,
        owner: str,
        issues: dict[str, list[str]],
        pulls: dict[str, list[str]] | None = None,
    ):
        self.owner = owner
        self.issues = issues
        self.pulls = pulls or {}
        self.fetch_errors: dict[str, Exception] = {}

    def list_repositories(self, owner: str, limit: int) -> list[RepositoryRef]:
        names = sorted(set(self.issues) | set(self.pulls))
        return [RepositoryRef(owner=owner, name=name) for name in names][:limit]

    def list_open_issues(self, repo: RepositoryRef, limit: int) -> list[str]:
        if repo.name in self.fetch_errors:
            raise self.fetch_errors[repo.name]
        return self.issues.get(repo.name, [])[:limit]

    def list_open_pulls(self, repo: RepositoryRef, limit: int) -> list[str]:
        return self.pulls.get(repo.name, [])[:limit]


class FakeBoards:
    """Project boards that remember added items, like the real API."""

    def __init__(self, boards: dict[str, set[str]] | None = None):
        self.boards = {key: set(value) for key, value in (boards or {}).items()}
        self.failing: set[str] = set()
        self.add_calls: list[tuple[str, str, str]] = []
        self._lock = threading.Lock()

    def list_board_items(self, owner: str, board: str, limit: int) -> frozenset[str]:
        with self._lock:
            return frozenset(self.boards.get(board, set()))

    def add_board_item(self, owner: str, board: str, url: str) -> None:
        with self._lock:
            self.add_calls.append((owner, board, url))
            if url in self.failing:
                raise WriteFailure(f"Failed to add {url} to board {board}")
            self.boards.setdefault(board, set()).add(url)

    def add_counts(self) -> Counter[str]:
        return Counter(url for _, _, url in self.add_calls)


@pytest.fixture
def config() -> ReconcileConfig:
    """Config with the default boards and a small worker pool."""
    return ReconcileConfig(owner="kubescape", max_workers=4)


@pytest.fixture
def fake_boards() -> FakeBoards:
    return FakeBoards()


@pytest.fixture
def make_github() -> type[FakeGitHub]:
    """Factory for in-memory GitHub data: ``make_github(owner, issues, pulls)``."""
    return FakeGitHub
