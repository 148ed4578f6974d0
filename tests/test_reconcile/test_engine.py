"""Tests for the reconciliation set difference."""

import logging
import random

import pytest

from board_sync.reconcile.engine import compute_untracked, reconcile_class
from board_sync.reconcile.models import ItemClass


class TestComputeUntracked:
    """Test compute_untracked function."""

    def test_basic_difference(self) -> None:
        fetched = {"u1", "u2", "u3"}
        tracked = {"u1", "u9"}

        assert compute_untracked(fetched, tracked) == frozenset({"u2", "u3"})

    def test_everything_tracked(self) -> None:
        assert compute_untracked({"u1"}, {"u1", "u2"}) == frozenset()

    def test_empty_board(self) -> None:
        assert compute_untracked({"u1", "u2"}, set()) == frozenset({"u1", "u2"})

    def test_nothing_fetched(self) -> None:
        assert compute_untracked(set(), {"u1"}) == frozenset()

    def test_inputs_are_not_modified(self) -> None:
        fetched = {"u1", "u2"}
        tracked = {"u1"}
        compute_untracked(fetched, tracked)

        assert fetched == {"u1", "u2"}
        assert tracked == {"u1"}

    @pytest.mark.parametrize("seed", [0, 1, 2, 3])
    def test_independent_of_insertion_order(self, seed: int) -> None:
        urls = [f"https://github.com/kubescape/r/issues/{n}" for n in range(50)]
        tracked_urls = urls[::3]
        shuffled = list(urls)
        random.Random(seed).shuffle(shuffled)
        shuffled_tracked = list(tracked_urls)
        random.Random(seed + 100).shuffle(shuffled_tracked)

        expected = compute_untracked(set(urls), set(tracked_urls))
        result = compute_untracked(set(shuffled), set(shuffled_tracked))

        assert result == expected
        assert result == set(urls) - set(tracked_urls)


class TestReconcileClass:
    """Test reconcile_class function."""

    def test_returns_difference_and_logs_counts(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="board_sync.reconcile.engine"):
            result = reconcile_class(
                ItemClass.PULL, frozenset({"p1", "p2"}), frozenset({"p1"})
            )

        assert result == frozenset({"p2"})
        assert "pull: 2 fetched, 1 tracked, 1 untracked" in caplog.text
