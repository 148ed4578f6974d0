"""Tests for the thread-safe item set."""

import threading

from board_sync.reconcile.item_set import ConcurrentItemSet


class TestConcurrentItemSet:
    """Test ConcurrentItemSet class."""

    def test_add_and_contains(self) -> None:
        items = ConcurrentItemSet()
        items.add("https://github.com/kubescape/a/issues/1")

        assert "https://github.com/kubescape/a/issues/1" in items
        assert "https://github.com/kubescape/a/issues/2" not in items
        assert len(items) == 1

    def test_duplicates_are_collapsed(self) -> None:
        items = ConcurrentItemSet(["u1", "u2"])
        items.update(["u2", "u3", "u3"])
        items.add("u1")

        assert items.snapshot() == frozenset({"u1", "u2", "u3"})

    def test_snapshot_is_detached(self) -> None:
        """Later inserts do not change a snapshot already taken."""
        items = ConcurrentItemSet(["u1"])
        snapshot = items.snapshot()
        items.add("u2")

        assert snapshot == frozenset({"u1"})
        assert len(items) == 2

    def test_concurrent_updates_lose_nothing(self) -> None:
        """Many threads inserting overlapping batches end with the union."""
        items = ConcurrentItemSet()
        start = threading.Barrier(8)

        def writer(worker: int) -> None:
            start.wait()
            for i in range(500):
                items.update([f"u{worker}-{i}", f"shared-{i}"])

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(items) == 8 * 500 + 500

    def test_iteration_uses_snapshot(self) -> None:
        items = ConcurrentItemSet(["u1", "u2"])
        seen = []
        for item in items:
            items.add(item + "-copy")
            seen.append(item)

        assert sorted(seen) == ["u1", "u2"]
        assert len(items) == 4
