"""Bounded-parallelism task runner used for fetch and write waves.

A ``WaveDispatcher`` runs exactly one wave: tasks are submitted, ``wait``
blocks until every one of them has finished, and the underlying thread pool
is shut down. A second wave needs a new dispatcher.
"""

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from dataclasses import dataclass, field
from typing import Any

from ..config import default_workers

logger = logging.getLogger(__name__)


@dataclass
class TaskOutcome:
    """Result of one task: a value, a classified error, or a cancellation."""

    key: str
    value: Any = None
    error: BaseException | None = None
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None and not self.cancelled


@dataclass
class WaveResult:
    """Outcomes of every task submitted to one wave, in submission order."""

    name: str
    outcomes: list[TaskOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> list[TaskOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failures(self) -> list[TaskOutcome]:
        return [outcome for outcome in self.outcomes if outcome.error is not None]

    @property
    def cancelled(self) -> list[TaskOutcome]:
        return [outcome for outcome in self.outcomes if outcome.cancelled]

    @property
    def ok(self) -> bool:
        return all(outcome.ok for outcome in self.outcomes)


class WaveDispatcher:
    """Run submitted callables with at most ``max_workers`` in flight.

    Task failures never escape a worker: each one is captured in its
    ``TaskOutcome`` and reported by ``wait``. With ``fail_fast`` set, the first
    failure cancels every task that has not started yet; tasks already
    running are left to finish.
    """

    def __init__(
        self,
        max_workers: int | None = None,
        name: str = "wave",
        fail_fast: bool = False,
    ):
        self.max_workers = max_workers or default_workers()
        if self.max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self.name = name
        self.fail_fast = fail_fast

        self._executor = ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix=f"board-sync-{name}"
        )
        self._lock = threading.Lock()
        self._submitted: list[tuple[str, Future[Any] | None]] = []
        self._aborted = False
        self._drained = False

    def submit(self, key: str, fn: Callable[..., Any], *args: Any) -> None:
        """Schedule ``fn(*args)`` under ``key``.

        Task inputs are passed as explicit arguments and bound at submission
        time, never captured from the caller's loop.
        """
        with self._lock:
            if self._drained:
                raise RuntimeError(f"{self.name} dispatcher has already been drained")
            if self._aborted:
                logger.debug("%s: skipping %s after earlier failure", self.name, key)
                self._submitted.append((key, None))
                return
            future = self._executor.submit(fn, *args)
            self._submitted.append((key, future))

        if self.fail_fast:
            future.add_done_callback(self._on_done)

    def _on_done(self, future: Future[Any]) -> None:
        if future.cancelled() or future.exception() is None:
            return
        with self._lock:
            if self._aborted:
                return
            self._aborted = True
            pending = [f for _, f in self._submitted if f is not None]
        cancelled = sum(1 for f in pending if f.cancel())
        logger.debug("%s: aborted, cancelled %d pending tasks", self.name, cancelled)

    def wait(self) -> WaveResult:
        """Block until every submitted task is done, then drain the pool."""
        with self._lock:
            if self._drained:
                raise RuntimeError(f"{self.name} dispatcher has already been drained")
            self._drained = True
            submitted = list(self._submitted)

        wait_futures([f for _, f in submitted if f is not None])
        self._executor.shutdown(wait=True)

        result = WaveResult(name=self.name)
        for key, future in submitted:
            if future is None or future.cancelled():
                result.outcomes.append(TaskOutcome(key=key, cancelled=True))
                continue
            error = future.exception()
            if error is not None:
                result.outcomes.append(TaskOutcome(key=key, error=error))
            else:
                result.outcomes.append(TaskOutcome(key=key, value=future.result()))

        logger.info(
            "%s: %d tasks, %d succeeded, %d failed, %d cancelled",
            self.name,
            len(result.outcomes),
            len(result.succeeded),
            len(result.failures),
            len(result.cancelled),
        )
        return result

    def __enter__(self) -> "WaveDispatcher":
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self._drained:
            with self._lock:
                self._drained = True
            self._executor.shutdown(wait=True, cancel_futures=True)
