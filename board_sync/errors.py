"""Error taxonomy for the reconciliation run.

Read-side errors (listing, fetching, board reads, decoding) abort the run.
``WriteFailure`` is collected per item and reported after the write wave.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .reconcile.dispatcher import TaskOutcome


class ReconcileError(Exception):
    """Base class for every classified reconciliation failure."""


class ListFailure(ReconcileError):
    """Repository enumeration failed."""


class FetchFailure(ReconcileError):
    """Fetching open issues or pull requests for a repository failed."""


class BoardReadFailure(ReconcileError):
    """Listing the items of a project board failed."""


class WriteFailure(ReconcileError):
    """Adding an item to a project board failed."""


class DecodeFailure(ReconcileError):
    """A collaborator returned a response that could not be decoded."""


class FetchWaveFailure(FetchFailure):
    """One or more tasks of a fetch wave failed.

    Carries every failed outcome so the caller can report them together
    instead of only the first one.
    """

    def __init__(self, failures: list["TaskOutcome"], total: int):
        self.failures = failures
        self.total = total
        keys = ", ".join(outcome.key for outcome in failures)
        super().__init__(f"{len(failures)} of {total} fetch tasks failed: {keys}")
