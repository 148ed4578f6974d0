"""Set difference between observed and tracked items."""

import logging
from collections.abc import Set

from .models import ItemClass

logger = logging.getLogger(__name__)


def compute_untracked(fetched: Set[str], tracked: Set[str]) -> frozenset[str]:
    """Return the items in ``fetched`` that are not in ``tracked``.

    Membership is the only guarantee; the result has no order.
    """
    return frozenset(fetched).difference(tracked)


def reconcile_class(
    item_class: ItemClass, fetched: Set[str], tracked: Set[str]
) -> frozenset[str]:
    """Reconcile one item class against the contents of its own board.

    Both sets must be complete: every fetch task for the class has finished
    and the board read has returned.
    """
    untracked = compute_untracked(fetched, tracked)
    logger.info(
        "%s: %d fetched, %d tracked, %d untracked",
        item_class.value,
        len(fetched),
        len(tracked),
        len(untracked),
    )
    return untracked
