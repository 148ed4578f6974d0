"""Configuration for a reconciliation run."""

import os
from typing import Any

from pydantic import BaseModel, Field

from .reconcile.models import ItemClass

DEFAULT_OWNER = "kubescape"
DEFAULT_BUG_BOARD = "4"
DEFAULT_PR_BOARD = "5"

ENV_PREFIX = "BOARD_SYNC_"


def default_workers() -> int:
    """Number of available processing units, at least one."""
    return os.cpu_count() or 1


class ReconcileConfig(BaseModel):
    """Everything the orchestrator needs to know about one run."""

    owner: str = Field(DEFAULT_OWNER, description="Organization or user to scan")
    bug_board: str = Field(
        DEFAULT_BUG_BOARD, description="Project number tracking issues"
    )
    pr_board: str = Field(
        DEFAULT_PR_BOARD, description="Project number tracking pull requests"
    )
    item_limit: int = Field(
        100, gt=0, description="Maximum open issues/pulls fetched per repository"
    )
    repo_limit: int = Field(1000, gt=0, description="Maximum repositories scanned")
    board_limit: int = Field(
        10000, gt=0, description="Maximum entries read from each board"
    )
    max_workers: int = Field(
        default_factory=default_workers,
        gt=0,
        description="Maximum tasks running concurrently in a wave",
    )
    excluded_repos: list[str] = Field(
        default_factory=list, description="Repository names skipped after listing"
    )

    def board_for(self, item_class: ItemClass) -> str:
        """Return the board handle tracking the given item class."""
        if item_class is ItemClass.ISSUE:
            return self.bug_board
        return self.pr_board

    @classmethod
    def from_env(cls, **overrides: Any) -> "ReconcileConfig":
        """Build a config from ``BOARD_SYNC_*`` variables.

        Explicit overrides that are not None take precedence over the
        environment; anything unset falls back to the model defaults.
        """
        values: dict[str, Any] = {}
        env_fields = {
            "owner": "OWNER",
            "bug_board": "BUG_BOARD",
            "pr_board": "PR_BOARD",
            "item_limit": "ITEM_LIMIT",
            "repo_limit": "REPO_LIMIT",
            "board_limit": "BOARD_LIMIT",
            "max_workers": "WORKERS",
        }
        for field_name, suffix in env_fields.items():
            value = os.getenv(f"{ENV_PREFIX}{suffix}")
            if value:
                values[field_name] = value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
