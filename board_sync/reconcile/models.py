"""Models describing item classes and the outcome of a run."""

from enum import Enum

from pydantic import BaseModel, Field


class ItemClass(str, Enum):
    """Kind of item reconciled against its own board."""

    ISSUE = "issue"
    PULL = "pull"


class ClassSummary(BaseModel):
    """Counts and failures for one item class."""

    item_class: ItemClass = Field(..., description="Item class these counts cover")
    board: str = Field(..., description="Board handle the class is tracked on")
    fetched: int = Field(0, description="Open items found across repositories")
    tracked: int = Field(0, description="Items already present on the board")
    untracked: list[str] = Field(
        default_factory=list, description="Open items missing from the board"
    )
    added: list[str] = Field(
        default_factory=list, description="Items successfully added to the board"
    )
    failed: dict[str, str] = Field(
        default_factory=dict, description="Items whose add failed, with the error"
    )


class ReconcileSummary(BaseModel):
    """Result of one reconciliation run."""

    owner: str = Field(..., description="Organization or user that was scanned")
    repositories: int = Field(0, description="Repositories scanned")
    dry_run: bool = Field(False, description="Whether writes were skipped")
    classes: list[ClassSummary] = Field(
        default_factory=list, description="Per item class results"
    )

    @property
    def failed_count(self) -> int:
        return sum(len(summary.failed) for summary in self.classes)

    @property
    def added_count(self) -> int:
        return sum(len(summary.added) for summary in self.classes)

    def for_class(self, item_class: ItemClass) -> ClassSummary:
        for summary in self.classes:
            if summary.item_class is item_class:
                return summary
        raise KeyError(item_class)
