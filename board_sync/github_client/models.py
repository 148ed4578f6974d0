"""Pydantic models for repositories and project board items.

Board models map to the JSON printed by ``gh project item-list --format json``.
CLI Reference: https://cli.github.com/manual/gh_project_item-list
"""

from pydantic import BaseModel, ConfigDict, Field


class RepositoryRef(BaseModel):
    """Repository identified by owner and name."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(..., description="Owning organization or user login")
    name: str = Field(..., description="Repository name")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name


class ProjectItemContent(BaseModel):
    """Issue, pull request or draft linked from a board entry."""

    type: str | None = Field(
        None, description="'Issue', 'PullRequest' or 'DraftIssue' (string)"
    )
    url: str | None = Field(
        None, description="Canonical URL of the linked item; absent for drafts"
    )
    number: int | None = Field(None, description="Issue or pull request number")
    title: str | None = Field(None, description="Title of the linked item")
    body: str | None = Field(None, description="Body of the linked item")
    repository: str | None = Field(None, description="owner/name of the repository")


class ProjectItem(BaseModel):
    """One entry on a project board."""

    id: str | None = Field(None, description="Project item node ID")
    title: str | None = Field(None, description="Title shown on the board")
    status: str | None = Field(None, description="Value of the Status field")
    labels: list[str] = Field(default_factory=list, description="Label names")
    repository: str | None = Field(None, description="Repository URL of the item")
    content: ProjectItemContent | None = Field(
        None, description="Linked issue, pull request or draft"
    )

    @property
    def url(self) -> str | None:
        if self.content is None or not self.content.url:
            return None
        return self.content.url


class ProjectItemList(BaseModel):
    """Top-level object returned by ``gh project item-list``."""

    items: list[ProjectItem] = Field(default_factory=list)
    total_count: int | None = Field(None, alias="totalCount")
