"""GitHub client package for API and project board interaction."""

from .client import GitHubClient, is_issues_disabled
from .models import ProjectItem, ProjectItemContent, ProjectItemList, RepositoryRef
from .projects import ProjectBoardClient
from .search import filter_repositories, parse_exclusions

__all__ = [
    "GitHubClient",
    "ProjectBoardClient",
    "ProjectItem",
    "ProjectItemContent",
    "ProjectItemList",
    "RepositoryRef",
    "filter_repositories",
    "is_issues_disabled",
    "parse_exclusions",
]
