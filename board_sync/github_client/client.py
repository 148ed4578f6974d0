"""GitHub API client using PyGitHub."""

import logging
import os
from collections.abc import Iterable
from itertools import islice

from github import Auth, Github
from github.GithubException import GithubException, UnknownObjectException
from github.Repository import Repository
from requests.exceptions import RequestException

from ..errors import FetchFailure, ListFailure
from .models import RepositoryRef

logger = logging.getLogger(__name__)

# Diagnostics returned when a repository has issues turned off: the REST API
# message and the wording used by the gh CLI.
ISSUES_DISABLED_MARKERS = ("Issues are disabled", "has disabled issues")


def is_issues_disabled(error: Exception) -> bool:
    """Check whether a failure is the "issues disabled" diagnostic."""
    message = str(error)
    return any(marker in message for marker in ISSUES_DISABLED_MARKERS)


class GitHubClient:
    """Read-only access to repositories, issues and pull requests."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )

        self.github = Github(auth=Auth.Token(self.token))

    def _repository(self, repo: RepositoryRef) -> Repository:
        # Lazy objects skip the extra GET; errors surface on first listing.
        return self.github.get_repo(repo.full_name, lazy=True)

    def list_repositories(self, owner: str, limit: int) -> list[RepositoryRef]:
        """List public, non-archived repositories of an organization or user.

        Args:
            owner: Organization or user login
            limit: Maximum number of repositories to return

        Returns:
            Repositories in listing order, at most ``limit`` of them

        Raises:
            ListFailure: If the listing call fails
        """
        try:
            try:
                listing = self.github.get_organization(owner).get_repos(type="public")
                repositories = self._collect_repositories(owner, listing, limit)
            except UnknownObjectException:
                logger.debug("%s is not an organization, listing as user", owner)
                listing = self.github.get_user(owner).get_repos(type="owner")
                repositories = self._collect_repositories(owner, listing, limit)
        except (GithubException, RequestException) as e:
            raise ListFailure(f"Failed to list repositories for {owner}: {e}") from e

        logger.info("Found %d repositories for %s", len(repositories), owner)
        return repositories

    def _collect_repositories(
        self, owner: str, listing: Iterable[Repository], limit: int
    ) -> list[RepositoryRef]:
        repositories: list[RepositoryRef] = []
        for repository in listing:
            if repository.archived or repository.private:
                continue
            repositories.append(RepositoryRef(owner=owner, name=repository.name))
            if len(repositories) >= limit:
                break
        return repositories

    def list_open_issues(self, repo: RepositoryRef, limit: int) -> list[str]:
        """List URLs of the most recent open issues in a repository.

        Pull requests returned by the issues endpoint are skipped. A repository
        with issues disabled yields an empty list rather than an error.

        Args:
            repo: Repository to read
            limit: Maximum number of issue URLs to return

        Returns:
            Issue URLs, newest first

        Raises:
            FetchFailure: For any failure other than issues being disabled
        """
        try:
            issues = self._repository(repo).get_issues(
                state="open", sort="created", direction="desc"
            )
            only_issues = (issue for issue in issues if issue.pull_request is None)
            urls = [issue.html_url for issue in islice(only_issues, limit)]
        except (GithubException, RequestException) as e:
            if is_issues_disabled(e):
                logger.debug("Issues are disabled for %s", repo)
                return []
            raise FetchFailure(f"Failed to list issues for {repo}: {e}") from e

        logger.debug("%s: %d open issues", repo, len(urls))
        return urls

    def list_open_pulls(self, repo: RepositoryRef, limit: int) -> list[str]:
        """List URLs of the most recent open pull requests in a repository.

        Raises:
            FetchFailure: If the listing call fails
        """
        try:
            pulls = self._repository(repo).get_pulls(
                state="open", sort="created", direction="desc"
            )
            urls = [pull.html_url for pull in islice(pulls, limit)]
        except (GithubException, RequestException) as e:
            raise FetchFailure(f"Failed to list pull requests for {repo}: {e}") from e

        logger.debug("%s: %d open pull requests", repo, len(urls))
        return urls
