"""Repository selection helpers."""

from collections.abc import Iterable

from .models import RepositoryRef


def parse_exclusions(
    names: Iterable[str] | None, comma_separated: str | None = None
) -> list[str]:
    """Merge ``--exclude-repo`` values and an ``--exclude-repos`` list.

    Any value may hold several comma-separated names. Names are either a
    bare repository name or ``owner/name``.

    >>> parse_exclusions(["website"], "kubescape/docs, website")
    ['kubescape/docs', 'website']
    """
    values = [*(names or []), comma_separated or ""]
    return sorted(
        {name.strip() for value in values for name in value.split(",") if name.strip()}
    )


def filter_repositories(
    repositories: list[RepositoryRef], excluded: list[str] | None
) -> list[RepositoryRef]:
    """Drop excluded repositories, keeping the listing order.

    Exclusions match either the bare name or ``owner/name``.
    """
    if not excluded:
        return list(repositories)
    skip = set(excluded)
    return [
        repo
        for repo in repositories
        if repo.name not in skip and repo.full_name not in skip
    ]
