"""Tests for repository selection helpers."""

from board_sync.github_client.models import RepositoryRef
from board_sync.github_client.search import filter_repositories, parse_exclusions


class TestParseExclusions:
    """Test parse_exclusions function."""

    def test_combines_both_sources(self) -> None:
        result = parse_exclusions(["repo1", "repo2"], "repo3, repo4")
        assert result == ["repo1", "repo2", "repo3", "repo4"]

    def test_deduplicates_and_drops_empty(self) -> None:
        result = parse_exclusions(["repo1", ""], "repo1,,repo2,")
        assert result == ["repo1", "repo2"]

    def test_nothing_to_exclude(self) -> None:
        assert parse_exclusions(None, None) == []

    def test_repeated_option_may_hold_comma_lists(self) -> None:
        result = parse_exclusions(["a,b", " kubescape/c "])
        assert result == ["a", "b", "kubescape/c"]


class TestFilterRepositories:
    """Test filter_repositories function."""

    def setup_method(self) -> None:
        self.repos = [
            RepositoryRef(owner="kubescape", name=name)
            for name in ["kubescape", "website", "helm-charts"]
        ]

    def test_no_exclusions_keeps_everything(self) -> None:
        assert filter_repositories(self.repos, []) == self.repos
        assert filter_repositories(self.repos, None) == self.repos

    def test_matches_name_or_full_name(self) -> None:
        result = filter_repositories(self.repos, ["website", "kubescape/helm-charts"])
        assert [repo.name for repo in result] == ["kubescape"]
