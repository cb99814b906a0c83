"""Tests for input resolution."""

import pytest

from modannounce.config import AnnouncementConfig
from modannounce.exceptions import ConfigurationError
from modannounce.github import GitHubContext
from modannounce.resolve import resolve_release, split_repository


def make_config(**project) -> AnnouncementConfig:
    return AnnouncementConfig(project=project)


def test_split_repository() -> None:
    assert split_repository("Up-Mods/Example") == ("Up-Mods", "Example")


@pytest.mark.parametrize("repository", ["Example", "/Example", "Up-Mods/", "a/b/c"])
def test_split_repository_invalid(repository: str) -> None:
    with pytest.raises(ConfigurationError, match="Expected format"):
        split_repository(repository)


def test_explicit_values() -> None:
    config = make_config(
        repository="Up-Mods/Example",
        name="Example Mod",
        version="1.4.0",
        modrinth_project_id="example-mod",
    )

    release = resolve_release(config, GitHubContext())

    assert release.repository == "Up-Mods/Example"
    assert release.owner == "Up-Mods"
    assert release.repository_name == "Example"
    assert release.project_name == "Example Mod"
    assert release.version == "1.4.0"
    assert release.modrinth_project_id == "example-mod"
    assert release.ping_role is True
    assert release.role_id == "918884941461352469"


def test_defaults_from_workflow() -> None:
    context = GitHubContext(repository="Up-Mods/Example", ref="refs/tags/v1.2.3")

    release = resolve_release(make_config(), context)

    assert release.repository == "Up-Mods/Example"
    assert release.project_name == "Example"
    assert release.version == "1.2.3"


def test_tag_version_only_for_workflow_repository() -> None:
    context = GitHubContext(repository="Up-Mods/Example", ref="refs/tags/v1.2.3")
    config = make_config(repository="Up-Mods/Other")

    with pytest.raises(ConfigurationError, match="version is required"):
        resolve_release(config, context)


def test_project_name_defaults_for_foreign_repository() -> None:
    context = GitHubContext(repository="Up-Mods/Example")
    config = make_config(repository="Up-Mods/Other", version="1.0.0")

    assert resolve_release(config, context).project_name == "Other"


def test_missing_repository() -> None:
    with pytest.raises(ConfigurationError, match="repository is required"):
        resolve_release(make_config(version="1.0.0"), GitHubContext())


def test_prerelease_does_not_ping() -> None:
    config = make_config(repository="Up-Mods/Example", version="1.4.0-beta.1")

    assert resolve_release(config, GitHubContext()).ping_role is False


def test_explicit_ping_overrides_version() -> None:
    config = AnnouncementConfig(
        project={"repository": "Up-Mods/Example", "version": "1.4.0-beta.1"},
        ping={"enabled": "true", "role_id": "<@&42>"},
    )

    release = resolve_release(config, GitHubContext())

    assert release.ping_role is True
    assert release.role_id == "42"


def test_branch_ref_is_not_a_version() -> None:
    context = GitHubContext(repository="Up-Mods/Example", ref="refs/heads/main")

    with pytest.raises(ConfigurationError, match="version is required"):
        resolve_release(make_config(), context)
