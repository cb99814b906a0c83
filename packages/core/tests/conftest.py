"""Shared fixtures for modannounce tests."""

import pytest

from modannounce.models import ResolvedRelease

WORKFLOW_VARIABLES = (
    "GITHUB_REPOSITORY",
    "GITHUB_REF",
    "GITHUB_OUTPUT",
    "GITHUB_ACTIONS",
    "RUNNER_DEBUG",
    "DISCORD_WEBHOOK_URL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the surrounding CI environment out of the tests."""
    import os

    for name in WORKFLOW_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    for name in list(os.environ):
        if name.startswith("INPUT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def release() -> ResolvedRelease:
    return ResolvedRelease(
        repository="Up-Mods/Example",
        owner="Up-Mods",
        repository_name="Example",
        project_name="Example Mod",
        version="1.4.0",
        modrinth_project_id="example-mod",
        curseforge_project_id="123456",
        thumbnail_url="https://example.com/icon.png",
        ping_role=True,
        role_id="918884941461352469",
    )
