"""Tests for version helpers."""

import pytest

from modannounce.version import is_prerelease, should_ping, version_from_ref


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("v1.2.0", "1.2.0"),
        ("v10", "10"),
        ("1.2.0", "1.2.0"),
        ("version-2", "version-2"),
        ("v", "v"),
    ],
)
def test_version_from_ref(tag: str, expected: str) -> None:
    assert version_from_ref(tag) == expected


@pytest.mark.parametrize(
    "version",
    [
        "1.0.0-alpha",
        "1.0.0-beta.2",
        "2.1_BETA",
        "3.0.0+rc1",
        "3.0.0-RC.2",
        "4.0.0-pre3",
        "4.0.0-pre-release",
        "4.0.0-prerelease.1",
        "5.0.0-SNAPSHOT",
        "6.0.0-dev.7",
        "1.4.0+1.20.1-beta",
    ],
)
def test_is_prerelease(version: str) -> None:
    assert is_prerelease(version)


@pytest.mark.parametrize(
    "version",
    ["1.0.0", "1.4.0+1.20.1", "2.0.0+fabric", "beta", "1.0alpha"],
)
def test_is_stable(version: str) -> None:
    """Markers only count after a separator."""
    assert not is_prerelease(version)


def test_should_ping_defaults_to_version() -> None:
    assert should_ping("1.0.0", None) is True
    assert should_ping("1.0.0-beta.1", None) is False


def test_should_ping_explicit_setting_wins() -> None:
    assert should_ping("1.0.0-beta.1", True) is True
    assert should_ping("1.0.0", False) is False
