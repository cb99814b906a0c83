"""Version string helpers.

Derives a version from a git tag and decides whether a version is a
pre-release, which controls the default ping policy.
"""

import re

# Marker must follow a separator: "1.0.0-dev.3", "2.1_beta", "3.0+rc1".
PRERELEASE_PATTERN = re.compile(
    r"[-+_](?:alpha|beta|rc|pre-?(?:release)?|snapshot|dev)",
    re.IGNORECASE,
)

_TAG_VERSION_PATTERN = re.compile(r"^v\d")


def version_from_ref(tag: str) -> str:
    """Turn a tag name into a version string.

    A leading "v" is dropped only when a digit follows it.

    Example:
        >>> version_from_ref("v1.2.0")
        '1.2.0'
        >>> version_from_ref("version-2")
        'version-2'
    """
    if _TAG_VERSION_PATTERN.match(tag):
        return tag[1:]
    return tag


def is_prerelease(version: str) -> bool:
    """Return True if the version carries a pre-release marker."""
    return PRERELEASE_PATTERN.search(version) is not None


def should_ping(version: str, enabled: bool | None) -> bool:
    """Decide whether to ping the notification role.

    Args:
        version: Resolved version
        enabled: Explicit setting, or None to decide from the version

    Returns:
        The explicit setting if given, otherwise True for stable versions
    """
    if enabled is not None:
        return enabled
    return not is_prerelease(version)
