"""modannounce - release announcements for mod projects.

Builds a release message from a small set of metadata (project name,
version, download platforms) and delivers it to a chat webhook,
optionally followed by a role ping.
"""

__version__ = "0.1.0"

from modannounce.exceptions import (
    ConfigurationError,
    DeliveryError,
    ModAnnounceError,
)
from modannounce.models import (
    AnnounceResult,
    Announcement,
    DeliveryResult,
    DownloadLink,
    ResolvedRelease,
)

__all__ = [
    "__version__",
    "AnnounceResult",
    "Announcement",
    "ConfigurationError",
    "DeliveryError",
    "DeliveryResult",
    "DownloadLink",
    "ModAnnounceError",
    "ResolvedRelease",
]
