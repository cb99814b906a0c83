"""Data models passed between the resolve, build and deliver phases."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ResolvedRelease:
    """Release metadata after defaults have been filled in.

    Attributes:
        repository: Qualified repository ("owner/repo")
        owner: Repository owner
        repository_name: Repository name
        project_name: Display name of the project
        version: Version string shown in the announcement
        modrinth_project_id: Modrinth project id or slug (empty if not published there)
        curseforge_project_id: CurseForge project id (empty if not published there)
        thumbnail_url: Embed thumbnail (empty for none)
        ping_role: Whether the notification role should be pinged
        role_id: Numeric id of the notification role
    """

    repository: str
    owner: str
    repository_name: str
    project_name: str
    version: str
    modrinth_project_id: str = ""
    curseforge_project_id: str = ""
    thumbnail_url: str = ""
    ping_role: bool = False
    role_id: str = ""


@dataclass(frozen=True)
class DownloadLink:
    """A download platform entry in the announcement."""

    platform: str
    label: str
    emoji: str
    url: str

    def to_markdown(self) -> str:
        return f"{self.emoji} [{self.label}]({self.url})"


@dataclass
class Announcement:
    """Platform-neutral announcement ready for a notifier.

    Attributes:
        release: Release the announcement is about
        description: Markdown body
        timestamp: When the announcement was built (timezone-aware, UTC)
        thumbnail_url: Optional thumbnail image
    """

    release: ResolvedRelease
    description: str
    timestamp: datetime
    thumbnail_url: str | None = None


@dataclass
class DeliveryResult:
    """Outcome of a single webhook call.

    Attributes:
        status_code: HTTP status returned by the webhook
        message_id: Id of the created message, when the platform returns one
        body: Decoded response body (None for empty responses)
    """

    status_code: int
    message_id: str | None = None
    body: dict[str, Any] | None = None


@dataclass
class AnnounceResult:
    """Result of a complete announce run."""

    release: ResolvedRelease
    announcement: Announcement
    delivery: DeliveryResult
    pinged: bool = False
    ping_delivery: DeliveryResult | None = None
    outputs: dict[str, str] = field(default_factory=dict)
