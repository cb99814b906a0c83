"""Message construction.

Turns a resolved release into the Markdown body of the announcement:

    # Example Mod 1.4.0

    ## Downloads:
    <:curseforge:...> [CurseForge](https://www.curseforge.com/projects/123) | <:modrinth:...> [Modrinth](https://modrinth.com/mod/example)

    <:github:...> [Source Code](https://github.com/Up-Mods/Example)
"""

import logging
from datetime import datetime, timezone

from jinja2 import Template, TemplateError, TemplateSyntaxError

from modannounce.exceptions import ConfigurationError
from modannounce.models import Announcement, DownloadLink, ResolvedRelease
from modannounce.version import is_prerelease

logger = logging.getLogger(__name__)

CURSEFORGE_EMOJI = "<:curseforge:1231714919561429023>"
MODRINTH_EMOJI = "<:modrinth:1231714923503943710>"
GITHUB_EMOJI = "<:github:1231714921331425310>"


def download_links(release: ResolvedRelease) -> list[DownloadLink]:
    """Download platforms the release is published on, CurseForge first."""
    links = []
    if release.curseforge_project_id:
        links.append(
            DownloadLink(
                platform="curseforge",
                label="CurseForge",
                emoji=CURSEFORGE_EMOJI,
                url=f"https://www.curseforge.com/projects/{release.curseforge_project_id}",
            )
        )
    if release.modrinth_project_id:
        links.append(
            DownloadLink(
                platform="modrinth",
                label="Modrinth",
                emoji=MODRINTH_EMOJI,
                url=f"https://modrinth.com/mod/{release.modrinth_project_id}",
            )
        )
    return links


def source_link(release: ResolvedRelease) -> str:
    return f"{GITHUB_EMOJI} [Source Code](https://github.com/{release.repository})"


def build_description(release: ResolvedRelease) -> str:
    """Build the default Markdown description."""
    lines = [f"# {release.project_name} {release.version}", ""]

    links = download_links(release)
    if links:
        lines.append("## Downloads:")
        lines.append(" | ".join(link.to_markdown() for link in links))
        lines.append("")

    lines.append(source_link(release))
    return "\n".join(lines)


class MessageBuilder:
    """Builds announcements, optionally from a custom Jinja2 template.

    Template context:
        project_name, version, repository, owner, repository_name,
        downloads (list of DownloadLink), source_link, is_prerelease

    Example template:
        ```
        **{{ project_name }}** {{ version }} is out!
        {% for link in downloads %}{{ link.to_markdown() }}
        {% endfor %}
        ```
    """

    def __init__(self, description_template: str | None = None) -> None:
        """Initialize builder.

        Raises:
            ConfigurationError: If the template does not compile
        """
        self._template: Template | None = None
        if description_template:
            try:
                self._template = Template(description_template)
            except TemplateSyntaxError as e:
                raise ConfigurationError(
                    f"Invalid Jinja2 template in description_template: {e}",
                    config_path="notifier.params.description_template",
                ) from e

    def build(self, release: ResolvedRelease, now: datetime | None = None) -> Announcement:
        """Build the announcement for release.

        Args:
            release: Resolved release metadata
            now: Timestamp to attach (default: current UTC time)
        """
        return Announcement(
            release=release,
            description=self.describe(release),
            timestamp=now or datetime.now(timezone.utc),
            thumbnail_url=release.thumbnail_url or None,
        )

    def describe(self, release: ResolvedRelease) -> str:
        """Render the description, falling back to the default layout."""
        if self._template:
            try:
                return self._template.render(
                    project_name=release.project_name,
                    version=release.version,
                    repository=release.repository,
                    owner=release.owner,
                    repository_name=release.repository_name,
                    downloads=download_links(release),
                    source_link=source_link(release),
                    is_prerelease=is_prerelease(release.version),
                )
            except TemplateError as e:
                logger.error(f"Failed to render description template: {e}. Using default format.")

        return build_description(release)


def build_announcement(release: ResolvedRelease, now: datetime | None = None) -> Announcement:
    """Build an announcement with the default description."""
    return MessageBuilder().build(release, now=now)
