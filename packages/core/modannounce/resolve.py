"""Input resolution: fill announcement defaults from the workflow context."""

import logging

from modannounce.config.models import AnnouncementConfig
from modannounce.exceptions import ConfigurationError
from modannounce.github import GitHubContext
from modannounce.models import ResolvedRelease
from modannounce.version import should_ping, version_from_ref

logger = logging.getLogger(__name__)


def split_repository(repository: str) -> tuple[str, str]:
    """Split "owner/repo" into its parts.

    Raises:
        ConfigurationError: If the value is not exactly two non-empty parts
    """
    parts = repository.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ConfigurationError(
            f"Invalid repository '{repository}'. Expected format {{owner}}/{{repo}}.",
            config_path="project.repository",
        )
    return parts[0], parts[1]


def resolve_release(config: AnnouncementConfig, context: GitHubContext) -> ResolvedRelease:
    """Resolve release metadata.

    Args:
        config: Validated announcement configuration
        context: Workflow context used for defaults

    Returns:
        ResolvedRelease with every field the message needs

    Raises:
        ConfigurationError: If the repository or version cannot be determined
    """
    project = config.project

    repository = project.repository or context.repository
    if not repository:
        raise ConfigurationError(
            "repository is required when not running inside a GitHub workflow",
            config_path="project.repository",
        )
    logger.debug(f"qualified repository = '{repository}'")

    owner, repository_name = split_repository(repository)
    logger.debug(f"repository owner = '{owner}'")
    logger.debug(f"repository name = '{repository_name}'")

    project_name = project.name or repository_name

    version = project.version
    if not version and context.is_workflow_repository(repository):
        tag = context.tag_name()
        if tag:
            version = version_from_ref(tag)
            logger.debug(f"version from ref '{context.ref}' = '{version}'")
    if not version:
        raise ConfigurationError(
            "version is required unless the workflow was triggered by a tag "
            "of the announced repository",
            config_path="project.version",
        )

    ping_role = should_ping(version, config.ping.enabled)
    logger.debug(
        f"ping role = {ping_role} "
        f"({'explicit' if config.ping.enabled is not None else 'from version'})"
    )

    return ResolvedRelease(
        repository=repository,
        owner=owner,
        repository_name=repository_name,
        project_name=project_name,
        version=version,
        modrinth_project_id=project.modrinth_project_id,
        curseforge_project_id=project.curseforge_project_id,
        thumbnail_url=project.thumbnail_url,
        ping_role=ping_role,
        role_id=config.ping.role_id,
    )
