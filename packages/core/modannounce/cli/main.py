"""modannounce CLI main entry point.

This module provides the main CLI interface using Click framework. Every
announcement option can also be supplied as a GitHub Action input
(INPUT_<NAME> environment variable), so the same command works locally and
inside a workflow.
"""

import json
import logging
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click

from modannounce import __version__
from modannounce.announce import ReleaseAnnouncer
from modannounce.config import AnnouncementConfig, ConfigLoader, merge_overrides
from modannounce.exceptions import ConfigurationError, ModAnnounceError
from modannounce.github import GitHubContext, error_annotation
from modannounce.registry import NotifierRegistry

# Import packages to trigger auto-registration
try:
    import modannounce_discord  # noqa: F401
except ImportError:
    pass

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)


def _action_input(name: str) -> str:
    """Environment variable GitHub sets for an action input."""
    return f"INPUT_{name.upper()}"


def announcement_options(require_webhook: bool) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Options shared by send and preview."""

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        options = [
            click.option(
                "--config",
                "-c",
                "config_path",
                type=click.Path(exists=True, dir_okay=False, path_type=Path),
                help="YAML configuration file (options override its values)",
            ),
            click.option(
                "--webhook-url",
                envvar=[_action_input("webhook-url"), "DISCORD_WEBHOOK_URL"],
                help="Discord webhook URL" + ("" if require_webhook else " (optional)"),
            ),
            click.option(
                "--repository",
                envvar=_action_input("repository"),
                help="Repository to announce (owner/repo, default: workflow repository)",
            ),
            click.option(
                "--project-name",
                envvar=_action_input("project-name"),
                help="Project display name (default: repository name)",
            ),
            click.option(
                "--version",
                "project_version",
                envvar=_action_input("version"),
                help="Version to announce (default: derived from the pushed tag)",
            ),
            click.option(
                "--modrinth-project-id",
                envvar=_action_input("modrinth-project-id"),
                help="Modrinth project id or slug",
            ),
            click.option(
                "--curseforge-project-id",
                envvar=_action_input("curseforge-project-id"),
                help="CurseForge project id",
            ),
            click.option(
                "--thumbnail-url",
                envvar=_action_input("thumbnail-url"),
                help="Embed thumbnail URL",
            ),
            click.option(
                "--ping-notification-role",
                envvar=_action_input("ping-notification-role"),
                help="'true'/'false' to force, empty to ping only for stable versions",
            ),
            click.option(
                "--notification-role-id",
                envvar=_action_input("notification-role-id"),
                help="Role to ping (id or <@&id> mention)",
            ),
            click.option(
                "--ping-delay",
                envvar=_action_input("ping-delay"),
                type=float,
                help="Seconds to wait before pinging (default: 5)",
            ),
        ]
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


def build_overrides(
    webhook_url: str | None,
    repository: str | None,
    project_name: str | None,
    project_version: str | None,
    modrinth_project_id: str | None,
    curseforge_project_id: str | None,
    thumbnail_url: str | None,
    ping_notification_role: str | None,
    notification_role_id: str | None,
    ping_delay: float | None,
) -> dict[str, Any]:
    """Map CLI options onto the configuration schema."""
    return {
        "project": {
            "repository": repository,
            "name": project_name,
            "version": project_version,
            "modrinth_project_id": modrinth_project_id,
            "curseforge_project_id": curseforge_project_id,
            "thumbnail_url": thumbnail_url,
        },
        "notifier": {
            "params": {"webhook_url": webhook_url},
        },
        "ping": {
            "enabled": ping_notification_role,
            "role_id": notification_role_id,
            "delay_seconds": ping_delay,
        },
    }


def load_config(config_path: Path | None, overrides: dict[str, Any]) -> AnnouncementConfig:
    loader = ConfigLoader()
    if config_path:
        return loader.load_file(config_path, overrides=overrides)

    # merge onto an empty base so unset options are dropped
    return loader.load_dict(merge_overrides({}, overrides))


def fail(message: str, context: GitHubContext) -> None:
    """Report an error and exit with status 1."""
    click.echo(f"❌ {message}", err=True)
    if context.actions:
        click.echo(error_annotation(message))
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="modannounce")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose logging (DEBUG level)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Suppress all output except errors",
)
def cli(verbose: bool, quiet: bool) -> None:
    """modannounce - Release announcements for mod projects.

    Post a release embed with download links to a Discord webhook and ping
    the notification role for stable releases.

    \b
    Examples:
        modannounce send --webhook-url "$WEBHOOK" --version 1.2.0
        modannounce preview --repository Up-Mods/Example --version 1.2.0-beta.1
        modannounce validate announce.yaml
    """
    if verbose or GitHubContext.from_env().debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)


@cli.command()
@announcement_options(require_webhook=True)
def send(config_path: Path | None, **options: Any) -> None:
    """Send the release announcement.

    \b
    Examples:
        # Inside a tag-triggered workflow: repository and version are inferred
        modannounce send --webhook-url "$WEBHOOK" --modrinth-project-id example

        # From anywhere
        modannounce send --webhook-url "$WEBHOOK" \\
            --repository Up-Mods/Example --version 1.2.0 --ping-notification-role false
    """
    context = GitHubContext.from_env()
    try:
        config = load_config(config_path, build_overrides(**options))
        result = ReleaseAnnouncer().execute(config, context)

        release = result.release
        click.echo(f"📢 Announced {release.project_name} {release.version}")
        if result.delivery.message_id:
            click.echo(f"   Message: {result.delivery.message_id}")
        if result.pinged:
            click.echo(f"🔔 Pinged role {release.role_id}")
        else:
            click.echo("🔕 Role ping skipped")

    except ConfigurationError as e:
        fail(f"Configuration error: {e}", context)
    except ModAnnounceError as e:
        fail(f"Error: {e}", context)
    except Exception as e:
        logger.exception("Unexpected error")
        fail(f"Unexpected error: {e}", context)


@cli.command()
@announcement_options(require_webhook=False)
def preview(config_path: Path | None, **options: Any) -> None:
    """Print the announcement payload without sending it.

    \b
    Example:
        modannounce preview --repository Up-Mods/Example --version 1.2.0
    """
    context = GitHubContext.from_env()
    try:
        config = load_config(config_path, build_overrides(**options))
        preview_data = ReleaseAnnouncer().preview(config, context)
    except ModAnnounceError as e:
        fail(str(e), context)

    click.echo(json.dumps(preview_data["payload"], indent=2, ensure_ascii=False))
    click.echo()
    if preview_data["ping_role"]:
        click.echo(f"🔔 Would ping role {preview_data['role_id']}")
    else:
        click.echo("🔕 Would not ping")


@cli.command()
@click.argument("config_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(config_path: Path) -> None:
    """Validate configuration file without sending anything.

    CONFIG_PATH: Path to YAML configuration file

    \b
    Example:
        modannounce validate announce.yaml
    """
    try:
        click.echo(f"🔍 Validating configuration: {config_path}")

        config = ConfigLoader().load_file(config_path)
        NotifierRegistry.get(config.notifier.type)

        project = config.project
        click.echo()
        click.echo("=" * 70)
        click.echo("CONFIGURATION SUMMARY")
        click.echo("=" * 70)
        click.echo(f"Repository: {project.repository or '(workflow repository)'}")
        click.echo(f"Project: {project.name or '(repository name)'}")
        click.echo(f"Version: {project.version or '(from tag)'}")

        platforms = []
        if project.curseforge_project_id:
            platforms.append(f"CurseForge ({project.curseforge_project_id})")
        if project.modrinth_project_id:
            platforms.append(f"Modrinth ({project.modrinth_project_id})")
        click.echo(f"Downloads: {', '.join(platforms) if platforms else 'none'}")

        click.echo()
        click.echo(f"Notifier: {config.notifier.type}")

        if config.ping.enabled is None:
            policy = "stable versions only"
        else:
            policy = "always" if config.ping.enabled else "never"
        click.echo(f"Ping: {policy} (role {config.ping.role_id}, delay {config.ping.delay_seconds:g}s)")

        click.echo()
        click.echo("✅ Configuration is valid!")

    except ConfigurationError as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)


@cli.command("list-notifiers")
def list_notifiers() -> None:
    """List available notifiers.

    \b
    Example:
        modannounce list-notifiers
    """
    click.echo("📢 Available Notifiers:")
    click.echo()

    notifiers = NotifierRegistry.list_all()
    if not notifiers:
        click.echo("  No notifiers registered")
        return

    for name in sorted(notifiers):
        notifier_class = NotifierRegistry.get(name)
        docstring = notifier_class.__doc__ or "No description"
        # First line of docstring
        description = docstring.strip().split("\n")[0]
        click.echo(f"  • {name:15s} - {description}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
