"""Discord notifier for modannounce.

Posts release announcements to a Discord channel through an incoming
webhook, as an embed, and pings the notification role on request.
"""

import logging
from typing import Any

import requests

from modannounce.base import BaseNotifier
from modannounce.exceptions import ConfigurationError, DeliveryError
from modannounce.models import Announcement, DeliveryResult
from modannounce.registry import NotifierRegistry
from modannounce_discord.webhook import execute_url, parse_webhook_url, webhook_thread_id

logger = logging.getLogger(__name__)

DEFAULT_USERNAME = "Mod Updates"
DEFAULT_AVATAR_URL = "https://avatars.githubusercontent.com/u/141473891?s=256"
DEFAULT_COLOR = 0x8DCF88


def parse_color(value: Any) -> int:
    """Parse an embed color given as int, "#rrggbb" or "0xrrggbb".

    Raises:
        ConfigurationError: If the value is not a 24-bit color
    """
    if isinstance(value, bool):
        raise ConfigurationError(
            f"Invalid embed color: {value}",
            config_path="notifier.params.color",
        )

    if isinstance(value, int):
        color = value
    else:
        text = str(value).strip().lower()
        if text.startswith("#"):
            text = text[1:]
        elif text.startswith("0x"):
            text = text[2:]
        try:
            color = int(text, 16)
        except ValueError as e:
            raise ConfigurationError(
                f"Invalid embed color: {value}. Use #rrggbb, 0xrrggbb or an integer",
                config_path="notifier.params.color",
            ) from e

    if not 0 <= color <= 0xFFFFFF:
        raise ConfigurationError(
            f"Embed color out of range: {value}",
            config_path="notifier.params.color",
        )
    return color


@NotifierRegistry.register("discord")
class DiscordNotifier(BaseNotifier):
    """Sends release announcements to Discord via webhooks.

    Configuration:
        webhook_url: Discord webhook URL (required unless dry_run)
        username: Webhook display name (default: "Mod Updates")
        avatar_url: Webhook avatar (default: Up-Mods organisation avatar)
        color: Embed color (default: "#8dcf88")
        timeout: Request timeout in seconds (default: 10)
        description_template: Custom Jinja2 template (used by the message builder)
        dry_run: Skip webhook validation, for previews (default: False)

    Example configuration:
        notifier:
          type: "discord"
          params:
            webhook_url: "${DISCORD_WEBHOOK}"
            username: "Mod Updates"
            color: "#8dcf88"
    """

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize Discord notifier.

        Args:
            config: Notifier configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        self.config = config
        self.dry_run = bool(config.get("dry_run", False))
        self.validate_config(config)

        self.webhook_url = (config.get("webhook_url") or "").strip()
        self.webhook_id: str | None = None
        self.token: str | None = None
        self.thread_id: str | None = None
        if self.webhook_url:
            self.webhook_id, self.token = parse_webhook_url(self.webhook_url)
            self.thread_id = webhook_thread_id(self.webhook_url)

        self.username = config.get("username") or DEFAULT_USERNAME
        self.avatar_url = config.get("avatar_url") or DEFAULT_AVATAR_URL
        self.color = parse_color(config.get("color", DEFAULT_COLOR))
        self.timeout = config.get("timeout", 10)

    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate notifier configuration.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        webhook_url = (config.get("webhook_url") or "").strip()
        if not webhook_url and not self.dry_run:
            raise ConfigurationError(
                "Discord notifier requires 'webhook_url' parameter",
                config_path="notifier.params.webhook_url",
            )

        timeout = config.get("timeout", 10)
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigurationError(
                f"timeout must be a positive number, got {timeout}",
                config_path="notifier.params.timeout",
            )

    def build_payload(self, announcement: Announcement) -> dict[str, Any]:
        """Build the execute-webhook body for an announcement."""
        embed: dict[str, Any] = {
            "description": announcement.description,
            "color": self.color,
            "timestamp": announcement.timestamp.isoformat(),
        }
        if announcement.thumbnail_url:
            embed["thumbnail"] = {"url": announcement.thumbnail_url}

        return {
            **self._identity(),
            "embeds": [embed],
        }

    def send(self, announcement: Announcement) -> DeliveryResult:
        """Post the announcement embed.

        Returns:
            DeliveryResult with the created message

        Raises:
            DeliveryError: If sending fails
        """
        release = announcement.release
        try:
            result = self._execute(self.build_payload(announcement))
        except (requests.RequestException, ValueError) as e:
            raise DeliveryError(
                f"Failed to send Discord announcement for "
                f"{release.project_name} {release.version}: {e}",
                notifier_type="discord",
            ) from e

        logger.info(f"Announcement sent for {release.project_name} {release.version}")
        return result

    def ping_role(self, role_id: str) -> DeliveryResult:
        """Post a role mention that is allowed to notify the role.

        Raises:
            DeliveryError: If sending fails
        """
        payload = {
            **self._identity(),
            "content": f"<@&{role_id}>",
            "allowed_mentions": {"roles": [role_id]},
        }
        try:
            return self._execute(payload)
        except (requests.RequestException, ValueError) as e:
            raise DeliveryError(
                f"Failed to ping Discord role {role_id}: {e}",
                notifier_type="discord",
            ) from e

    def _identity(self) -> dict[str, str]:
        return {"username": self.username, "avatar_url": self.avatar_url}

    def _execute(self, payload: dict[str, Any]) -> DeliveryResult:
        """Execute the webhook and wait for the created message.

        Raises:
            requests.RequestException: If request fails
            ValueError: If the response is not JSON
        """
        if self.webhook_id is None or self.token is None:
            raise ConfigurationError(
                "Discord notifier has no webhook_url (dry run)",
                config_path="notifier.params.webhook_url",
            )

        params = {"wait": "true"}
        if self.thread_id:
            params["thread_id"] = self.thread_id

        response = requests.post(
            execute_url(self.webhook_id, self.token),
            params=params,
            json=payload,
            timeout=self.timeout,
        )

        response.raise_for_status()

        logger.debug(f"Discord webhook response: {response.status_code}")

        body = response.json() if response.content else None
        message_id = body.get("id") if isinstance(body, dict) else None
        return DeliveryResult(
            status_code=response.status_code,
            message_id=message_id,
            body=body if isinstance(body, dict) else None,
        )
