"""Discord webhook URL handling."""

import re
from urllib.parse import parse_qs, urlsplit

from modannounce.exceptions import ConfigurationError

DISCORD_API_BASE = "https://discord.com/api"

DISCORD_HOSTS = frozenset(
    {
        "discord.com",
        "discordapp.com",
        "ptb.discord.com",
        "canary.discord.com",
        "ptb.discordapp.com",
        "canary.discordapp.com",
    }
)

# /api/webhooks/<id>[/<token>] with an optional /v<N> API version segment
_WEBHOOK_PATH_PATTERN = re.compile(r"^/api(?:/v\d+)?/webhooks/([^/]+)(?:/([^/]*))?/?$")


def parse_webhook_url(url: str) -> tuple[str, str]:
    """Extract webhook id and token from a Discord webhook URL.

    Args:
        url: e.g. "https://discord.com/api/webhooks/123/abc"

    Returns:
        Tuple of (webhook_id, token)

    Raises:
        ConfigurationError: If the URL is not a Discord webhook URL or has no token
    """
    parts = urlsplit(url.strip())

    if parts.scheme not in ("http", "https"):
        raise ConfigurationError(
            f"Invalid webhook URL: {url}. Must start with http:// or https://",
            config_path="notifier.params.webhook_url",
        )

    if (parts.hostname or "").lower() not in DISCORD_HOSTS:
        raise ConfigurationError(
            f"Failed to parse webhook URL: {url}. Host is not a Discord domain",
            config_path="notifier.params.webhook_url",
        )

    match = _WEBHOOK_PATH_PATTERN.match(parts.path)
    if not match:
        raise ConfigurationError(
            f"Failed to parse webhook URL: {url}",
            config_path="notifier.params.webhook_url",
        )

    webhook_id, token = match.group(1), match.group(2)
    if not webhook_id.isdigit():
        raise ConfigurationError(
            f"Failed to parse webhook URL: {url}. Webhook id must be numeric",
            config_path="notifier.params.webhook_url",
        )
    if not token:
        raise ConfigurationError(
            f"webhook URL contained no token: {url}",
            config_path="notifier.params.webhook_url",
        )

    return webhook_id, token


def webhook_thread_id(url: str) -> str | None:
    """Return the thread_id query parameter of a webhook URL, if present.

    Discord accepts it on execute requests to post into a forum or thread.

    Raises:
        ConfigurationError: If thread_id is given but not numeric
    """
    values = parse_qs(urlsplit(url.strip()).query).get("thread_id")
    if not values:
        return None

    thread_id = values[-1].strip()
    if not thread_id.isdigit():
        raise ConfigurationError(
            f"Failed to parse webhook URL: {url}. thread_id must be numeric",
            config_path="notifier.params.webhook_url",
        )
    return thread_id


def execute_url(webhook_id: str, token: str) -> str:
    """Canonical execute-webhook endpoint."""
    return f"{DISCORD_API_BASE}/webhooks/{webhook_id}/{token}"
