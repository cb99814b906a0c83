"""Discord notifier package for modannounce.

Sends release announcements to Discord via webhooks: one embed with the
release details, followed by an optional role ping.
"""

__version__ = "0.1.0"

# Import for auto-registration
from modannounce_discord.notifier import DiscordNotifier
from modannounce_discord.webhook import parse_webhook_url

__all__ = [
    "__version__",
    "DiscordNotifier",
    "parse_webhook_url",
]
