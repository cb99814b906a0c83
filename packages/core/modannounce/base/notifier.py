"""Base class for notifiers.

All notifiers must inherit from BaseNotifier and implement send() and
ping_role().
"""

from abc import ABC, abstractmethod
from typing import Any

from modannounce.models import Announcement, DeliveryResult


class BaseNotifier(ABC):
    """Abstract base class for notification targets.

    A notifier only delivers: it formats an Announcement for its platform
    and posts it. Deciding whether and when to ping is the announcer's job.

    Example Implementation:
        >>> from modannounce.base import BaseNotifier
        >>> from modannounce.registry import NotifierRegistry
        >>>
        >>> @NotifierRegistry.register("discord")
        >>> class DiscordNotifier(BaseNotifier):
        ...     def __init__(self, config: dict[str, Any]) -> None:
        ...         self.config = config
        ...         self.validate_config(config)
        ...
        ...     def send(self, announcement: Announcement) -> DeliveryResult:
        ...         # Post embed to webhook
        ...         pass
        ...
        ...     def ping_role(self, role_id: str) -> DeliveryResult:
        ...         # Post role mention
        ...         pass
    """

    @abstractmethod
    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize notifier with configuration.

        Args:
            config: Notifier params from configuration

        Raises:
            ConfigurationError: If config is invalid
        """
        pass

    @abstractmethod
    def validate_config(self, config: dict[str, Any]) -> None:
        """Validate notifier configuration.

        Raises:
            ConfigurationError: If config is invalid
        """
        pass

    @abstractmethod
    def build_payload(self, announcement: Announcement) -> dict[str, Any]:
        """Return the request body send() would post, without sending it."""
        pass

    @abstractmethod
    def send(self, announcement: Announcement) -> DeliveryResult:
        """Deliver the announcement.

        Raises:
            DeliveryError: If delivery fails
        """
        pass

    @abstractmethod
    def ping_role(self, role_id: str) -> DeliveryResult:
        """Post a message mentioning the role.

        Raises:
            DeliveryError: If delivery fails
        """
        pass
