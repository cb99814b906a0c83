"""Registry of notifier implementations.

Notifier packages register themselves on import:

    @NotifierRegistry.register("discord")
    class DiscordNotifier(BaseNotifier):
        ...
"""

import logging
from collections.abc import Callable

from modannounce.base.notifier import BaseNotifier
from modannounce.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class NotifierRegistry:
    """Maps notifier type names to classes."""

    _notifiers: dict[str, type[BaseNotifier]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[BaseNotifier]], type[BaseNotifier]]:
        """Class decorator registering a notifier under name."""

        def decorator(notifier_class: type[BaseNotifier]) -> type[BaseNotifier]:
            if name in cls._notifiers and cls._notifiers[name] is not notifier_class:
                logger.warning(f"Notifier '{name}' re-registered by {notifier_class.__name__}")
            cls._notifiers[name] = notifier_class
            return notifier_class

        return decorator

    @classmethod
    def get(cls, name: str) -> type[BaseNotifier]:
        """Look up a notifier class.

        Raises:
            ConfigurationError: If no notifier is registered under name
        """
        if name not in cls._notifiers:
            available = ", ".join(sorted(cls._notifiers)) or "none"
            raise ConfigurationError(
                f"Unknown notifier type '{name}'. Available: {available}",
                config_path="notifier.type",
            )
        return cls._notifiers[name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._notifiers

    @classmethod
    def list_all(cls) -> list[str]:
        return list(cls._notifiers)
