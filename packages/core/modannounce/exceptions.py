"""Exception hierarchy for modannounce.

Library code raises these; only the CLI catches them and turns them into
an exit status.
"""


class ModAnnounceError(Exception):
    """Base exception for all modannounce errors."""


class ConfigurationError(ModAnnounceError):
    """Invalid or missing configuration.

    Args:
        message: Error description
        config_path: Where in the configuration the problem is
                     (file path or dotted key, e.g. "ping.role_id")
        field: Offending field or placeholder, if known
    """

    def __init__(
        self,
        message: str,
        config_path: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.config_path = config_path
        self.field = field

    def __str__(self) -> str:
        message = super().__str__()
        if self.config_path:
            return f"{message} (at {self.config_path})"
        return message


class DeliveryError(ModAnnounceError):
    """Sending a message to the notification target failed.

    Args:
        message: Error description
        notifier_type: Notifier that failed (e.g. "discord")
    """

    def __init__(self, message: str, notifier_type: str | None = None) -> None:
        super().__init__(message)
        self.notifier_type = notifier_type
