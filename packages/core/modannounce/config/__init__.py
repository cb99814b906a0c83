"""Configuration loading and validation."""

from modannounce.config.loader import ConfigLoader, merge_overrides
from modannounce.config.models import (
    DEFAULT_NOTIFICATION_ROLE_ID,
    AnnouncementConfig,
    NotifierConfig,
    PingConfig,
    ProjectConfig,
)

__all__ = [
    "DEFAULT_NOTIFICATION_ROLE_ID",
    "AnnouncementConfig",
    "ConfigLoader",
    "NotifierConfig",
    "PingConfig",
    "ProjectConfig",
    "merge_overrides",
]
