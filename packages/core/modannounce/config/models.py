"""Configuration models using Pydantic for validation.

These models define the schema for announcement configuration, whether it
comes from a YAML file, CLI options or GitHub Action inputs.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

DEFAULT_NOTIFICATION_ROLE_ID = "918884941461352469"

_ROLE_MENTION_PATTERN = re.compile(r"^<@&(\d+)>$")


class ProjectConfig(BaseModel):
    """Release metadata.

    Every field is optional; missing values are filled from the workflow
    context when the announcement is resolved.

    Example:
        ```yaml
        project:
          repository: "Up-Mods/Example"
          name: "Example Mod"
          version: "1.4.0+1.20.1"  # quote it: YAML reads 1.20 as a number
          modrinth_project_id: "example-mod"
          curseforge_project_id: "123456"
          thumbnail_url: "https://example.com/icon.png"
        ```
    """

    repository: str | None = Field(default=None, description="Qualified repository (owner/repo)")
    name: str | None = Field(default=None, description="Project display name")
    version: str | None = Field(default=None, description="Version being released")
    modrinth_project_id: str = Field(default="", description="Modrinth project id or slug")
    curseforge_project_id: str = Field(default="", description="CurseForge project id")
    thumbnail_url: str = Field(default="", description="Embed thumbnail URL")

    @field_validator(
        "repository",
        "name",
        "version",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat empty inputs as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        # YAML reads `version: 1.20` as the float 1.2
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            raise ValueError(
                f"project.{info.field_name} must be a string, got {v!r}. "
                f"Quote it in YAML, e.g. {info.field_name}: \"{v}\""
            )
        return v

    @field_validator(
        "modrinth_project_id",
        "curseforge_project_id",
        "thumbnail_url",
        mode="before",
    )
    @classmethod
    def none_to_blank(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, str)):
            return str(v).strip()
        return v


class NotifierConfig(BaseModel):
    """Configuration for the notification target.

    Attributes:
        type: Notifier type (must be registered)
        params: Notifier-specific parameters (webhook, username, etc.)

    Example:
        ```yaml
        notifier:
          type: "discord"
          params:
            webhook_url: "${DISCORD_WEBHOOK}"
            username: "Mod Updates"
        ```
    """

    type: str = Field(default="discord", description="Notifier type (must be registered)")
    params: dict[str, Any] = Field(default_factory=dict, description="Notifier-specific parameters")

    @field_validator("type")
    @classmethod
    def validate_type_not_empty(cls, v: str) -> str:
        """Ensure type is not empty."""
        if not v or not v.strip():
            raise ValueError("Notifier type cannot be empty")
        return v.strip()


class PingConfig(BaseModel):
    """Role ping that follows the announcement.

    Attributes:
        enabled: True/False to force, None to ping only for stable versions
        role_id: Role to mention (bare id or "<@&id>")
        delay_seconds: Pause between the announcement and the ping

    Example:
        ```yaml
        ping:
          enabled: ""          # automatic
          role_id: "<@&918884941461352469>"
          delay_seconds: 5
        ```
    """

    enabled: bool | None = Field(default=None, description="Ping policy (None = automatic)")
    role_id: str = Field(default=DEFAULT_NOTIFICATION_ROLE_ID, description="Notification role id")
    delay_seconds: float = Field(
        default=5.0,
        ge=0,
        allow_inf_nan=False,
        description="Delay before pinging",
    )

    @field_validator("enabled", mode="before")
    @classmethod
    def parse_enabled(cls, v: Any) -> bool | None:
        """Action inputs arrive as strings: "" is automatic, "false" is off, anything else is on."""
        if v is None or isinstance(v, bool):
            return v
        value = str(v).strip()
        if not value:
            return None
        return value.lower() != "false"

    @field_validator("role_id", mode="before")
    @classmethod
    def normalize_role_id(cls, v: Any) -> str:
        """Accept a bare snowflake or a role mention."""
        if v is None:
            return DEFAULT_NOTIFICATION_ROLE_ID
        value = str(v).strip()
        if not value:
            return DEFAULT_NOTIFICATION_ROLE_ID

        mention = _ROLE_MENTION_PATTERN.match(value)
        if mention:
            value = mention.group(1)

        if not value.isdigit():
            raise ValueError(
                f"Notification role id '{v}' is invalid. "
                "Use a numeric role id or a role mention like <@&123>."
            )
        return value


class AnnouncementConfig(BaseModel):
    """Complete announcement configuration.

    Example:
        ```yaml
        project:
          repository: "Up-Mods/Example"
          version: "${RELEASE_VERSION}"
          modrinth_project_id: "example-mod"

        notifier:
          type: "discord"
          params:
            webhook_url: "${DISCORD_WEBHOOK}"

        ping:
          role_id: "918884941461352469"
        ```
    """

    project: ProjectConfig = Field(default_factory=ProjectConfig, description="Release metadata")
    notifier: NotifierConfig = Field(default_factory=NotifierConfig, description="Delivery target")
    ping: PingConfig = Field(default_factory=PingConfig, description="Role ping settings")

    @model_validator(mode="after")
    def validate_repository_format(self) -> "AnnouncementConfig":
        """Reject repositories that are obviously not owner/repo early."""
        repository = self.project.repository
        if repository is not None and repository.count("/") != 1:
            raise ValueError(
                f"Invalid repository '{repository}'. Expected format {{owner}}/{{repo}}."
            )
        return self
