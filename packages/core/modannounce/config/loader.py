"""Configuration loader with YAML parsing and environment substitution.

Announcement settings can live in a YAML file (handy for repositories that
publish several projects) and be overridden by CLI options or GitHub Action
inputs.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from modannounce.config.models import AnnouncementConfig
from modannounce.exceptions import ConfigurationError

# Pattern: ${VAR_NAME} or ${VAR_NAME:-default}
_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


class ConfigLoader:
    """Loads and validates announcement configuration.

    Supports:
    - YAML parsing
    - Environment variable substitution (${VAR_NAME}, ${VAR_NAME:-default})
    - Overlaying CLI/Action inputs on top of file values
    - Validation with Pydantic models

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load_file("announce.yaml")
        >>> print(config.project.repository)
        "Up-Mods/Example"
    """

    def __init__(self, environ: dict[str, str] | None = None) -> None:
        """Initialize configuration loader.

        Args:
            environ: Environment used for substitution (default: os.environ)
        """
        self.environ = environ if environ is not None else os.environ

    def load_file(
        self,
        config_path: str | Path,
        overrides: dict[str, Any] | None = None,
    ) -> AnnouncementConfig:
        """Load announcement configuration from YAML file.

        Args:
            config_path: Path to YAML configuration file
            overrides: Values that take precedence over the file
                       (see merge_overrides)

        Returns:
            Validated AnnouncementConfig object

        Raises:
            ConfigurationError: If file not found, parsing fails, or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                config_path=str(config_path),
            )

        try:
            raw_content = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(
                f"Failed to read configuration file: {e}",
                config_path=str(config_path),
            ) from e

        config_dict = self._parse_yaml(raw_content, str(config_path))

        if overrides:
            config_dict = merge_overrides(config_dict, overrides)

        return self._validate(config_dict, str(config_path))

    def load_dict(self, config_dict: dict[str, Any]) -> AnnouncementConfig:
        """Load announcement configuration from dictionary.

        Useful for CLI inputs or testing.

        Raises:
            ConfigurationError: If validation fails
        """
        return self._validate(config_dict)

    def _validate(
        self,
        config_dict: dict[str, Any],
        config_path: str | None = None,
    ) -> AnnouncementConfig:
        try:
            return AnnouncementConfig(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                config_path=config_path,
            ) from e

    def _parse_yaml(self, yaml_content: str, config_path: str) -> dict[str, Any]:
        """Substitute environment variables, then parse YAML.

        Raises:
            ConfigurationError: If substitution or parsing fails
        """
        try:
            content = self._substitute_env_vars(yaml_content)
        except ConfigurationError as e:
            raise ConfigurationError(
                str(e),
                config_path=config_path,
                field=e.field,
            ) from e

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"YAML parsing failed: {e}",
                config_path=config_path,
            ) from e

        if config_dict is None:
            return {}

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                "Configuration must be a YAML mapping (dict)",
                config_path=config_path,
            )

        return config_dict

    def _substitute_env_vars(self, content: str) -> str:
        """Substitute environment variables in format ${VAR_NAME}.

        Supports:
        - ${VAR_NAME} - required variable (raises error if not set)
        - ${VAR_NAME:-default_value} - optional with default value

        Example:
            Input: "webhook_url: ${DISCORD_WEBHOOK:-https://discord.com/api/webhooks/1/x}"
            Output: "webhook_url: https://discord.com/api/webhooks/1/x" (if unset)
        """

        def replace_var(match: re.Match) -> str:
            full_match = match.group(1)

            if ":-" in full_match:
                var_name, default_value = full_match.split(":-", 1)
                var_name = var_name.strip()
                default_value = default_value.strip()
            else:
                var_name = full_match.strip()
                default_value = None

            value = self.environ.get(var_name)

            if value is None:
                if default_value is not None:
                    return default_value
                raise ConfigurationError(
                    f"Required environment variable not set: {var_name}",
                    field=f"${{{var_name}}}",
                )

            return value

        return _ENV_VAR_PATTERN.sub(replace_var, content)


def merge_overrides(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Recursively overlay overrides on base.

    Empty strings and None in overrides are skipped so that unset CLI
    options or Action inputs do not clobber file values.

    Example:
        >>> merge_overrides({"project": {"version": "1.0"}}, {"project": {"version": ""}})
        {'project': {'version': '1.0'}}
    """
    merged = dict(base)
    for key, value in overrides.items():
        if value is None or value == "":
            continue
        if isinstance(value, dict):
            current = merged.get(key)
            merged[key] = merge_overrides(current if isinstance(current, dict) else {}, value)
        else:
            merged[key] = value
    return merged
