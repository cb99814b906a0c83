"""Tests for configuration models and loader."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from modannounce.config import (
    DEFAULT_NOTIFICATION_ROLE_ID,
    AnnouncementConfig,
    ConfigLoader,
    PingConfig,
    ProjectConfig,
    merge_overrides,
)
from modannounce.exceptions import ConfigurationError


class TestPingConfig:
    """Ping policy parsing."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, None),
            ("", None),
            ("  ", None),
            ("false", False),
            ("FALSE", False),
            ("true", True),
            ("yes", True),
            ("0", True),
            (True, True),
            (False, False),
        ],
    )
    def test_enabled(self, value, expected) -> None:
        assert PingConfig(enabled=value).enabled is expected

    def test_default_role(self) -> None:
        config = PingConfig()
        assert config.role_id == DEFAULT_NOTIFICATION_ROLE_ID
        assert config.delay_seconds == 5.0

    def test_blank_role_uses_default(self) -> None:
        assert PingConfig(role_id="").role_id == DEFAULT_NOTIFICATION_ROLE_ID

    def test_role_mention_is_unwrapped(self) -> None:
        assert PingConfig(role_id="<@&1234>").role_id == "1234"

    def test_numeric_role(self) -> None:
        assert PingConfig(role_id=1234).role_id == "1234"

    def test_invalid_role(self) -> None:
        with pytest.raises(ValidationError, match="role id"):
            PingConfig(role_id="announcements")

    def test_negative_delay(self) -> None:
        with pytest.raises(ValidationError):
            PingConfig(delay_seconds=-1)

    @pytest.mark.parametrize("delay", [float("inf"), float("nan"), "inf"])
    def test_non_finite_delay(self, delay) -> None:
        with pytest.raises(ValidationError):
            PingConfig(delay_seconds=delay)


class TestProjectConfig:
    def test_blank_values_are_unset(self) -> None:
        config = ProjectConfig(repository=" ", name="", version="")
        assert config.repository is None
        assert config.name is None
        assert config.version is None

    def test_numeric_version_must_be_quoted(self) -> None:
        with pytest.raises(ValidationError, match="Quote it in YAML"):
            ProjectConfig(version=1.2)

    def test_platform_ids(self) -> None:
        config = ProjectConfig(curseforge_project_id=123456, modrinth_project_id=None)
        assert config.curseforge_project_id == "123456"
        assert config.modrinth_project_id == ""


def test_invalid_repository_rejected() -> None:
    with pytest.raises(ValidationError, match="Invalid repository"):
        AnnouncementConfig(project={"repository": "Up-Mods/Example/extra"})


def test_empty_notifier_type_rejected() -> None:
    with pytest.raises(ValidationError, match="Notifier type cannot be empty"):
        AnnouncementConfig(notifier={"type": " "})


class TestConfigLoader:
    """Test suite for ConfigLoader."""

    def test_load_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text(
            """
project:
  repository: "Up-Mods/Example"
  version: "${RELEASE_VERSION}"
  modrinth_project_id: "example-mod"
notifier:
  type: "discord"
  params:
    webhook_url: "${WEBHOOK:-https://discord.com/api/webhooks/1/abc}"
ping:
  enabled: "false"
""",
            encoding="utf-8",
        )

        loader = ConfigLoader(environ={"RELEASE_VERSION": "2.0.0"})
        config = loader.load_file(config_file)

        assert config.project.repository == "Up-Mods/Example"
        assert config.project.version == "2.0.0"
        assert config.project.modrinth_project_id == "example-mod"
        assert config.notifier.params["webhook_url"] == "https://discord.com/api/webhooks/1/abc"
        assert config.ping.enabled is False

    def test_missing_env_var(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text("project:\n  version: ${RELEASE_VERSION}\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="RELEASE_VERSION") as exc_info:
            ConfigLoader(environ={}).load_file(config_file)

        assert exc_info.value.field == "${RELEASE_VERSION}"
        assert exc_info.value.config_path == str(config_file)
        assert str(config_file) in str(exc_info.value)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            ConfigLoader().load_file(tmp_path / "missing.yaml")

    def test_not_a_mapping(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text("- one\n- two\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigLoader().load_file(config_file)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text("project: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="YAML parsing failed"):
            ConfigLoader().load_file(config_file)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text("", encoding="utf-8")

        config = ConfigLoader().load_file(config_file)

        assert config.notifier.type == "discord"
        assert config.project.repository is None

    def test_validation_error_carries_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text("ping:\n  role_id: everyone\n", encoding="utf-8")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader().load_file(config_file)

        assert exc_info.value.config_path == str(config_file)

    def test_overrides_win_over_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "announce.yaml"
        config_file.write_text(
            "project:\n  repository: Up-Mods/Example\n  version: '1.0.0'\n",
            encoding="utf-8",
        )

        config = ConfigLoader().load_file(
            config_file,
            overrides={"project": {"version": "1.1.0", "repository": None}},
        )

        assert config.project.version == "1.1.0"
        assert config.project.repository == "Up-Mods/Example"


def test_merge_overrides_skips_unset_values() -> None:
    base = {"project": {"version": "1.0"}, "ping": {"delay_seconds": 3}}
    overrides = {
        "project": {"version": "", "name": "Example"},
        "ping": {"delay_seconds": None, "enabled": "false"},
        "notifier": {"params": {"webhook_url": None}},
    }

    merged = merge_overrides(base, overrides)

    assert merged == {
        "project": {"version": "1.0", "name": "Example"},
        "ping": {"delay_seconds": 3, "enabled": "false"},
        "notifier": {"params": {}},
    }
    assert base == {"project": {"version": "1.0"}, "ping": {"delay_seconds": 3}}


def test_unquoted_yaml_version(tmp_path: Path) -> None:
    config_file = tmp_path / "announce.yaml"
    config_file.write_text("project:\n  version: 1.20\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match='version: "1.2"') as exc_info:
        ConfigLoader().load_file(config_file)

    assert exc_info.value.config_path == str(config_file)
