"""Main orchestrator for release announcements.

This module provides the ReleaseAnnouncer class that runs the complete
pipeline: resolve -> build -> deliver -> (ping).
"""

import json
import logging
import time
from collections.abc import Callable
from typing import Any

from modannounce.base import BaseNotifier
from modannounce.config import AnnouncementConfig
from modannounce.github import GitHubContext, write_outputs
from modannounce.message import MessageBuilder
from modannounce.models import AnnounceResult, DeliveryResult
from modannounce.registry import NotifierRegistry
from modannounce.resolve import resolve_release

logger = logging.getLogger(__name__)


class ReleaseAnnouncer:
    """Runs a single announcement.

    Steps:
    1. Resolve release metadata from config and workflow context
    2. Build the announcement message
    3. Send it through the configured notifier
    4. Write step outputs (response_status, message) if GITHUB_OUTPUT is set
    5. Ping the notification role after a delay, if the ping policy says so

    Everything runs sequentially; a failure in any step propagates.

    Example:
        >>> from modannounce.announce import ReleaseAnnouncer
        >>> from modannounce.config import ConfigLoader
        >>> from modannounce.github import GitHubContext
        >>>
        >>> config = ConfigLoader().load_file("announce.yaml")
        >>> result = ReleaseAnnouncer().execute(config, GitHubContext.from_env())
        >>> print(result.delivery.message_id)
    """

    def __init__(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Initialize announcer.

        Args:
            sleep: Function used to wait before the ping (replaced in tests)
        """
        self.sleep = sleep

    def execute(self, config: AnnouncementConfig, context: GitHubContext) -> AnnounceResult:
        """Run the announcement pipeline.

        Raises:
            ConfigurationError: If inputs are invalid or incomplete
            DeliveryError: If a webhook call fails
        """
        release = resolve_release(config, context)
        notifier = self._create_notifier(config)
        announcement = self._create_builder(config).build(release)

        logger.info(
            f"Sending announcement for {release.project_name} {release.version} "
            f"via {config.notifier.type}"
        )
        delivery = notifier.send(announcement)
        logger.debug(f"Sent message with id {delivery.message_id}")

        outputs = self._build_outputs(delivery, notifier.build_payload(announcement))
        if context.output_path:
            write_outputs(context.output_path, outputs)

        result = AnnounceResult(
            release=release,
            announcement=announcement,
            delivery=delivery,
            outputs=outputs,
        )

        if release.ping_role and release.role_id:
            delay = config.ping.delay_seconds
            if delay > 0:
                logger.info(f"Waiting {delay:g} seconds before pinging notification role")
                self.sleep(delay)

            logger.info(f"Pinging notification role {release.role_id}")
            result.ping_delivery = notifier.ping_role(release.role_id)
            result.pinged = True
        else:
            logger.info("Skipping notification role ping")

        return result

    def preview(self, config: AnnouncementConfig, context: GitHubContext) -> dict[str, Any]:
        """Resolve and build, returning the payload without sending anything."""
        release = resolve_release(config, context)
        notifier = self._create_notifier(config, dry_run=True)
        announcement = self._create_builder(config).build(release)
        return {
            "payload": notifier.build_payload(announcement),
            "ping_role": release.ping_role,
            "role_id": release.role_id,
        }

    def _create_notifier(self, config: AnnouncementConfig, dry_run: bool = False) -> BaseNotifier:
        notifier_class = NotifierRegistry.get(config.notifier.type)
        params = dict(config.notifier.params)
        if dry_run:
            # Notifiers skip target validation in dry-run mode
            params["dry_run"] = True
        return notifier_class(params)

    def _create_builder(self, config: AnnouncementConfig) -> MessageBuilder:
        return MessageBuilder(config.notifier.params.get("description_template"))

    def _build_outputs(
        self,
        delivery: DeliveryResult,
        payload: dict[str, Any],
    ) -> dict[str, str]:
        """Step outputs: HTTP status and the created message (or the request body)."""
        message = delivery.body if delivery.body is not None else payload
        return {
            "response_status": str(delivery.status_code),
            "message": json.dumps(message, indent=2, ensure_ascii=False),
        }
