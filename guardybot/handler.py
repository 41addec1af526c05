from __future__ import annotations

import asyncio
import logging
from typing import Any

from .config import Config, configure_logging, load_config
from .events import parse_sns_event
from .notifiers.base import BaseNotifier
from .notifiers.factory import build_notification_payload, build_notifier


_config: Config | None = None


async def handle(event: Any, config: Config, notifier: BaseNotifier | None = None) -> dict[str, str]:
    """Decode one SNS event, post its finding to Slack and report the outcome.

    Decoding errors propagate. Delivery failures are only logged and the
    invocation still reports success.
    """
    logger = logging.getLogger(__name__)
    guardduty_event = parse_sns_event(event)
    logger.debug("WEBHOOK_URL=%s", config.webhook_url)

    payload = build_notification_payload(guardduty_event.detail)
    notifier = notifier or build_notifier(config)
    # TODO: return a failure here once invokers alert on it, so rejected
    # webhook posts reach the Lambda error metrics.
    if not await notifier.send(payload):
        logger.error("Delivery failed for finding %s", guardduty_event.detail.id or guardduty_event.id)
    return {"message": "OK"}


def get_config() -> Config:
    global _config
    if _config is None:
        _config = load_config()
        configure_logging(_config.log_level)
    return _config


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, str]:
    return asyncio.run(handle(event, get_config()))
