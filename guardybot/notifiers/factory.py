from __future__ import annotations

from datetime import datetime
from decimal import Decimal
import math
import struct

from .base import BaseNotifier
from .message import Attachment, Field, NotificationPayload
from .slack import SlackNotifier, SlackSettings
from ..config import Config
from ..events.base import Finding
from ..links import resolve_link
from ..severity import classify


SOURCE_NAME = "GuardDuty"
FOOTER = "GuardyBot"
FOOTER_ICON = "https://rustacean.net/assets/rustacean-flat-happy.png"


def build_notifier(config: Config) -> BaseNotifier:
    return SlackNotifier(
        SlackSettings(
            webhook_url=config.webhook_url,
            timeout_seconds=config.request_timeout_seconds,
            user_agent=config.user_agent,
        )
    )


def build_notification_payload(finding: Finding) -> NotificationPayload:
    tier = classify(finding.severity)

    pretext = f"*Finding in {finding.region} from account {finding.account_id}*"
    if tier.mention:
        pretext = f"{pretext} {tier.mention}"

    fields = (
        Field(title="Severity", value=_format_severity(finding.severity), short=True),
        Field(title="First seen", value=_format_seen(finding.first_seen), short=True),
        Field(title="Count", value=str(finding.count), short=True),
        Field(title="Last seen", value=_format_seen(finding.last_seen), short=True),
    )
    attachment = Attachment(
        fallback=f"{SOURCE_NAME}:{finding.finding_type} in {finding.account_id} {finding.region}",
        pretext=pretext,
        title=finding.finding_type,
        title_link=resolve_link(finding.finding_type),
        color=tier.colour,
        text=finding.description,
        fields=fields,
        footer=FOOTER,
        footer_icon=FOOTER_ICON,
        ts=_epoch_seconds(finding.updated_at),
    )
    return NotificationPayload(attachments=(attachment,), link_names=True)


def _format_severity(value: float) -> str:
    """Shortest text that reads back as the same 32-bit float, e.g. "8", "5.3"."""
    if math.isnan(value):
        return "NaN"
    single = _to_float32(value)
    if math.isinf(single):
        return "inf" if single > 0 else "-inf"
    for precision in range(1, 10):
        text = f"{single:.{precision}g}"
        if _to_float32(float(text)) == single:
            break
    if "e" in text:
        text = format(Decimal(text), "f")
    return text


def _to_float32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_seen(value: datetime) -> str:
    # e.g. "Tue Mar  5 14:02:09"; day of month is space padded.
    return f"{value:%a %b} {value.day:>2} {value:%H:%M:%S}"


def _epoch_seconds(value: datetime) -> int:
    return int(value.timestamp())
