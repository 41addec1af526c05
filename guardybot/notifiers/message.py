from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Field:
    title: str
    value: str
    short: bool = True


@dataclass(frozen=True)
class Attachment:
    fallback: str
    pretext: str
    title: str
    title_link: str
    color: str
    text: str
    fields: tuple[Field, ...] = field(default_factory=tuple)
    footer: str = ""
    footer_icon: str = ""
    ts: int = 0


@dataclass(frozen=True)
class NotificationPayload:
    attachments: tuple[Attachment, ...]
    link_names: bool = True

    def to_dict(self) -> dict[str, Any]:
        """Render the Slack incoming-webhook JSON body."""
        return {
            "attachments": [_attachment_dict(attachment) for attachment in self.attachments],
            "link_names": self.link_names,
        }


def _attachment_dict(attachment: Attachment) -> dict[str, Any]:
    return {
        "fallback": attachment.fallback,
        "pretext": attachment.pretext,
        "title": attachment.title,
        "title_link": attachment.title_link,
        "color": attachment.color,
        "text": attachment.text,
        "fields": [
            {"title": item.title, "value": item.value, "short": item.short}
            for item in attachment.fields
        ],
        "footer": attachment.footer,
        "footer_icon": attachment.footer_icon,
        "ts": attachment.ts,
    }
