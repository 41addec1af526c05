from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


class EventDecodeError(ValueError):
    """Raised when an inbound event cannot be decoded into a finding."""


@dataclass(frozen=True)
class Finding:
    finding_type: str
    severity: float
    first_seen: datetime
    last_seen: datetime
    count: int
    description: str
    title: str
    account_id: str
    region: str
    updated_at: datetime
    created_at: datetime | None = None
    id: str = ""
    arn: str = ""
    partition: str = ""
    schema_version: str = ""
    service_name: str = ""
    detector_id: str = ""
    resource_role: str = ""
    archived: bool = False
    resource: dict[str, Any] = field(default_factory=dict)
    action: dict[str, Any] = field(default_factory=dict)
    additional_info: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GuardDutyEvent:
    id: str
    detail_type: str
    source: str
    account: str
    region: str
    time: datetime | None
    detail: Finding
    version: str = ""
    resources: list[Any] = field(default_factory=list)
