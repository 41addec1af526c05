from __future__ import annotations

from datetime import datetime, timezone
import json
import logging
from typing import Any

from .base import EventDecodeError, Finding, GuardDutyEvent


logger = logging.getLogger(__name__)


def extract_message(event: Any) -> str:
    """Return the raw message body of the first SNS record."""
    if not isinstance(event, dict):
        raise EventDecodeError("SNS event must be a mapping")
    records = event.get("Records")
    if not isinstance(records, list) or not records:
        raise EventDecodeError("SNS event has no Records")
    if len(records) > 1:
        logger.warning("SNS event has %s records; only the first is processed", len(records))
    record = records[0]
    sns = record.get("Sns") if isinstance(record, dict) else None
    if not isinstance(sns, dict):
        raise EventDecodeError("SNS record has no Sns section")
    message = sns.get("Message")
    if not isinstance(message, str):
        raise EventDecodeError("SNS record has no Message")
    return message


def parse_sns_event(event: Any) -> GuardDutyEvent:
    message = extract_message(event)
    try:
        payload = json.loads(message)
    except ValueError as exc:
        raise EventDecodeError(f"Failed to deserialize message, wrong format: {exc}") from exc
    return parse_guardduty_event(payload)


def parse_guardduty_event(payload: Any) -> GuardDutyEvent:
    if not isinstance(payload, dict):
        raise EventDecodeError("GuardDuty event must be a JSON object")
    detail = _require_dict(payload, "detail")
    time_raw = payload.get("time")
    return GuardDutyEvent(
        id=_require_str(payload, "id"),
        detail_type=_require_str(payload, "detail-type"),
        source=_require_str(payload, "source"),
        account=_require_str(payload, "account"),
        region=_require_str(payload, "region"),
        time=_parse_datetime(time_raw, "time") if time_raw is not None else None,
        detail=parse_finding(detail),
        version=str(payload.get("version", "")),
        resources=_optional_list(payload.get("resources")),
    )


def parse_finding(detail: dict[str, Any]) -> Finding:
    service = _require_dict(detail, "service")
    created_raw = detail.get("createdAt")
    return Finding(
        finding_type=_require_str(detail, "type"),
        severity=_require_float(detail, "severity"),
        first_seen=_parse_datetime(service.get("eventFirstSeen"), "service.eventFirstSeen"),
        last_seen=_parse_datetime(service.get("eventLastSeen"), "service.eventLastSeen"),
        count=_require_count(service),
        description=_require_str(detail, "description"),
        title=_require_str(detail, "title"),
        account_id=_require_str(detail, "accountId"),
        region=_require_str(detail, "region"),
        updated_at=_parse_datetime(detail.get("updatedAt"), "updatedAt"),
        created_at=_parse_datetime(created_raw, "createdAt") if created_raw is not None else None,
        id=str(detail.get("id", "")),
        arn=str(detail.get("arn", "")),
        partition=str(detail.get("partition", "")),
        schema_version=str(detail.get("schemaVersion", "")),
        service_name=str(service.get("serviceName", "")),
        detector_id=str(service.get("detectorId", "")),
        resource_role=str(service.get("resourceRole", "")),
        archived=bool(service.get("archived", False)),
        resource=_optional_dict(detail.get("resource")),
        action=_optional_dict(service.get("action")),
        additional_info=_optional_dict(service.get("additionalInfo")),
    )


def _require_dict(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name)
    if not isinstance(value, dict):
        raise EventDecodeError(f"{name} must be an object")
    return value


def _require_str(raw: dict[str, Any], name: str) -> str:
    value = raw.get(name)
    if not isinstance(value, str):
        raise EventDecodeError(f"{name} must be a string")
    return value


def _require_float(raw: dict[str, Any], name: str) -> float:
    value = raw.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise EventDecodeError(f"{name} must be a number")
    return float(value)


def _require_count(service: dict[str, Any]) -> int:
    value = service.get("count")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise EventDecodeError("service.count must be a non-negative integer")
    return value


def _optional_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _optional_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _parse_datetime(value: Any, name: str) -> datetime:
    if not isinstance(value, str) or not value:
        raise EventDecodeError(f"{name} must be a timestamp string")
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise EventDecodeError(f"{name} is not a valid timestamp: {value}") from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
