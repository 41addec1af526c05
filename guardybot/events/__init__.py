from .base import EventDecodeError, Finding, GuardDutyEvent
from .sns import extract_message, parse_finding, parse_guardduty_event, parse_sns_event

__all__ = [
    "EventDecodeError",
    "Finding",
    "GuardDutyEvent",
    "extract_message",
    "parse_finding",
    "parse_guardduty_event",
    "parse_sns_event",
]
