from __future__ import annotations

# Local runner: replays an SNS event file through the handler, the way the
# Lambda runtime would invoke it.

import argparse
import asyncio
import json
import logging
from pathlib import Path
import random
from typing import Any

from .config import configure_logging, load_config
from .events import parse_sns_event
from .handler import handle
from .notifiers.factory import build_notification_payload


SAMPLES_DIR = Path(__file__).resolve().parents[1] / "samples"


async def main() -> None:
    args = _parse_args()
    event_path = Path(args.event) if args.event else _pick_sample(SAMPLES_DIR)
    event = _read_event(event_path)

    if args.dry_run:
        _configure_logging("INFO", args.verbose)
        logging.getLogger(__name__).info("[dry-run] Event: %s", event_path)
        payload = build_notification_payload(parse_sns_event(event).detail)
        print(json.dumps(payload.to_dict(), indent=2))
        return

    config = load_config(args.config)
    _configure_logging(config.log_level, args.verbose)
    logging.getLogger(__name__).info("Event: %s", event_path)
    result = await handle(event, config)
    print(json.dumps(result))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="GuardDuty finding to Slack notifier")
    parser.add_argument("--event", help="SNS event JSON file (default: a random bundled sample)")
    parser.add_argument("--config", default=None, help="Optional YAML config file")
    parser.add_argument("--dry-run", action="store_true", help="Print the Slack payload instead of sending it")
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args()


def _configure_logging(level: str, verbose: bool) -> None:
    configure_logging("DEBUG" if verbose else level)


def _pick_sample(directory: Path) -> Path:
    samples = sorted(directory.glob("*.json"))
    if not samples:
        raise SystemExit(f"No sample events found in {directory}")
    return random.choice(samples)


def _read_event(path: Path) -> Any:
    if not path.exists():
        raise SystemExit(f"Event file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
