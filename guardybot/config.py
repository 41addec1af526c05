from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from string import Template
from typing import Any, Mapping

import yaml


DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_TIMEOUT_SECONDS = 10
DEFAULT_USER_AGENT = "guardybot/0.1"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


@dataclass(frozen=True)
class Config:
    webhook_url: str
    log_level: str = DEFAULT_LOG_LEVEL
    request_timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT


def _expand_env(value: Any, env: Mapping[str, str]) -> Any:
    # Unset variables are left as-is so the webhook check can reject them.
    if isinstance(value, str):
        return Template(value).safe_substitute(env)
    if isinstance(value, list):
        return [_expand_env(item, env) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(val, env) for key, val in value.items()}
    return value


def load_config(path: str | None = None, environ: Mapping[str, str] | None = None) -> Config:
    """Build the process configuration.

    Values come from the optional YAML file first, then from the environment
    (WEBHOOK_URL, LOG_LEVEL, REQUEST_TIMEOUT_SECONDS), which wins.
    """
    env = os.environ if environ is None else environ
    data: dict[str, Any] = {}
    if path:
        with open(path, "r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
        raw = _expand_env(raw, env)
        if not isinstance(raw, dict):
            raise ValueError("Config root must be a mapping")
        data = raw

    webhook_raw = env.get("WEBHOOK_URL") or data.get("webhook_url")
    if not webhook_raw:
        raise ValueError("WEBHOOK_URL environment variable not set, fatal")
    webhook_url = _normalize_webhook(webhook_raw)
    if webhook_url is None:
        raise ValueError("WEBHOOK_URL must be an http(s) URL")

    timeout_raw = env.get("REQUEST_TIMEOUT_SECONDS") or data.get(
        "request_timeout_seconds", DEFAULT_TIMEOUT_SECONDS
    )
    try:
        timeout = int(timeout_raw)
    except (TypeError, ValueError):
        raise ValueError("request_timeout_seconds must be an integer")
    if timeout <= 0:
        raise ValueError("request_timeout_seconds must be > 0")

    return Config(
        webhook_url=webhook_url,
        log_level=_normalize_log_level(env.get("LOG_LEVEL") or data.get("log_level")),
        request_timeout_seconds=timeout,
        user_agent=str(data.get("user_agent", DEFAULT_USER_AGENT)),
    )


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        force=True,
    )


def _normalize_webhook(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    if "${" in value:
        return None
    if not (value.startswith("http://") or value.startswith("https://")):
        return None
    return value


def _normalize_log_level(value: Any) -> str:
    if not value:
        return DEFAULT_LOG_LEVEL
    level = str(value).strip().upper()
    if level == "WARN":
        return "WARNING"
    if level not in _LOG_LEVELS:
        logging.getLogger(__name__).warning("Unknown log level %r; using %s", value, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level
