from __future__ import annotations

import os
import tempfile
import unittest
from unittest.mock import patch

from guardybot.config import load_config


class ConfigTests(unittest.TestCase):
    def test_missing_webhook_is_fatal(self) -> None:
        with self.assertRaises(ValueError):
            load_config(environ={})

    def test_invalid_webhook_is_fatal(self) -> None:
        with self.assertRaises(ValueError):
            load_config(environ={"WEBHOOK_URL": "hooks.slack.com/services/T000"})

    def test_defaults(self) -> None:
        config = load_config(environ={"WEBHOOK_URL": "https://hooks.slack.com/services/T000/B000/XXX"})
        self.assertEqual(config.webhook_url, "https://hooks.slack.com/services/T000/B000/XXX")
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.request_timeout_seconds, 10)

    def test_log_level_from_environment(self) -> None:
        config = load_config(
            environ={"WEBHOOK_URL": "https://example.com/hook", "LOG_LEVEL": "debug"}
        )
        self.assertEqual(config.log_level, "DEBUG")

    def test_unknown_log_level_falls_back_to_info(self) -> None:
        with self.assertLogs("guardybot.config", level="WARNING"):
            config = load_config(
                environ={"WEBHOOK_URL": "https://example.com/hook", "LOG_LEVEL": "chatty"}
            )
        self.assertEqual(config.log_level, "INFO")

    def test_yaml_file_with_env_expansion(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.yaml")
            with open(path, "w", encoding="utf-8") as handle:
                handle.write(
                    "webhook_url: ${GUARDYBOT_TEST_HOOK}\n"
                    "log_level: warn\n"
                    "request_timeout_seconds: 3\n"
                )
            config = load_config(path, environ={"GUARDYBOT_TEST_HOOK": "https://example.com/from-yaml"})
        self.assertEqual(config.webhook_url, "https://example.com/from-yaml")
        self.assertEqual(config.log_level, "WARNING")
        self.assertEqual(config.request_timeout_seconds, 3)

    def test_expansion_ignores_process_environment_when_mapping_given(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.yaml")
            with open(path, "w", encoding="utf-8") as handle:
                handle.write("webhook_url: ${GUARDYBOT_TEST_HOOK}\n")
            with patch.dict(os.environ, {"GUARDYBOT_TEST_HOOK": "https://example.com/process"}):
                with self.assertRaises(ValueError):
                    load_config(path, environ={})

    def test_environment_overrides_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.yaml")
            with open(path, "w", encoding="utf-8") as handle:
                handle.write("webhook_url: https://example.com/from-yaml\n")
            config = load_config(path, environ={"WEBHOOK_URL": "https://example.com/from-env"})
        self.assertEqual(config.webhook_url, "https://example.com/from-env")

    def test_unexpanded_placeholder_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "config.yaml")
            with open(path, "w", encoding="utf-8") as handle:
                handle.write("webhook_url: ${GUARDYBOT_UNSET_HOOK_VAR}\n")
            with self.assertRaises(ValueError):
                load_config(path, environ={"OTHER": "x"})
