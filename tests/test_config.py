import logging
import os
import unittest
from unittest.mock import patch

from ai_shell import config
from ai_shell.config import ShellConfig, load_config, log_level_from_env
from ai_shell.errors import ConfigurationError


class TestShellConfig(unittest.TestCase):
    """Tests for reading the configuration from environment variables."""

    def test_defaults(self):
        cfg = ShellConfig.from_env({"OPENAI_API_KEY": "sk-test"})

        self.assertEqual(cfg.api_key, "sk-test")
        self.assertEqual(cfg.base_url, "https://api.openai.com/v1")
        self.assertEqual(cfg.model, "gpt-4.1-mini")
        self.assertEqual(cfg.model_id, "openai:gpt-4.1-mini")

    def test_overrides(self):
        cfg = ShellConfig.from_env(
            {
                "OPENAI_API_KEY": "sk-test",
                "OPENAI_API_BASE_URL": "http://localhost:11434/v1",
                "OPENAI_MODEL": "llama3",
            }
        )

        self.assertEqual(cfg.model_id, "openai:llama3")
        self.assertEqual(
            cfg.provider_configs,
            {"openai": {"api_key": "sk-test", "base_url": "http://localhost:11434/v1"}},
        )

    def test_blank_optional_values_use_defaults(self):
        cfg = ShellConfig.from_env(
            {"OPENAI_API_KEY": "sk-test", "OPENAI_API_BASE_URL": " ", "OPENAI_MODEL": ""}
        )

        self.assertEqual(cfg.base_url, config.DEFAULT_API_BASE_URL)
        self.assertEqual(cfg.model, config.DEFAULT_MODEL)

    def test_missing_api_key_raises(self):
        for environ in ({}, {"OPENAI_API_KEY": ""}, {"OPENAI_API_KEY": "   "}):
            with self.subTest(environ=environ):
                with self.assertRaises(ConfigurationError) as cm:
                    ShellConfig.from_env(environ)
                self.assertIn("OPENAI_API_KEY not found", str(cm.exception))

    @patch("ai_shell.config.load_dotenv")
    def test_load_config_reads_dotenv_then_environment(self, mock_load_dotenv):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "sk-env"}, clear=True):
            cfg = load_config()

        mock_load_dotenv.assert_called_once_with()
        self.assertEqual(cfg.api_key, "sk-env")


class TestLogLevel(unittest.TestCase):
    def test_default_level(self):
        self.assertEqual(log_level_from_env({}), logging.WARNING)

    def test_named_level(self):
        self.assertEqual(log_level_from_env({"AI_SHELL_LOG_LEVEL": "debug"}), logging.DEBUG)

    def test_unknown_level_falls_back_to_default(self):
        self.assertEqual(log_level_from_env({"AI_SHELL_LOG_LEVEL": "chatty"}), logging.WARNING)
