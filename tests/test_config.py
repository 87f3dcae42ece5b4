"""Tests for settings loading and logging setup."""

from __future__ import annotations

import logging
import os
import unittest
from unittest.mock import patch

from subtrack.config import Settings, get_settings
from subtrack.logging_setup import configure_logging


class TestSettings(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.APP_NAME, "subtrack")
        self.assertEqual(settings.API_PORT, 8080)
        self.assertFalse(settings.DEBUG)

    def test_env_override(self):
        env = {"API_PORT": "9000", "LOG_LEVEL": "warning", "DEBUG": "true"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings(_env_file=None)
        self.assertEqual(settings.API_PORT, 9000)
        self.assertEqual(settings.LOG_LEVEL, "warning")
        self.assertTrue(settings.DEBUG)

    def test_get_settings_cached(self):
        self.assertIs(get_settings(), get_settings())


class TestLogging(unittest.TestCase):
    def tearDown(self):
        logging.getLogger().setLevel(logging.WARNING)

    def test_configure_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "error"}, clear=True):
            configure_logging(Settings(_env_file=None))
        self.assertEqual(logging.getLogger().level, logging.ERROR)

    def test_debug_forces_debug_level(self):
        with patch.dict(os.environ, {"DEBUG": "1", "LOG_LEVEL": "error"}, clear=True):
            configure_logging(Settings(_env_file=None))
        self.assertEqual(logging.getLogger().level, logging.DEBUG)


if __name__ == "__main__":
    unittest.main()
