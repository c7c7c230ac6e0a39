"""
Tests for the BotKit package namespace.
"""

import inspect
import logging
import os
import unittest
from unittest import mock

import BotKit
from BotKit.config import get_config
from BotKit.utils.logging import JsonFormatter, PACKAGE_LOGGER_NAME, configure_logging


class TestImport(unittest.TestCase):
    """Test cases for the public API of the package."""

    def tearDown(self):
        """Reset the configuration and logging."""
        get_config()._initialize()
        with mock.patch.dict(os.environ, {}, clear=True):
            configure_logging(level='info', use_json=False)

    def test_public_functions(self):
        """Every public helper is importable from the package root."""
        for name in ('read', 'read_sync', 'write', 'write_sync', 'parse', 'stringify',
                     'check_uin', 'get_stack', 'deep_merge', 'deep_clone'):
            self.assertTrue(callable(getattr(BotKit, name)), name)

        self.assertTrue(set(BotKit.__all__) <= set(dir(BotKit)))

    def test_async_helpers_are_coroutines(self):
        """The non-blocking variants are coroutine functions."""
        self.assertTrue(inspect.iscoroutinefunction(BotKit.read))
        self.assertTrue(inspect.iscoroutinefunction(BotKit.write))
        self.assertFalse(inspect.iscoroutinefunction(BotKit.read_sync))
        self.assertFalse(inspect.iscoroutinefunction(BotKit.write_sync))

    def test_yaml_namespace(self):
        """The YAML helpers are grouped in one namespace module."""
        self.assertIs(BotKit.yaml_io.read_sync, BotKit.read_sync)
        self.assertIs(BotKit.yaml_io.write, BotKit.write)

    def test_version(self):
        """The package exposes its version."""
        self.assertRegex(BotKit.__version__, r'^\d+\.\d+\.\d+$')

    def test_initialize_config_without_file(self):
        """Initialization falls back to defaults when no file exists."""
        with mock.patch.object(get_config(), 'find_config_file', return_value=None), \
                mock.patch.dict(os.environ, {}, clear=True):
            self.assertFalse(BotKit.initialize_config())

    def test_initialize_config_honors_log_env_vars(self):
        """BOTKIT_LOG_LEVEL and BOTKIT_LOG_FORMAT survive initialization."""
        environ = {"BOTKIT_LOG_LEVEL": "debug", "BOTKIT_LOG_FORMAT": "json"}
        with mock.patch.object(get_config(), 'find_config_file', return_value=None), \
                mock.patch.dict(os.environ, environ, clear=True):
            BotKit.initialize_config()

        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        self.assertEqual(package_logger.level, logging.DEBUG)
        self.assertIsInstance(package_logger.handlers[0].formatter, JsonFormatter)
        self.assertEqual(get_config().get("logging.level"), "debug")


if __name__ == "__main__":
    unittest.main()
