import logging
import os
import sys
import unittest
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from obadhlib import config


class TestEnvFlag(unittest.TestCase):
    def test_default_when_unset(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertTrue(config._env_flag("OBADH_TEST_FLAG", True))
            self.assertFalse(config._env_flag("OBADH_TEST_FLAG", False))

    def test_truthy_values(self):
        for value in ("1", "true", "YES", " on "):
            with mock.patch.dict(os.environ, {"OBADH_TEST_FLAG": value}):
                self.assertTrue(config._env_flag("OBADH_TEST_FLAG", False), value)

    def test_falsy_values(self):
        for value in ("0", "false", "no", ""):
            with mock.patch.dict(os.environ, {"OBADH_TEST_FLAG": value}):
                self.assertFalse(config._env_flag("OBADH_TEST_FLAG", True), value)


class TestConfigureLogging(unittest.TestCase):
    def setUp(self):
        self.logger = logging.getLogger("obadhlib")
        self.handlers = list(self.logger.handlers)
        self.level = self.logger.level

    def tearDown(self):
        self.logger.handlers = self.handlers
        self.logger.setLevel(self.level)

    def test_adds_one_stream_handler(self):
        logger = config.configure_logging("DEBUG")
        config.configure_logging("DEBUG")
        self.assertIs(logger, self.logger)
        self.assertEqual(logger.level, logging.DEBUG)
        streams = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        self.assertEqual(len(streams), 1)

    def test_library_is_silent_by_default(self):
        self.assertTrue(any(isinstance(h, logging.NullHandler) for h in self.handlers))


if __name__ == '__main__':
    unittest.main()
