import logging
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from click.testing import CliRunner

from carbuilder.cli.handlers import carbuilder
from carbuilder.commons.log_helper import (
    build_logging_config, get_project_log_file_path, resolve_log_level,
    ConsoleLogFormatter, CONSOLE_HANDLER, FILE_HANDLER, LOG_NAME,
    USER_LOG_NAME, LOG_FOLDER_NAME, DEBUG_ENV, LOGS_ENV
)
from carbuilder.conf import CONF_PATH_ENV


class RecordCollector(logging.Handler):

    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)

    @property
    def debug_messages(self):
        return [record.getMessage() for record in self.records
                if record.levelno == logging.DEBUG]


class VerboseOptionTest(unittest.TestCase):

    def setUp(self) -> None:
        self.runner = CliRunner()
        self.internal_logger = logging.getLogger(LOG_NAME)
        self.user_logger = logging.getLogger(USER_LOG_NAME)
        self.levels = (self.internal_logger.level, self.user_logger.level)
        self.handlers = list(self.internal_logger.handlers)

        self.internal_logger.setLevel(logging.INFO)
        self.user_logger.setLevel(logging.INFO)
        self.collector = RecordCollector()
        self.internal_logger.addHandler(self.collector)

    def tearDown(self) -> None:
        self.internal_logger.handlers = self.handlers
        self.internal_logger.setLevel(self.levels[0])
        self.user_logger.setLevel(self.levels[1])

    def invoke(self, args):
        return self.runner.invoke(carbuilder, args,
                                  env={CONF_PATH_ENV: None})

    def test_verbose_flag_enables_debug(self):
        """
        Tests that `-v` lowers the loggers to DEBUG, so the attached
        parts are logged.
        """
        result = self.invoke(['assemble', '-v', '-b', 'X'])
        self.assertEqual(result.exit_code, 0)
        self.assertTrue(self.internal_logger.isEnabledFor(logging.DEBUG))
        self.assertTrue(self.user_logger.isEnabledFor(logging.DEBUG))
        self.assertIn("Attaching body: 'X'", self.collector.debug_messages)

    def test_verbose_flag_routes_internal_logs_to_console(self):
        self.invoke(['assemble', '--verbose', '-b', 'X'])
        console_handler = self.user_logger.handlers[0]
        self.assertIn(console_handler, self.internal_logger.handlers)

    def test_no_debug_without_flag(self):
        result = self.invoke(['assemble', '-b', 'X'])
        self.assertEqual(result.exit_code, 0)
        self.assertFalse(self.internal_logger.isEnabledFor(logging.DEBUG))
        self.assertEqual(self.collector.debug_messages, [])


class LogLevelTest(unittest.TestCase):

    def test_debug_environment_variable(self):
        """
        Tests that CARBUILDER_DEBUG=true, in any case, selects DEBUG.
        """
        for value in ('true', 'True', 'TRUE'):
            with self.subTest(value=value), \
                    patch.dict(os.environ, {DEBUG_ENV: value}):
                self.assertEqual(resolve_log_level(), logging.DEBUG)

    def test_default_level(self):
        with patch.dict(os.environ, {DEBUG_ENV: 'no'}):
            self.assertEqual(resolve_log_level(), logging.INFO)
        with patch.dict(os.environ, clear=True):
            self.assertEqual(resolve_log_level(), logging.INFO)

    def test_debug_config_sends_internal_logs_to_console(self):
        config = build_logging_config(None, logging.DEBUG)
        self.assertEqual(config['loggers'][LOG_NAME],
                         {'level': logging.DEBUG,
                          'handlers': [CONSOLE_HANDLER]})

    def test_info_config_keeps_internal_logs_off_console(self):
        config = build_logging_config(None, logging.INFO)
        self.assertEqual(config['loggers'][LOG_NAME]['handlers'], [])
        self.assertEqual(config['loggers'][USER_LOG_NAME]['handlers'],
                         [CONSOLE_HANDLER])


class LogFileTest(unittest.TestCase):

    def setUp(self) -> None:
        self.logs_dir = tempfile.mkdtemp()

    def tearDown(self) -> None:
        shutil.rmtree(self.logs_dir, ignore_errors=True)

    def test_log_file_path(self):
        with patch.dict(os.environ, {LOGS_ENV: self.logs_dir}):
            path = get_project_log_file_path()
        folder = os.path.join(self.logs_dir, LOG_FOLDER_NAME)
        self.assertEqual(os.path.dirname(path), folder)
        self.assertTrue(os.path.isdir(folder))
        self.assertTrue(path.endswith('-carbuilder.log'))

    def test_unavailable_logs_folder(self):
        """
        Tests that no log file is used, given the logs folder cannot
        be created.
        """
        with patch.dict(os.environ, {LOGS_ENV: self.logs_dir}), \
                patch('carbuilder.commons.log_helper.os.makedirs',
                      side_effect=OSError('Permission denied')):
            self.assertIsNone(get_project_log_file_path())

    def test_no_file_handler_without_path(self):
        config = build_logging_config(None, logging.INFO)
        self.assertNotIn(FILE_HANDLER, config['handlers'])
        for logger_config in config['loggers'].values():
            self.assertNotIn(FILE_HANDLER, logger_config['handlers'])

    def test_file_handler_opens_lazily(self):
        """
        Tests that configuring the file handler does not create the
        log file before the first record.
        """
        path = os.path.join(self.logs_dir, 'carbuilder.log')
        config = build_logging_config(path, logging.INFO)
        self.assertIn(FILE_HANDLER,
                      config['loggers'][USER_LOG_NAME]['handlers'])

        handler_config = config['handlers'][FILE_HANDLER]
        handler = logging.FileHandler(handler_config['filename'],
                                      delay=handler_config['delay'])
        self.addCleanup(handler.close)
        self.assertFalse(os.path.exists(path))


class ConsoleLogFormatterTest(unittest.TestCase):

    def test_colored_by_level(self):
        record = logging.LogRecord('carbuilder', logging.WARNING, __file__,
                                   1, 'no wheels', None, None)
        line = ConsoleLogFormatter().format(record)
        self.assertEqual(line, '\x1b[0;33m[WARNING] no wheels\x1b[0m')


if __name__ == '__main__':
    unittest.main()
