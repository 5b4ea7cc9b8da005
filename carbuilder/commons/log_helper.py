"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
import logging
import logging.config
import os
import sys
from datetime import date
from pathlib import Path
from typing import Optional

import colorama

LOG_NAME = 'carbuilder'
USER_LOG_NAME = f'user-{LOG_NAME}'
LOG_FOLDER_NAME = '.carbuilder_logs'
LOG_FILE_NAME = '%Y-%m-%d-carbuilder.log'
DEBUG_ENV = 'CARBUILDER_DEBUG'
LOGS_ENV = 'CARBUILDER_LOGS'

CONSOLE_HANDLER = 'console_handler'
FILE_HANDLER = 'file_handler'
LOG_FORMAT_FOR_FILE = ('%(asctime)s [%(levelname)s] %(name)s '
                       '%(filename)s:%(lineno)d LOG: %(message)s')
LOG_FORMAT_FOR_CONSOLE = '[%(levelname)s] %(message)s'


class ConsoleLogFormatter(logging.Formatter):
    """Colors the console line by its level"""

    COLORS = {
        logging.DEBUG: '\x1b[0;37m',
        logging.INFO: '\x1b[0;38m',
        logging.WARNING: '\x1b[0;33m',
        logging.ERROR: '\x1b[0;31m',
        logging.CRITICAL: '\x1b[0;31m'
    }
    RESET = '\x1b[0m'

    def __init__(self):
        super().__init__(LOG_FORMAT_FOR_CONSOLE)

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = self.COLORS.get(record.levelno)
        return f'{color}{line}{self.RESET}' if color else line


def resolve_log_level() -> int:
    """
    DEBUG, given the CARBUILDER_DEBUG environment variable is `true`,
    otherwise INFO.
    """
    debug = os.environ.get(DEBUG_ENV, '').lower() == 'true'
    return logging.DEBUG if debug else logging.INFO


def get_project_log_file_path() -> Optional[str]:
    """Returns the path to the daily log file.
    :rtype: str
    :returns: a path to the log file or None, given the logs folder
        cannot be created
    """
    logs_path = os.path.join(os.environ.get(LOGS_ENV) or Path.home(),
                             LOG_FOLDER_NAME)
    try:
        os.makedirs(logs_path, exist_ok=True)
    except OSError as e:
        print(f'Error while creating logs path: {e}', file=sys.stderr)
        return None
    return os.path.join(logs_path, date.today().strftime(LOG_FILE_NAME))


def build_logging_config(log_file_path: Optional[str], level: int) -> dict:
    """
    User-facing records always reach the console, internal ones only in
    debug mode. Both go to the log file, when there is one.
    """
    user_handlers = [CONSOLE_HANDLER]
    internal_handlers = [CONSOLE_HANDLER] if level == logging.DEBUG else []
    handlers = {
        CONSOLE_HANDLER: {
            'class': 'logging.StreamHandler',
            'formatter': 'console_formatter',
            'stream': 'ext://sys.stdout'
        }
    }
    if log_file_path:
        # opened by the first record only
        handlers[FILE_HANDLER] = {
            'class': 'logging.FileHandler',
            'formatter': 'file_formatter',
            'filename': log_file_path,
            'delay': True
        }
        user_handlers.append(FILE_HANDLER)
        internal_handlers.append(FILE_HANDLER)

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'file_formatter': {'format': LOG_FORMAT_FOR_FILE},
            'console_formatter': {'()': ConsoleLogFormatter}
        },
        'handlers': handlers,
        'loggers': {
            USER_LOG_NAME: {'level': level, 'handlers': user_handlers},
            LOG_NAME: {'level': level, 'handlers': internal_handlers}
        }
    }


colorama.just_fix_windows_console()
logging.config.dictConfig(
    build_logging_config(get_project_log_file_path(), resolve_log_level()))


def get_logger(log_name: str) -> logging.Logger:
    return logging.getLogger(LOG_NAME).getChild(log_name)


def get_user_logger() -> logging.Logger:
    return logging.getLogger(USER_LOG_NAME).getChild('child')
