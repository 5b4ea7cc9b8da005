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
import sys
from functools import wraps

from carbuilder.exceptions import CarBuilderBaseError
from carbuilder.commons.log_helper import get_logger, get_user_logger
from carbuilder.cli.constants import OK_RETURN_CODE, FAILED_RETURN_CODE

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


def return_code_manager(func):
    """
    Exits with the return code of a command, or FAILED_RETURN_CODE
    once it raises. The traceback is kept for the log file.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return_code = func(*args, **kwargs)
        except CarBuilderBaseError as e:
            USER_LOG.error(f'{e.__class__.__name__} occurred: {e}')
            _LOG.exception('Command failed')
            sys.exit(FAILED_RETURN_CODE)
        except Exception as e:
            USER_LOG.error(f'An unexpected error occurred: '
                           f'{e.__class__.__name__} {e}')
            _LOG.exception('Command failed unexpectedly')
            sys.exit(FAILED_RETURN_CODE)
        if return_code is not None and return_code != OK_RETURN_CODE:
            sys.exit(return_code)
        return return_code
    return wrapper
