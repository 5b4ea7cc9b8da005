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
import os
from typing import List

import yaml

from carbuilder.commons import deep_get
from carbuilder.commons.log_helper import get_logger
from carbuilder.conf.validator import ConfigValidator, RECIPES_CFG
from carbuilder.exceptions import ConfigurationError
from carbuilder.patterns.director import Recipe

CONFIG_FILE_NAME = 'carbuilder.yml'

_LOG = get_logger('conf.processor')


class ConfigHolder:
    def __init__(self, dir_path):
        con_path_yml = os.path.join(dir_path, CONFIG_FILE_NAME)
        con_path_yaml = os.path.join(dir_path,
                                     CONFIG_FILE_NAME.replace('yml', 'yaml'))
        con_path = con_path_yml if \
            os.path.exists(con_path_yml) else con_path_yaml
        if not os.path.isfile(con_path):
            raise ConfigurationError(
                f'{CONFIG_FILE_NAME} does not exist inside {dir_path} folder')
        self._config_path = con_path
        self._init_yaml_config(con_path=con_path)

    def _assert_no_errors(self, errors: list):
        if errors:
            raise ConfigurationError(f'The following error occurred '
                                     f'while {self._config_path} '
                                     f'parsing: {errors}')

    def _init_yaml_config(self, con_path):
        config_content = load_yaml_file_content(file_path=con_path) or {}
        validator = ConfigValidator(config_content)
        errors = validator.validate()
        self._assert_no_errors(errors)
        self._config_dict = config_content
        _LOG.debug(f'Configuration loaded from {con_path}')

    @property
    def config_path(self):
        return self._config_path

    @property
    def recipes(self) -> List[Recipe]:
        recipes = deep_get(self._config_dict, [RECIPES_CFG]) or {}
        return [Recipe(name=str(name), **(parts or {}))
                for name, parts in recipes.items()]


def load_yaml_file_content(file_path):
    if not os.path.isfile(file_path):
        raise ConfigurationError(f'There is no file by path: {file_path}')
    with open(file_path, 'r') as yaml_file:
        try:
            return yaml.safe_load(yaml_file)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f'Cannot parse {file_path}: {e}') from e
