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
from carbuilder.patterns.builder import Car

RECIPES_CFG = 'recipes'

ALLOWED_CONFIG_KEYS = [RECIPES_CFG]

UNKNOWN_PARAM_MESSAGE = 'Unknown parameter(s) in the configuration file: {}'
NOT_A_MAPPING_MESSAGE = '`{}` must be a mapping'
UNKNOWN_PART_MESSAGE = 'Recipe `{}` has unknown part(s): {}. ' \
                       'Valid options: ' + ', '.join(Car.PARTS)
NOT_A_STRING_MESSAGE = 'Part `{}` of recipe `{}` must be a string'
DUPLICATE_RECIPE_MESSAGE = 'Recipe names must differ regardless of case: {}'


class ConfigValidator:
    """
    Collects every error of a configuration content instead of failing
    on the first one.
    """

    def __init__(self, config_dict):
        self._config_dict = config_dict

    def validate(self):
        if not isinstance(self._config_dict, dict):
            return [NOT_A_MAPPING_MESSAGE.format('configuration')]

        errors = []
        unknown_keys = set(self._config_dict) - set(ALLOWED_CONFIG_KEYS)
        if unknown_keys:
            errors.append(UNKNOWN_PARAM_MESSAGE.format(
                ', '.join(sorted(unknown_keys))))

        recipes = self._config_dict.get(RECIPES_CFG)
        if recipes is None:
            return errors
        if not isinstance(recipes, dict):
            errors.append(NOT_A_MAPPING_MESSAGE.format(RECIPES_CFG))
            return errors

        for name, parts in recipes.items():
            errors.extend(self._validate_recipe(name, parts))
        errors.extend(self._validate_recipe_names(recipes))
        return errors

    @staticmethod
    def _validate_recipe_names(recipes):
        """
        Reports names which collide once the director lowercases them.
        """
        names_by_key = {}
        for name in recipes:
            names_by_key.setdefault(str(name).lower(), []).append(str(name))
        return [DUPLICATE_RECIPE_MESSAGE.format(', '.join(names))
                for names in names_by_key.values() if len(names) > 1]

    @staticmethod
    def _validate_recipe(name, parts):
        if parts is None:
            return []
        if not isinstance(parts, dict):
            return [NOT_A_MAPPING_MESSAGE.format(f'{RECIPES_CFG}.{name}')]

        errors = []
        unknown_parts = set(parts) - set(Car.PARTS)
        if unknown_parts:
            errors.append(UNKNOWN_PART_MESSAGE.format(
                name, ', '.join(sorted(map(str, unknown_parts)))))
        for part in Car.PARTS:
            value = parts.get(part)
            if value is not None and not isinstance(value, str):
                errors.append(NOT_A_STRING_MESSAGE.format(part, name))
        return errors
