import os
import shutil
import tempfile
import unittest
from pathlib import Path

from carbuilder.conf.processor import ConfigHolder, CONFIG_FILE_NAME
from carbuilder.conf.validator import ConfigValidator
from carbuilder.exceptions import ConfigurationError
from carbuilder.patterns import Recipe

ROADSTER_CONFIG = """
recipes:
  roadster:
    body: Mazda
    engine: I4
    wheels: Bridgestone
  bare:
"""


class ConfigHolderTest(unittest.TestCase):

    def setUp(self) -> None:
        self.config_dir = tempfile.mkdtemp()

    def tearDown(self) -> None:
        shutil.rmtree(self.config_dir, ignore_errors=True)

    def _write(self, content, file_name=CONFIG_FILE_NAME):
        with open(Path(self.config_dir, file_name), 'w') as file:
            file.write(content)

    def test_recipes_loading(self):
        """
        Tests that recipes declared in the configuration are loaded,
        including an empty one.
        """
        self._write(ROADSTER_CONFIG)
        config = ConfigHolder(self.config_dir)
        self.assertEqual(config.recipes, [
            Recipe(name='roadster', body='Mazda', engine='I4',
                   wheels='Bridgestone'),
            Recipe(name='bare')
        ])
        self.assertEqual(config.config_path,
                         os.path.join(self.config_dir, CONFIG_FILE_NAME))

    def test_yaml_extension(self):
        self._write(ROADSTER_CONFIG, file_name='carbuilder.yaml')
        self.assertEqual(len(ConfigHolder(self.config_dir).recipes), 2)

    def test_empty_file(self):
        self._write('')
        self.assertEqual(ConfigHolder(self.config_dir).recipes, [])

    def test_missing_file(self):
        self.assertRaises(ConfigurationError,
                          lambda: ConfigHolder(self.config_dir))

    def test_malformed_yaml(self):
        self._write('recipes: [unclosed')
        self.assertRaises(ConfigurationError,
                          lambda: ConfigHolder(self.config_dir))

    def test_invalid_recipe(self):
        self._write('recipes:\n  roadster:\n    spoiler: big\n')
        with self.assertRaises(ConfigurationError) as context:
            ConfigHolder(self.config_dir)
        self.assertIn('spoiler', str(context.exception))

    def test_colliding_recipe_names(self):
        self._write('recipes:\n'
                    '  Roadster:\n    body: Mazda\n'
                    '  roadster:\n    body: Fiat\n')
        with self.assertRaises(ConfigurationError) as context:
            ConfigHolder(self.config_dir)
        self.assertIn('Roadster, roadster', str(context.exception))


class ConfigValidatorTest(unittest.TestCase):

    def test_valid_content(self):
        content = {'recipes': {'roadster': {'body': 'Mazda'}}}
        self.assertEqual(ConfigValidator(content).validate(), [])

    def test_no_recipes(self):
        self.assertEqual(ConfigValidator({}).validate(), [])

    def test_all_errors_are_collected(self):
        """
        Tests that every error is reported at once.
        """
        content = {
            'garage': 'main',
            'recipes': {
                'roadster': {'body': 'Mazda', 'turbo': True},
                'truck': {'engine': 8},
                'van': 'Ford'
            }
        }
        errors = ConfigValidator(content).validate()
        self.assertEqual(len(errors), 4)

    def test_recipes_not_a_mapping(self):
        errors = ConfigValidator({'recipes': ['sport']}).validate()
        self.assertEqual(errors, ['`recipes` must be a mapping'])

    def test_content_not_a_mapping(self):
        errors = ConfigValidator(['recipes']).validate()
        self.assertEqual(errors, ['`configuration` must be a mapping'])

    def test_recipe_names_differing_by_case(self):
        """
        Tests that recipe names colliding once lowercased are reported,
        since the director would keep only one of them.
        """
        content = {'recipes': {'Roadster': {'body': 'Mazda'},
                               'roadster': {'body': 'Fiat'},
                               'suv': {'body': 'Volvo'}}}
        errors = ConfigValidator(content).validate()
        self.assertEqual(errors, [
            'Recipe names must differ regardless of case: Roadster, roadster'
        ])


if __name__ == '__main__':
    unittest.main()
