from .recipe import Recipe, SPORT_RECIPE, SUV_RECIPE, BUILT_IN_RECIPES
from ..builder import Car, CarBuilder
from carbuilder.commons.log_helper import get_logger
from carbuilder.exceptions import RecipeNotFoundError

from typing import Dict, Iterable, List, Optional

_LOG = get_logger(__name__)


class CarDirector:
    """
    A Director class, which drives a caller supplied builder through
    fixed assembly recipes. It never keeps a builder nor a car, so
    each call has to be given a builder of its own, otherwise the
    previously built car gets overwritten.

    Public methods:
        - build_sport_configuration(self, builder:CarBuilder)
        - build_suv_configuration(self, builder:CarBuilder)
        - build_configuration(self, name:str, builder:CarBuilder):
            Builds any known recipe, including the ones given
            upon construction.
    """

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self._recipes: Dict[str, Recipe] = {
            recipe.name.lower(): recipe for recipe in BUILT_IN_RECIPES
        }
        for recipe in recipes or ():
            key = recipe.name.lower()
            if key in self._recipes:
                _LOG.debug(f'Recipe `{recipe.name}` overrides '
                           f'`{self._recipes[key].name}`')
            self._recipes[key] = recipe

    @property
    def recipes(self) -> List[Recipe]:
        return [self._recipes[name] for name in self.recipe_names]

    @property
    def recipe_names(self) -> List[str]:
        return sorted(self._recipes)

    def build_sport_configuration(self, builder: CarBuilder) -> Car:
        return builder \
            .set_body(SPORT_RECIPE.body) \
            .set_engine(SPORT_RECIPE.engine) \
            .set_wheels(SPORT_RECIPE.wheels) \
            .build()

    def build_suv_configuration(self, builder: CarBuilder) -> Car:
        return builder \
            .set_body(SUV_RECIPE.body) \
            .set_engine(SUV_RECIPE.engine) \
            .set_wheels(SUV_RECIPE.wheels) \
            .build()

    def build_configuration(self, name: str, builder: CarBuilder) -> Car:
        """
        Attaches the parts of a named recipe in the order body, engine,
        wheels and builds the car. Parts the recipe leaves unset are
        skipped.
        :name:str
        :builder:CarBuilder
        :returns:Car
        :raises: RecipeNotFoundError
        """
        recipe = self._recipes.get(name.lower())
        if recipe is None:
            raise RecipeNotFoundError(
                f'There is no recipe named `{name}`. Available recipes: '
                f'{", ".join(self.recipe_names)}')
        _LOG.debug(f'Building recipe `{recipe.name}`')
        for part in Car.PARTS:
            value = getattr(recipe, part)
            if value is not None:
                builder.attach(part, value)
        return builder.build()
