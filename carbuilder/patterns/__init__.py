from .builder import IBuilder, AbstractBuilder, Car, CarBuilder
from .director import (
    Recipe, SPORT_RECIPE, SUV_RECIPE, BUILT_IN_RECIPES, CarDirector
)
