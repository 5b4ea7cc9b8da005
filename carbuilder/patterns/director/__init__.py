from .recipe import Recipe, SPORT_RECIPE, SUV_RECIPE, BUILT_IN_RECIPES
from .concrete import CarDirector
