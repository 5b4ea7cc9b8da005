from typing import NamedTuple, Optional


class Recipe(NamedTuple):
    """
    A named assembly preset. Parts left as None are not attached.
    """
    name: str
    body: Optional[str] = None
    engine: Optional[str] = None
    wheels: Optional[str] = None


SPORT_RECIPE = Recipe(name='sport', body='Ferrari', engine='V8',
                      wheels='Michelin')
SUV_RECIPE = Recipe(name='suv', body='Tesla', engine='Electric',
                    wheels='Michelin')

BUILT_IN_RECIPES = (SPORT_RECIPE, SUV_RECIPE)
