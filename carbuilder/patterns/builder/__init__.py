from .interface import IBuilder
from .product import Car
from .abstract import AbstractBuilder
from .concrete import CarBuilder
