from . import AbstractBuilder, Car
from carbuilder.commons.log_helper import get_logger
from carbuilder.exceptions import InvalidValueError

_LOG = get_logger(__name__)


class CarBuilder(AbstractBuilder):
    """
    A concrete Builder class, which assembles a Car step by step.
    Each setter mutates the owned car in place and returns the builder
    itself, so that calls may be chained:

        car = CarBuilder().set_body('Ferrari').set_engine('V8').build()

    The builder owns a single car for its entire lifetime. Building does
    not reset it, hence any setter invoked after `build` mutates the car
    which has already been handed out. A new, independent car requires
    a new builder.

    Public methods:
        - set_engine(self, value:str): Attaches an engine.
        - set_wheels(self, value:str): Attaches wheels.
        - set_body(self, value:str): Attaches a body.
        - attach(self, part:str, value:str): Attaches any part by name.
        - build(self): Returns the assembled car.
    Properties:
        - product:Car: the owned car, as is.
    """

    def _reset(self):
        """
        Sets up an empty car.
        """
        self._car = Car()

    def attach(self, part: str, value: str) -> 'CarBuilder':
        """
        Attaches a value to a named part of the car. Values are not
        validated, only the name of the part is.
        :part:str
        :value:str
        :returns:CarBuilder
        :raises: InvalidValueError, ProductFinalizedError
        """
        if part not in Car.PARTS:
            raise InvalidValueError(f'Unknown car part `{part}`. '
                                    f'Valid options: {", ".join(Car.PARTS)}')
        self._ensure_mutable(part)
        _LOG.debug(f'Attaching {part}: {value!r}')
        setattr(self._car, part, value)
        return self

    def set_engine(self, value: str) -> 'CarBuilder':
        return self.attach('engine', value)

    def set_wheels(self, value: str) -> 'CarBuilder':
        return self.attach('wheels', value)

    def set_body(self, value: str) -> 'CarBuilder':
        return self.attach('body', value)

    @property
    def product(self) -> Car:
        """
        Produces the owned car, whether or not all of its parts
        have been attached.
        :returns:Car
        """
        _ = super().product
        return self._car

    def build(self) -> Car:
        return self.product
