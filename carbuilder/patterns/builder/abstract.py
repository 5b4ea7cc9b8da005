from . import IBuilder
from carbuilder.commons.log_helper import get_logger
from carbuilder.exceptions import ProductFinalizedError

from abc import abstractmethod

_LOG = get_logger(__name__)


class AbstractBuilder(IBuilder):
    """
    Base builder, which resets itself exactly once, upon construction.
    Given `lock_on_build` is set, the builder turns into a two-state
    machine: once the product has been retrieved, any further attachment
    raises the ProductFinalizedError.
    """

    def __init__(self, lock_on_build: bool = False):
        self._lock_on_build = lock_on_build
        self._built = False
        self._reset()

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def lock_on_build(self) -> bool:
        return self._lock_on_build

    @property
    @abstractmethod
    def product(self):
        """
        Marks the builder as built. Concrete builders return the
        product itself.
        """
        if not self._built:
            _LOG.debug(f'{self.__class__.__name__} has been built for the '
                       f'first time')
        self._built = True

    def _ensure_mutable(self, part: str):
        """
        Raises the ProductFinalizedError, given a locked builder has
        already been built.
        :part:str
        :raises: ProductFinalizedError
        """
        if self._lock_on_build and self._built:
            raise ProductFinalizedError(
                f'Cannot attach `{part}`: the product of the locked '
                f'{self.__class__.__name__} has already been built.')
