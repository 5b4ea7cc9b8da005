from abc import ABC, abstractmethod


class IBuilder(ABC):
    """
    Contract of a step-by-step builder owning exactly one product.

    `_reset` sets up that product, once per builder. `attach` fills a
    named part of it and returns the builder, so that attachments chain.
    `product` hands the owned product out as is: retrieving it neither
    copies nor replaces it.
    """

    @abstractmethod
    def _reset(self):
        ...

    @property
    @abstractmethod
    def product(self):
        ...

    @abstractmethod
    def attach(self, part, value):
        """
        :part:str: name of the part
        :value: whatever the part is set to
        :returns: the builder itself
        """
        ...
