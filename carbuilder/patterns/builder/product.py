from typing import Optional, Tuple


class Car:
    """
    A product of the car assembly, holding three optional parts,
    which are unset (None) until a builder attaches them.
    Cars compare by identity, since one builder always hands out
    the very same car.
    """
    PARTS: Tuple[str, ...] = ('body', 'engine', 'wheels')

    def __init__(self):
        self.engine: Optional[str] = None
        self.wheels: Optional[str] = None
        self.body: Optional[str] = None

    @property
    def missing_parts(self) -> Tuple[str, ...]:
        return tuple(part for part in self.PARTS
                     if getattr(self, part) is None)

    def to_dict(self) -> dict:
        return {part: getattr(self, part) for part in self.PARTS}

    def __repr__(self):
        return (f'{self.__class__.__name__}(body={self.body!r}, '
                f'engine={self.engine!r}, wheels={self.wheels!r})')
