"""Converter base classes and helpers."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from ..registry import Registry

if TYPE_CHECKING:
    from ..serializer import Serializer
    from ..tokens import TokenReader, TokenWriter


def create(name: str | Converter, **kwargs: Any) -> Converter:
    """Return a converter by name or pass through existing instances."""
    if isinstance(name, Converter):
        return name
    return REGISTRY[name](**kwargs)


class Converter(abc.ABC):
    """Base class for converters that read and write one family of types.

    `read` is called with the reader positioned on the first token of the
    value and must leave it on the last one. `tp` is the declared type, which
    may be a parameterized alias such as `dict[str, int]`.
    """

    NAME: str

    def __init_subclass__(cls) -> None:
        name = cls.__dict__.get('NAME')
        if name:
            REGISTRY[name] = cls

    @abc.abstractmethod
    def can_convert(self, tp: Any) -> bool:
        """Return True if this converter handles `tp`."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        """Consume one value of type `tp` from `reader`."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        """Write `value` to `writer`."""
        raise NotImplementedError('abstract')

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}()'


REGISTRY = Registry(Converter)
