"""Codec base classes and helpers.

Codecs only move object trees (dicts, lists and scalars) to and from bytes.
Everything type-aware happens in converters.
"""

from __future__ import annotations

import abc
import importlib
from typing import Any

from .. import errors, utils
from ..registry import Registry


def create(name: str | Codec, **kwargs: Any) -> Codec:
    """Return a codec by name or pass through existing instances.

    Built-in codec modules are imported on first use.
    """
    if isinstance(name, Codec):
        return name
    if name not in REGISTRY and '.' not in name:
        try:
            importlib.import_module(f'.{name}', __name__)
        except ModuleNotFoundError as exc:
            if exc.name != f'{__name__}.{name}':
                raise
    return REGISTRY[name](**kwargs)


class Codec(abc.ABC):
    """Base class for codecs that know how to encode/decode object trees."""

    NAME: str

    def __init_subclass__(cls) -> None:
        REGISTRY[cls.NAME] = cls

    def __init__(self, indent: int = 0) -> None:
        self.indent = indent

    @abc.abstractmethod
    def encode(self, data: Any) -> bytes:
        """Serialize `data` into bytes."""
        raise NotImplementedError('abstract')

    @abc.abstractmethod
    def decode(self, data: bytes) -> Any:
        """Deserialize bytes into an object tree."""
        raise NotImplementedError('abstract')

    def _encode(self, data: Any) -> bytes:
        """Wrapper that provides encoding error context. Used internally."""
        try:
            return self.encode(data)
        except Exception as exc:
            raise errors.EncodeError(f'{exc}: data={utils.format.elide(repr(data))}') from exc

    def _decode(self, data: bytes) -> Any:
        """Wrapper that provides decoding error context. Used internally."""
        try:
            return self.decode(data)
        except Exception as exc:
            raise errors.DecodeError(f'{exc}: data={utils.format.elide(repr(data))}') from exc


REGISTRY = Registry(Codec)
