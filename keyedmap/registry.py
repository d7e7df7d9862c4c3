"""Registry helpers that expose named lookups of plugin classes."""

from __future__ import annotations

from typing import Generic, TypeVar

from . import errors, logs
from .utils.path import import_class

log = logs.get(__name__)

T = TypeVar('T')


class Registry(Generic[T]):
    """Keeps a registry of subclasses by name."""

    def __init__(self, base_type: type[T]) -> None:
        self._base_type = base_type
        self._registry: dict[str, type[T]] = {}

    def __getitem__(self, name: str) -> type[T]:
        try:
            return self._registry[name]
        except KeyError:
            if '.' not in name:
                raise errors.RegistryError(
                    f'unknown {self._base_type.__name__.lower()}: {name}'
                ) from None
        return import_class(self._base_type, name)

    def __setitem__(self, name: str, cls: type[T]) -> None:
        log.debug('registered %s: %s', self._base_type.__name__.lower(), name)
        self._registry[name] = cls

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def names(self) -> tuple[str, ...]:
        """Return all registered names in insertion order."""
        return tuple(self._registry.keys())
