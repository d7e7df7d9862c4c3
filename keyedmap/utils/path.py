from __future__ import annotations

import importlib
from typing import TypeVar

from .. import errors, logs

log = logs.get(__name__)

T = TypeVar('T')


def import_class(base_type: type[T], name: str) -> type[T]:
    """Import *name* in `module.Class` notation and check it subclasses *base_type*."""
    mod_name, _, cls_name = name.rpartition('.')
    if not mod_name:
        raise errors.RegistryError(f'expected module.Class notation: {name}')

    log.debug('loading: %s', name)
    mod = importlib.import_module(mod_name)
    try:
        cls = getattr(mod, cls_name)
    except AttributeError:
        raise errors.RegistryError(f'{mod_name} has no attribute {cls_name!r}') from None

    if not (isinstance(cls, type) and issubclass(cls, base_type)):
        raise errors.RegistryError(f'{name} is not a {base_type.__name__}')
    return cls
