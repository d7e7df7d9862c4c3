"""Helpers for inspecting declared types at runtime."""

from __future__ import annotations

import types
import typing
from typing import Any

NoneType = type(None)


def origin(tp: Any) -> Any:
    """Return the class behind a parameterized alias, or *tp* itself."""
    return typing.get_origin(tp) or tp


def is_union(tp: Any) -> bool:
    return typing.get_origin(tp) in (typing.Union, types.UnionType)


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Split `X | None` into `(X, True)`.

    Unions of more than one non-None member are returned unchanged.
    """
    if not is_union(tp):
        return tp, tp is NoneType
    args = [arg for arg in typing.get_args(tp) if arg is not NoneType]
    optional = len(args) < len(typing.get_args(tp))
    if len(args) == 1:
        return args[0], optional
    return typing.Union[tuple(args)], optional


def is_subclass(tp: Any, base: type | tuple[type, ...]) -> bool:
    """`issubclass` that answers False for non-class inputs."""
    try:
        return isinstance(tp, type) and issubclass(tp, base)
    except TypeError:
        # parameterized aliases pass the isinstance check on some versions
        return False


def type_name(tp: Any) -> str:
    return getattr(tp, '__name__', None) or repr(tp)
