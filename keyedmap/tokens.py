"""Sequential token readers and writers over decoded object trees.

Codecs turn bytes into plain trees of dicts, lists and scalars (and back).
Converters never see those trees directly: they consume a `TokenReader` one
token at a time and produce output through a `TokenWriter`.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from . import errors

SCALAR_TYPES = (str, int, float, bool, type(None))


class Token:
    start_object = 0  # {
    end_object = 1  # }
    start_array = 2  # [
    end_array = 3  # ]
    property_name = 4  # object member name (value)
    value = 5  # scalar (value)

    @classmethod
    def to_str(cls, token: int | None) -> str:
        for name, value in vars(cls).items():
            if value == token and not name.startswith('_'):
                return name
        raise ValueError(f'invalid token: {token}')


STARTS = (Token.start_object, Token.start_array)
ENDS = (Token.end_object, Token.end_array)


def walk(node: Any) -> Iterator[tuple[int, Any]]:
    """Yield `(token, value)` pairs for a decoded object tree."""
    if isinstance(node, dict):
        yield Token.start_object, None
        for name, item in node.items():
            yield Token.property_name, name
            yield from walk(item)
        yield Token.end_object, None
    elif isinstance(node, (list, tuple)):
        yield Token.start_array, None
        for item in node:
            yield from walk(item)
        yield Token.end_array, None
    else:
        yield Token.value, node


class TokenReader:
    """Forward-only cursor over a stream of tokens."""

    def __init__(self, tokens: Iterable[tuple[int, Any]]) -> None:
        self._tokens = iter(tokens)
        self.token: int | None = None
        self.value: Any = None
        self.depth = 0

    @classmethod
    def from_data(cls, data: Any) -> TokenReader:
        return cls(walk(data))

    def __repr__(self) -> str:
        token = Token.to_str(self.token) if self.token is not None else 'none'
        return f'{self.__class__.__name__}({token}, {self.value!r})'

    def read(self) -> bool:
        """Advance one token. Returns False once the stream is exhausted."""
        if self.token in STARTS:
            self.depth += 1
        try:
            self.token, self.value = next(self._tokens)
        except StopIteration:
            self.token, self.value = None, None
            return False
        if self.token in ENDS:
            self.depth -= 1
        return True

    def skip(self) -> None:
        """Advance to the last token of the current value."""
        if self.token == Token.property_name:
            if not self.read():
                raise errors.TokenError('stream ended after property name')
        if self.token not in STARTS:
            return
        depth = self.depth
        while self.read():
            if self.token in ENDS and self.depth == depth:
                return
        raise errors.TokenError('stream ended inside a container')


class TokenWriter:
    """Builds an object tree from a sequence of write calls."""

    def __init__(self) -> None:
        self._stack: list[dict[str, Any] | list[Any]] = []
        self._name: str | None = None
        self._root: Any = None
        self._done = False

    def write_start_object(self) -> None:
        obj: dict[str, Any] = {}
        self._add(obj)
        self._stack.append(obj)

    def write_end_object(self) -> None:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise errors.TokenError('end of object written outside an object')
        if self._name is not None:
            raise errors.TokenError(f'object ended after property name {self._name!r}')
        self._stack.pop()

    def write_start_array(self) -> None:
        arr: list[Any] = []
        self._add(arr)
        self._stack.append(arr)

    def write_end_array(self) -> None:
        if not self._stack or not isinstance(self._stack[-1], list):
            raise errors.TokenError('end of array written outside an array')
        self._stack.pop()

    def write_property_name(self, name: str) -> None:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise errors.TokenError(f'property name {name!r} written outside an object')
        if self._name is not None:
            raise errors.TokenError(f'property name {name!r} follows {self._name!r}')
        if not isinstance(name, str):
            raise errors.TokenError(f'property name must be a string: {name!r}')
        if name in self._stack[-1]:
            raise errors.TokenError(f'duplicate property name: {name!r}')
        self._name = name

    def write_value(self, value: Any) -> None:
        if not isinstance(value, SCALAR_TYPES):
            raise errors.TokenError(f'not a scalar value: {type(value).__name__}')
        self._add(value)

    def getvalue(self) -> Any:
        """Return the finished tree."""
        if not self._done or self._stack:
            raise errors.TokenError('incomplete token stream')
        return self._root

    def _add(self, item: Any) -> None:
        if not self._stack:
            if self._done:
                raise errors.TokenError('more than one root value written')
            self._root = item
            self._done = True
            return

        container = self._stack[-1]
        if isinstance(container, list):
            container.append(item)
            return
        if self._name is None:
            raise errors.TokenError('value written without a property name')
        container[self._name] = item
        self._name = None
