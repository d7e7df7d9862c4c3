"""Converter for maps whose keys render to a single scalar string.

Maps are written as plain objects. String keys become property names as-is;
any other key is serialized through the calling serializer and the one
layer of string quoting that produces is stripped from the rendered text.
Reading reverses this by handing the property name token to the serializer
for the declared key type.
"""

from __future__ import annotations

import typing
from collections.abc import Mapping, MutableMapping
from typing import TYPE_CHECKING, Any, NamedTuple

from .. import errors
from ..codec import json as json_codec
from ..tokens import Token, TokenReader, TokenWriter
from ..utils.format import elide
from ..utils.types import is_subclass, origin, type_name
from . import Converter

if TYPE_CHECKING:
    from ..serializer import Serializer


class MapTypes(NamedTuple):
    key_type: Any
    value_type: Any
    is_string_key: bool


def map_types(tp: Any) -> MapTypes:
    """Return the key and value types of a map type.

    Raises `ConfigurationError` if fewer than two type parameters are found.
    """
    args = typing.get_args(tp)
    if len(args) < 2:
        args = _base_args(origin(tp))
    if len(args) < 2:
        raise errors.ConfigurationError(f'map type has less than two type parameters: {tp!r}')
    key_type, value_type = args[:2]
    return MapTypes(key_type, value_type, key_type is str)


def is_parameterized(tp: Any) -> bool:
    """Return True if key and value types can be found for map type `tp`."""
    return len(typing.get_args(tp)) >= 2 or len(_base_args(origin(tp))) >= 2


def _base_args(cls: Any) -> tuple[Any, ...]:
    """Find the parameters of the first parameterized mapping base of `cls`."""
    for klass in getattr(cls, '__mro__', ()):
        for base in getattr(klass, '__orig_bases__', ()):
            if is_subclass(origin(base), Mapping) and len(typing.get_args(base)) >= 2:
                return typing.get_args(base)
    return ()


def new_map(tp: Any) -> MutableMapping[Any, Any]:
    """Create an empty instance of the concrete map class behind `tp`."""
    cls = origin(tp)
    if cls is MutableMapping:
        cls = dict
    try:
        return cls()
    except TypeError as exc:
        raise errors.ConfigurationError(f'cannot create an empty {type_name(cls)}: {exc}') from exc


def strip_quotes(text: str) -> str:
    """Remove one enclosing pair of double quotes, if present.

    This is a textual strip only: escape sequences inside are left as-is.
    """
    if len(text) >= 2 and text[0] == '"' and text[-1] == '"':
        return text[1:-1]
    return text


def render_key(serializer: Serializer, key: Any, key_type: Any) -> str:
    """Render `key` as property name text.

    The key is serialized into its own buffer so nothing reaches the main
    output before the name is known. The rendered form is not checked to be
    a scalar: a key that serializes to an object or array yields that
    structure's JSON text.
    """
    buf = TokenWriter()
    serializer.serialize(buf, key, key_type)
    text = json_codec.dumps_text(buf.getvalue())
    return strip_quotes(text)


class HaveKey(NamedTuple):
    key: Any


# decode cursor: either AWAITING_KEY or HaveKey(key)
AWAITING_KEY = None


class MapConverter(Converter):
    """Reads and writes any mutable map type as an object."""

    NAME = 'map'

    def can_convert(self, tp: Any) -> bool:
        return is_subclass(origin(tp), MutableMapping)

    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        key_type, value_type, is_string_key = map_types(tp)
        result = new_map(tp)

        if reader.token != Token.start_object:
            raise errors.FormatError(f'{type_name(origin(tp))} is not represented as an object')

        state: HaveKey | None = AWAITING_KEY
        while reader.read():
            if reader.token == Token.end_object:
                if state is not AWAITING_KEY:
                    raise errors.ParseError(
                        f'object ended while expecting a value for key {state.key!r}'
                    )
                return result

            if reader.token == Token.property_name:
                if state is not AWAITING_KEY:
                    raise errors.ParseError(f'key {state.key!r} followed by another key, not a value')
                if not isinstance(reader.value, str):
                    raise errors.ParseError(f'property name {reader.value!r} is not a string')
                if is_string_key:
                    state = HaveKey(reader.value)
                else:
                    state = HaveKey(serializer.deserialize(reader, key_type))
                continue

            if state is AWAITING_KEY:
                raise errors.ParseError(
                    f'value {elide(repr(reader.value))} read with no preceding key'
                )
            value = serializer.deserialize(reader, value_type)
            result[state.key] = value
            state = AWAITING_KEY

        raise errors.ParseError(f'stream ended inside {type_name(origin(tp))} object')

    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        key_type, value_type, is_string_key = map_types(tp)

        writer.write_start_object()
        for key, item in value.items():
            if is_string_key or (key_type is Any and isinstance(key, str)):
                name = key
            else:
                name = render_key(serializer, key, key_type)
            writer.write_property_name(name)
            serializer.serialize(writer, item, value_type)
        writer.write_end_object()
