"""Recursive serializer that dispatches every value to a converter."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import msgspec

from . import codec as _codec
from . import converter as _converter
from . import errors, logs
from .converter import builtin as _builtin  # noqa: F401 (registers converters)
from .converter import mapping
from .tokens import Token, TokenReader, TokenWriter
from .utils.types import is_union, type_name, unwrap_optional

log = logs.get(__name__)

BUILTIN_CONVERTERS = ('map', 'enum', 'scalar', 'sequence', 'record', 'any')


class Settings(msgspec.Struct):
    """Serializer configuration.

    `converters` holds registered converter names or `module.Class` paths.
    """

    converters: list[str] = msgspec.field(default_factory=list)
    codec: str = 'json'
    indent: int = 0


def runtime_type(value: Any) -> Any:
    """Return the type to serialize an undeclared value as.

    Maps without type parameters are written as `dict[Any, Any]`.
    """
    tp = type(value)
    if isinstance(value, Mapping) and not mapping.is_parameterized(tp):
        return dict[Any, Any]
    return tp


class Serializer:
    """Serializes values to token streams and bytes.

    Converters passed in take precedence over the built-in ones, in order.
    """

    def __init__(
        self,
        converters: Iterable[str | _converter.Converter] = (),
        codec: str | _codec.Codec = 'json',
        indent: int = 0,
    ) -> None:
        self.converters = [_converter.create(c) for c in converters]
        self.converters.extend(_converter.create(name) for name in BUILTIN_CONVERTERS)
        self.codec = _codec.create(codec, indent=indent)

    @classmethod
    def from_settings(cls, settings: Settings) -> Serializer:
        return cls(settings.converters, settings.codec, settings.indent)

    def converter_for(self, tp: Any) -> _converter.Converter:
        """Return the first converter that accepts `tp`."""
        for conv in self.converters:
            if conv.can_convert(tp):
                log.debug('%s -> %r', type_name(tp), conv)
                return conv
        raise errors.UnsupportedType(tp)

    def serialize(self, writer: TokenWriter, value: Any, tp: Any = None) -> None:
        """Write one value. `tp=None` or `Any` uses the value's runtime type."""
        if value is None:
            writer.write_value(None)
            return

        tp, _ = unwrap_optional(tp)
        if tp is None or tp is Any or is_union(tp):
            tp = runtime_type(value)
        self.converter_for(tp).write(writer, value, tp, self)

    def deserialize(self, reader: TokenReader, tp: Any) -> Any:
        """Read one value of type `tp`, leaving `reader` on its last token."""
        tp, optional = unwrap_optional(tp)
        if optional and reader.token == Token.value and reader.value is None:
            return None
        return self.converter_for(tp).read(reader, tp, None, self)

    def dumps(self, value: Any, tp: Any = None) -> bytes:
        """Encode `value` with the configured codec."""
        writer = TokenWriter()
        self.serialize(writer, value, tp)
        return self.codec._encode(writer.getvalue())

    def loads(self, data: bytes | str, tp: Any = Any) -> Any:
        """Decode bytes produced by `dumps` into a value of type `tp`."""
        if isinstance(data, str):
            data = data.encode('utf8')
        reader = TokenReader.from_data(self.codec._decode(data))
        if not reader.read():
            raise errors.TokenError('empty token stream')
        return self.deserialize(reader, tp)


def dumps(value: Any, tp: Any = None, **kwargs: Any) -> bytes:
    """Shortcut for `Serializer(**kwargs).dumps(value, tp)`."""
    return Serializer(**kwargs).dumps(value, tp)


def loads(data: bytes | str, tp: Any = Any, **kwargs: Any) -> Any:
    """Shortcut for `Serializer(**kwargs).loads(data, tp)`."""
    return Serializer(**kwargs).loads(data, tp)
