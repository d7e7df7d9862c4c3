"""Converters for the types every serializer handles."""

from __future__ import annotations

import dataclasses
import datetime
import decimal
import enum
import typing
import uuid
from typing import TYPE_CHECKING, Any

import msgspec

from .. import errors
from ..tokens import Token, TokenReader, TokenWriter
from ..utils.types import NoneType, is_subclass, origin, type_name
from . import Converter

if TYPE_CHECKING:
    from ..serializer import Serializer


def expect(reader: TokenReader, token: int, tp: Any) -> None:
    if reader.token != token:
        raise errors.TokenError(
            f'expected {Token.to_str(token)} for {type_name(tp)}, '
            f'got {Token.to_str(reader.token) if reader.token is not None else "end of stream"}'
        )


class ScalarConverter(Converter):
    """Numbers, strings and the types msgspec renders as strings.

    Property names are coerced to the target type, so `"7"` reads as `7`
    when the declared type is `int`.
    """

    NAME = 'scalar'

    TYPES = (
        NoneType,
        bool,
        int,
        float,
        str,
        uuid.UUID,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
        decimal.Decimal,
    )

    def can_convert(self, tp: Any) -> bool:
        return is_subclass(tp, self.TYPES) and not is_subclass(tp, enum.Enum)

    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        if reader.token not in (Token.value, Token.property_name):
            expect(reader, Token.value, tp)
        return msgspec.convert(reader.value, tp, strict=reader.token == Token.value)

    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        writer.write_value(msgspec.to_builtins(value))


class EnumConverter(Converter):
    """Enums by value."""

    NAME = 'enum'

    def can_convert(self, tp: Any) -> bool:
        return is_subclass(tp, enum.Enum)

    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        if reader.token not in (Token.value, Token.property_name):
            expect(reader, Token.value, tp)
        return msgspec.convert(reader.value, tp, strict=reader.token == Token.value)

    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        writer.write_value(value.value)


class SequenceConverter(Converter):
    """Lists, tuples and sets as arrays."""

    NAME = 'sequence'

    TYPES = (list, tuple, set, frozenset)

    def can_convert(self, tp: Any) -> bool:
        return is_subclass(origin(tp), self.TYPES)

    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        expect(reader, Token.start_array, tp)

        items = []
        while reader.read():
            if reader.token == Token.end_array:
                return origin(tp)(items)
            items.append(serializer.deserialize(reader, item_type(tp, len(items))))

        raise errors.TokenError(f'stream ended inside {type_name(origin(tp))} array')

    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        writer.write_start_array()
        for i, item in enumerate(value):
            serializer.serialize(writer, item, item_type(tp, i))
        writer.write_end_array()


def item_type(tp: Any, index: int) -> Any:
    """Return the declared type of item *index* of a sequence type."""
    args = typing.get_args(tp)
    if not args:
        return Any
    if origin(tp) is tuple and not (len(args) == 2 and args[1] is Ellipsis):
        return args[index] if index < len(args) else Any
    return args[0]


class RecordConverter(Converter):
    """msgspec structs and dataclasses as objects keyed by field name.

    Unknown properties are skipped. Missing properties fall back to field
    defaults.
    """

    NAME = 'record'

    def can_convert(self, tp: Any) -> bool:
        return is_subclass(tp, msgspec.Struct) or (
            isinstance(tp, type) and dataclasses.is_dataclass(tp)
        )

    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        expect(reader, Token.start_object, tp)
        fields = {name: (attr, ftype) for name, attr, ftype in record_fields(tp)}

        kwargs = {}
        while reader.read():
            if reader.token == Token.end_object:
                return tp(**kwargs)

            name = reader.value
            if not reader.read():
                break
            try:
                attr, ftype = fields[name]
            except KeyError:
                reader.skip()
                continue
            kwargs[attr] = serializer.deserialize(reader, ftype)

        raise errors.TokenError(f'stream ended inside {type_name(tp)} object')

    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        writer.write_start_object()
        for name, attr, ftype in record_fields(type(value)):
            writer.write_property_name(name)
            serializer.serialize(writer, getattr(value, attr), ftype)
        writer.write_end_object()


def record_fields(tp: type) -> list[tuple[str, str, Any]]:
    """Return `(property name, attribute, type)` for each field of a record type."""
    if issubclass(tp, msgspec.Struct):
        return [(f.encode_name, f.name, f.type) for f in msgspec.structs.fields(tp)]
    hints = typing.get_type_hints(tp)
    return [(f.name, f.name, hints.get(f.name, Any)) for f in dataclasses.fields(tp)]


class AnyConverter(Converter):
    """Untyped values, read as plain dicts, lists and scalars."""

    NAME = 'any'

    def can_convert(self, tp: Any) -> bool:
        return tp is Any

    def read(self, reader: TokenReader, tp: Any, existing: Any, serializer: Serializer) -> Any:
        if reader.token in (Token.value, Token.property_name):
            return reader.value

        if reader.token == Token.start_array:
            items = []
            while reader.read():
                if reader.token == Token.end_array:
                    return items
                items.append(self.read(reader, tp, None, serializer))
            raise errors.TokenError('stream ended inside array')

        expect(reader, Token.start_object, tp)
        obj = {}
        while reader.read():
            if reader.token == Token.end_object:
                return obj
            name = reader.value
            if not reader.read():
                break
            obj[name] = self.read(reader, tp, None, serializer)
        raise errors.TokenError('stream ended inside object')

    def write(self, writer: TokenWriter, value: Any, tp: Any, serializer: Serializer) -> None:
        serializer.serialize(writer, value)
