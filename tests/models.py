import dataclasses
import enum

import msgspec

import keyedmap
from keyedmap.tokens import Token, TokenReader

START = (Token.start_object, None)
END = (Token.end_object, None)


def name(value):
    return (Token.property_name, value)


def value(v):
    return (Token.value, v)


def reader_at_start(*tokens):
    """Return a reader over *tokens*, positioned on the first one."""
    reader = TokenReader(tokens)
    assert reader.read()
    return reader


class CustomKey(msgspec.Struct, frozen=True):
    """Key type that renders to and from a plain string."""

    name: str


class CustomKeyConverter(keyedmap.Converter):
    NAME = 'custom-key'

    def can_convert(self, tp):
        return tp is CustomKey

    def read(self, reader, tp, existing, serializer):
        return CustomKey(reader.value)

    def write(self, writer, value, tp, serializer):
        writer.write_value(value.name)


class RecordingKeyConverter(CustomKeyConverter):
    """Remembers every token it was asked to decode."""

    NAME = 'recording-key'

    def __init__(self):
        self.seen = []

    def read(self, reader, tp, existing, serializer):
        self.seen.append((reader.token, reader.value))
        return super().read(reader, tp, existing, serializer)


class FailingKeyConverter(CustomKeyConverter):
    NAME = 'failing-key'

    def read(self, reader, tp, existing, serializer):
        raise ValueError(f'bad key: {reader.value}')


class PointKey(msgspec.Struct, frozen=True):
    """Key type whose default rendering is an object, not a scalar."""

    x: int
    y: int


@dataclasses.dataclass
class ComplexVal:
    name: str
    some_int: int
    some_other_info: str = ''


class Color(enum.Enum):
    red = 'red'
    green = 'green'


class Obj(msgspec.Struct):
    dict_plain: dict[str, str] = msgspec.field(default_factory=dict)
    dict_simple: dict[CustomKey, str] = msgspec.field(default_factory=dict)
    dict_complex: dict[CustomKey, ComplexVal] = msgspec.field(default_factory=dict)


class Index(dict[CustomKey, int]):
    pass


class NeedsArgs(dict[str, int]):
    def __init__(self, source):
        super().__init__(source)
