import pytest

from keyedmap import errors
from keyedmap.tokens import Token, TokenReader, TokenWriter, walk


def test_to_str():
    assert Token.to_str(Token.property_name) == 'property_name'
    with pytest.raises(ValueError):
        Token.to_str(42)


def test_walk():
    tokens = list(walk({'a': [1, None], 'b': {}}))
    assert tokens == [
        (Token.start_object, None),
        (Token.property_name, 'a'),
        (Token.start_array, None),
        (Token.value, 1),
        (Token.value, None),
        (Token.end_array, None),
        (Token.property_name, 'b'),
        (Token.start_object, None),
        (Token.end_object, None),
        (Token.end_object, None),
    ]


##
## reader
##


def test_reader_depth():
    reader = TokenReader.from_data({'a': [1]})
    depths = []
    while reader.read():
        depths.append((Token.to_str(reader.token), reader.depth))
    assert depths == [
        ('start_object', 0),
        ('property_name', 1),
        ('start_array', 1),
        ('value', 2),
        ('end_array', 1),
        ('end_object', 0),
    ]
    assert reader.token is None


def test_reader_skip_container():
    reader = TokenReader.from_data([{'a': [1, 2]}, 'after'])
    reader.read()
    reader.read()
    assert reader.token == Token.start_object
    reader.skip()
    assert reader.token == Token.end_object
    reader.read()
    assert reader.value == 'after'


def test_reader_skip_property():
    reader = TokenReader.from_data({'a': {'b': 1}, 'c': 2})
    reader.read()
    reader.read()
    assert reader.value == 'a'
    reader.skip()
    assert reader.token == Token.end_object
    reader.read()
    assert (reader.token, reader.value) == (Token.property_name, 'c')


def test_reader_skip_scalar():
    reader = TokenReader.from_data(1)
    reader.read()
    reader.skip()
    assert (reader.token, reader.value) == (Token.value, 1)


def test_reader_skip_truncated():
    reader = TokenReader([(Token.start_array, None), (Token.value, 1)])
    reader.read()
    with pytest.raises(errors.TokenError):
        reader.skip()


##
## writer
##


def test_writer():
    writer = TokenWriter()
    writer.write_start_object()
    writer.write_property_name('a')
    writer.write_start_array()
    writer.write_value(1)
    writer.write_value(None)
    writer.write_end_array()
    writer.write_property_name('b')
    writer.write_value('x')
    writer.write_end_object()
    assert writer.getvalue() == {'a': [1, None], 'b': 'x'}


def test_writer_scalar_root():
    writer = TokenWriter()
    writer.write_value('key1')
    assert writer.getvalue() == 'key1'


def name_outside_object(w):
    w.write_property_name('a')


def two_names(w):
    w.write_start_object()
    w.write_property_name('a')
    w.write_property_name('b')


def value_without_name(w):
    w.write_start_object()
    w.write_value(1)


def end_after_name(w):
    w.write_start_object()
    w.write_property_name('a')
    w.write_end_object()


def mismatched_end(w):
    w.write_start_array()
    w.write_end_object()


def two_roots(w):
    w.write_value(1)
    w.write_value(2)


def non_scalar(w):
    w.write_value(object())


def non_string_name(w):
    w.write_start_object()
    w.write_property_name(1)


def duplicate_name(w):
    w.write_start_object()
    w.write_property_name('a')
    w.write_value(1)
    w.write_property_name('a')


@pytest.mark.parametrize(
    'func',
    [
        name_outside_object,
        two_names,
        value_without_name,
        end_after_name,
        mismatched_end,
        two_roots,
        non_scalar,
        non_string_name,
        duplicate_name,
    ],
)
def test_writer_misuse(func):
    with pytest.raises(errors.TokenError):
        func(TokenWriter())


def test_writer_incomplete():
    writer = TokenWriter()
    with pytest.raises(errors.TokenError):
        writer.getvalue()
    writer.write_start_object()
    with pytest.raises(errors.TokenError):
        writer.getvalue()
