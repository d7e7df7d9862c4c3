import pytest

import keyedmap

from .models import ComplexVal, CustomKey, CustomKeyConverter, Obj


@pytest.fixture
def serializer():
    return keyedmap.Serializer([CustomKeyConverter()])


@pytest.fixture
def obj():
    o = Obj()
    o.dict_plain.update(key1='val1', key2='val2', key3='val3')
    o.dict_simple.update(
        {
            CustomKey('key1'): 'val1',
            CustomKey('key2'): 'val2',
            CustomKey('key3'): 'val3',
        }
    )
    o.dict_complex.update(
        {
            CustomKey('key1'): ComplexVal('val1', 7, 'bla'),
            CustomKey('key2'): ComplexVal('val2', 42, 'lorem ipsum...'),
            CustomKey('key3'): ComplexVal('val3', 1337, 'idk'),
        }
    )
    return o
