"""Write records holding custom-keyed maps to a file and read them back."""

import argparse
import dataclasses

import msgspec

import keyedmap
from keyedmap import logs

log = logs.get(__name__)


class CustomKey(msgspec.Struct, frozen=True):
    """Non-string map key that serializes from and to a string."""

    name: str


class CustomKeyConverter(keyedmap.Converter):
    """Converts `CustomKey` from and to its name."""

    NAME = 'example-key'

    def can_convert(self, tp):
        return tp is CustomKey

    def read(self, reader, tp, existing, serializer):
        return CustomKey(reader.value)

    def write(self, writer, value, tp, serializer):
        writer.write_value(value.name)


@dataclasses.dataclass
class ComplexVal:
    """Value type that needs more than a scalar."""

    name: str
    some_int: int
    some_other_info: str


class Obj(msgspec.Struct):
    dict_plain: dict[str, str] = msgspec.field(default_factory=dict)
    dict_simple: dict[CustomKey, str] = msgspec.field(default_factory=dict)
    dict_complex: dict[CustomKey, ComplexVal] = msgspec.field(default_factory=dict)


def build() -> Obj:
    obj = Obj()
    obj.dict_plain.update(key1='val1', key2='val2', key3='val3')
    for i, (some_int, info) in enumerate([(7, 'bla'), (42, 'lorem ipsum...'), (1337, 'idk')], 1):
        key = CustomKey(f'key{i}')
        obj.dict_simple[key] = f'val{i}'
        obj.dict_complex[key] = ComplexVal(f'val{i}', some_int, info)
    return obj


def main():
    parser = argparse.ArgumentParser('custom-keys')
    parser.add_argument(
        '-o',
        '--output-path',
        default='test.json',
        help='the file to write to and read back (default: %(default)s)',
    )
    parser.add_argument(
        '-c',
        '--codec',
        default='json',
        help='the codec to use (default: %(default)s)',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        help='increase logging verbosity',
    )
    args = parser.parse_args()

    logs.init(args.verbose)

    serializer = keyedmap.Serializer([CustomKeyConverter()], codec=args.codec, indent=2)

    with open(args.output_path, 'wb') as f:
        f.write(serializer.dumps(build()))
    log.info('written: %s', args.output_path)

    with open(args.output_path, 'rb') as f:
        obj = serializer.loads(f.read(), Obj)

    for key, value in obj.dict_plain.items():
        print(f'Key: {key}, Value: {value}')
    for key, value in obj.dict_simple.items():
        print(f'Key: {key.name}, Value: {value}')
    for key, value in obj.dict_complex.items():
        print(f'Key: {key.name}, Value: {value.name}')


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        pass
