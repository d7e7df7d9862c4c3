"""Msgpack codec for compact binary payloads."""

from __future__ import annotations

from typing import Any

import msgpack

from . import Codec


class MsgpackCodec(Codec):
    """Codec backed by msgpack. Maps keep string keys, as in JSON."""

    NAME = 'msgpack'

    def encode(self, data: Any) -> bytes:
        """Serialize an object tree to msgpack bytes."""
        packed = msgpack.packb(data, use_bin_type=True)
        if isinstance(packed, bytes):
            return packed
        if isinstance(packed, bytearray):
            return bytes(packed)
        raise TypeError(f'unsupported msgpack result: {type(packed).__name__}')

    def decode(self, data: bytes) -> Any:
        """Decode msgpack bytes. Non-string map keys are kept as decoded."""
        return msgpack.unpackb(data, use_list=True, raw=False, strict_map_key=False)
