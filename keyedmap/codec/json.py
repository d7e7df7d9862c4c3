"""JSON codec backed by msgspec."""

from __future__ import annotations

from typing import Any

from msgspec import json

from . import Codec


def dumps_text(data: Any) -> str:
    """Return the compact JSON text of an object tree."""
    return json.encode(data).decode('utf8')


class JsonCodec(Codec):
    """Codec that serializes object trees as JSON."""

    NAME = 'json'

    def encode(self, data: Any) -> bytes:
        """Encode an object tree to JSON bytes, indented if configured."""
        text = json.encode(data)
        if self.indent > 0:
            return json.format(text, indent=self.indent)
        return text

    def decode(self, data: bytes) -> Any:
        """Decode JSON into dicts, lists and scalars."""
        return json.decode(data)
