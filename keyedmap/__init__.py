"""Serialize maps with non-string keys as plain objects."""

from __future__ import annotations

from . import errors, logs
from .converter import Converter
from .converter.mapping import MapConverter, render_key, strip_quotes
from .serializer import Serializer, Settings, dumps, loads
from .tokens import Token, TokenReader, TokenWriter

__all__ = [
    'Converter',
    'MapConverter',
    'Serializer',
    'Settings',
    'Token',
    'TokenReader',
    'TokenWriter',
    'dumps',
    'errors',
    'loads',
    'logs',
    'render_key',
    'strip_quotes',
]
