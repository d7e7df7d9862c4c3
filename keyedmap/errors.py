from __future__ import annotations


class KeyedMapError(Exception):
    """Base class for all keyedmap exceptions."""


class ConfigurationError(KeyedMapError):
    """Raised when a type cannot be handled the way it was declared."""


class UnsupportedType(ConfigurationError):
    """Raised when no converter accepts a type."""

    def __init__(self, tp: object) -> None:
        super().__init__(f'no converter for type: {tp!r}')
        self.type = tp


class TokenError(KeyedMapError):
    """Raised for tokens written or read out of order."""


class MapError(KeyedMapError):
    """Base class for map decoding errors."""


class FormatError(MapError):
    """Raised when a map is not represented as an object."""


class ParseError(MapError):
    """Raised for malformed key/value ordering inside an object."""


class EncodeError(KeyedMapError):
    """Adds context for errors raised when encoding a token tree."""


class DecodeError(KeyedMapError):
    """Adds context for errors raised when decoding bytes."""


class RegistryError(KeyedMapError):
    """Raised when a registry lookup fails."""
