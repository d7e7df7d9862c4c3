from __future__ import annotations

# Imports for convenience
from . import format, path, types

__all__ = [
    'format',
    'path',
    'types',
]
