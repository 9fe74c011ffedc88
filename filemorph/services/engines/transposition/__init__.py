"""Transposition cipher engines."""

from filemorph.services.engines.transposition.zigzag import ZigzagEngine
from filemorph.services.engines.transposition.keyed_columnar import KeyedColumnarEngine

__all__ = [
    "ZigzagEngine",
    "KeyedColumnarEngine",
]
