"""Substitution cipher engines."""

from filemorph.services.engines.substitution.shift import ShiftEngine
from filemorph.services.engines.substitution.grid_substitution import GridSubstitutionEngine

__all__ = [
    "ShiftEngine",
    "GridSubstitutionEngine",
]
