"""Intuitionistic fuzzy values."""

from .ifv import (
    IntuitionisticFuzzyValue,
    hesitation_degree,
)

__all__ = [
    "IntuitionisticFuzzyValue",
    "hesitation_degree",
]
