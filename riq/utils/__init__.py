"""Utility functions for RIQ scoring."""

from .data_loader import (
    load_json,
    load_ifvs,
    parse_ifvs,
    results_to_json,
)
from .rounding import round_to_decimal_places
from .validators import (
    IFVSetValidator,
    ValidationResult,
)

__all__ = [
    "load_json",
    "load_ifvs",
    "parse_ifvs",
    "results_to_json",
    "round_to_decimal_places",
    "IFVSetValidator",
    "ValidationResult",
]
