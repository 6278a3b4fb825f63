"""RIQ scoring."""

from .riq_scorer import (
    ScoreResult,
    calculate_riq,
)

__all__ = [
    "ScoreResult",
    "calculate_riq",
]
