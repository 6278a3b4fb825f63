"""Reporting utilities for RIQ results."""

from .console_reporter import (
    print_results,
    format_score_table,
    format_riq,
    rank_results,
)

__all__ = [
    "print_results",
    "format_score_table",
    "format_riq",
    "rank_results",
]
