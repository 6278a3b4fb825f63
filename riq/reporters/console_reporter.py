"""Result reporting utilities."""

import math
from typing import List, Optional

from riq.scoring import ScoreResult
from riq.utils import ValidationResult


def _rank_key(result: ScoreResult):
    if math.isnan(result.riq):
        return (1, 0.0)
    return (0, -result.riq)


def rank_results(results: List[ScoreResult]) -> List[ScoreResult]:
    """
    Order results from highest to lowest RIQ.

    The sort is stable, so equal scores keep their input order.
    NaN scores cannot be compared and are placed last.
    """
    return sorted(results, key=_rank_key)


def format_riq(value: float, decimal_places: int = 4) -> str:
    """Format a single RIQ for display."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return f"{value:.{decimal_places}f}"


def format_score_table(
    results: List[ScoreResult],
    decimal_places: int = 4,
    ranked: bool = False
) -> str:
    """
    Format results as an aligned text table.

    Args:
        results: Scores to display, in the order given
        decimal_places: Digits shown after the decimal point
        ranked: Prefix each row with its position

    Returns:
        Formatted table
    """
    if not results:
        return "(no IFVs)"

    values = [format_riq(r.riq, decimal_places) for r in results]
    name_width = max(len("Name"), *(len(r.name) for r in results))
    value_width = max(len("RIQ"), *(len(v) for v in values))

    header = f"{'Name':<{name_width}}  {'RIQ':>{value_width}}"
    if ranked:
        header = f"{'#':>3}  " + header
    lines = [header, "-" * len(header)]

    for position, (result, value) in enumerate(zip(results, values), start=1):
        row = f"{result.name:<{name_width}}  {value:>{value_width}}"
        if ranked:
            row = f"{position:>3}  " + row
        lines.append(row)

    return "\n".join(lines)


def print_results(
    results: List[ScoreResult],
    validation: Optional[ValidationResult] = None,
    ranked: bool = False,
    decimal_places: int = 4
) -> None:
    """
    Print scoring results to console.

    Args:
        results: The scores to print, in input order
        validation: Optional diagnostics for the scored set
        ranked: Sort by RIQ before printing
        decimal_places: Digits shown after the decimal point
    """
    print("\n" + "=" * 60)
    print("RIQ RESULTS")
    print("=" * 60)

    rows = rank_results(results) if ranked else results
    print(f"\nIFVs Scored: {len(results)}")
    undefined = sum(1 for r in results if not r.is_finite)
    if undefined:
        print(f"Undefined Scores: {undefined}")

    print()
    print(format_score_table(rows, decimal_places=decimal_places, ranked=ranked))

    if validation is not None:
        if validation.violations:
            print("\n--- Invalid IFVs (scored anyway) ---")
            for violation in validation.violations:
                print(f"  ! {violation}")
        if validation.warnings:
            print("\n--- Warnings ---")
            for warning in validation.warnings:
                print(f"  ~ {warning}")

    print("\n" + "=" * 60)
