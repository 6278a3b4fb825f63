"""RIQ (ranking index) computation for sets of intuitionistic fuzzy values."""

from __future__ import annotations
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Union

import numpy as np

from riq.fuzzy import IntuitionisticFuzzyValue
from riq.utils.rounding import round_to_decimal_places

logger = logging.getLogger("riq.scoring")

IFVLike = Union[IntuitionisticFuzzyValue, Mapping]


@dataclass(frozen=True)
class ScoreResult:
    """RIQ score for a single IFV, keyed by the IFV's name."""
    name: str
    riq: float

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.riq)

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "riq": self.riq}


def _as_ifv(item: IFVLike) -> IntuitionisticFuzzyValue:
    if isinstance(item, IntuitionisticFuzzyValue):
        return item
    if isinstance(item, Mapping):
        return IntuitionisticFuzzyValue.from_dict(item)
    raise TypeError(
        f"Expected IntuitionisticFuzzyValue or mapping, got {type(item).__name__}"
    )


def calculate_riq(
    ifvs: Iterable[IFVLike],
    decimal_places: int = 4
) -> List[ScoreResult]:
    """
    Calculate the RIQ of every IFV in a set.

    For each value, with ``n`` the size of the whole set:

        pi  = max(0, 1 - mu - nu)
        iq  = (max(mu, nu) + pi/n)^2 + (n - 1) * (min(mu, nu)/(n - 1) + pi/n)^2
        riq = iq if mu >= nu else -iq

    The result is rounded to ``decimal_places`` digits. Output order and
    length match the input; nothing is sorted or deduplicated.

    Numeric problems are never raised. Out-of-range or NaN degrees
    propagate arithmetically, and a one-element set divides by
    ``n - 1 = 0``, which yields NaN for that element.

    Args:
        ifvs: IFV records, or mappings with ``name``, ``mu`` and ``nu`` keys
        decimal_places: Fractional digits kept in each score

    Returns:
        List of ScoreResult, one per input record.
    """
    records = [_as_ifv(item) for item in ifvs]
    n = len(records)

    if n == 0:
        logger.debug("Empty IFV set, nothing to score")
        return []
    if n == 1:
        logger.warning(
            f"Singular IFV set ('{records[0].name}'): RIQ divides by n - 1 = 0"
        )

    mu = np.fromiter((r.mu for r in records), dtype=np.float64, count=n)
    nu = np.fromiter((r.nu for r in records), dtype=np.float64, count=n)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        pi = np.maximum(0.0, 1.0 - mu - nu)
        hi = np.maximum(mu, nu)
        lo = np.minimum(mu, nu)
        iq = (hi + pi / n) ** 2 + (n - 1) * (lo / (n - 1) + pi / n) ** 2
        riq = np.where(mu >= nu, iq, -iq)

    results = [
        ScoreResult(
            name=record.name,
            riq=round_to_decimal_places(float(value), decimal_places)
        )
        for record, value in zip(records, riq)
    ]

    non_finite = sum(1 for r in results if not r.is_finite)
    logger.debug(f"Scored {n} IFVs ({non_finite} non-finite)")
    return results
