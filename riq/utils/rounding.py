"""Decimal rounding for displayed scores."""

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

# Fixed-point formatting is only applied below this magnitude;
# larger values keep their full representation.
FIXED_POINT_LIMIT = 1e21
MAX_DECIMAL_PLACES = 100


def round_to_decimal_places(value: float, places: int = 4) -> float:
    """
    Round a float to a fixed number of fractional decimal digits.

    Produces the nearest value representable with ``places`` fractional
    digits, ties rounding away from zero. The tie decision is made on the
    exact decimal expansion of the binary float, the same way formatting
    to fixed digits and parsing back behaves, so ``1.005`` rounds to
    ``1.0`` (its binary value sits just below the tie) while ``0.125``
    rounds to ``0.13``.

    Args:
        value: Value to round. NaN and infinities are returned unchanged.
        places: Number of fractional digits, between 0 and 100.

    Returns:
        The rounded value as a float.

    Raises:
        ValueError: If ``places`` is out of range.
    """
    if not 0 <= places <= MAX_DECIMAL_PLACES:
        raise ValueError(
            f"decimal places must be between 0 and {MAX_DECIMAL_PLACES}, got {places}"
        )

    value = float(value)
    if not math.isfinite(value) or abs(value) >= FIXED_POINT_LIMIT:
        return value

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # 21 integer digits plus the fractional digits always fit
        ctx.prec = 22 + MAX_DECIMAL_PLACES
        rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP)
    return float(rounded)
