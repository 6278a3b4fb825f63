"""Intuitionistic fuzzy value representation."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Any


def hesitation_degree(mu: float, nu: float) -> float:
    """
    Hesitation degree of an intuitionistic fuzzy value.

    Normally ``1 - mu - nu``. When ``mu + nu > 1`` the value is not a valid
    IFV and the residual is clamped to 0 instead of going negative.
    NaN degrees propagate.
    """
    pi = 1 - mu - nu
    if pi != pi:  # NaN
        return pi
    return max(0.0, pi)


@dataclass(frozen=True)
class IntuitionisticFuzzyValue:
    """
    Intuitionistic Fuzzy Value (IFV).

    An IFV describes an item by two degrees:
    - mu: membership degree (confidence the item belongs)
    - nu: non-membership degree (confidence it does not belong)

    The remainder ``1 - mu - nu`` is the hesitation degree. Degrees are
    expected in [0, 1] with ``mu + nu <= 1``, but nothing is enforced here:
    out-of-range values are carried through to scoring unchanged.
    """
    name: str
    mu: float
    nu: float

    @property
    def hesitation(self) -> float:
        """Clamped hesitation degree (pi)."""
        return hesitation_degree(self.mu, self.nu)

    @property
    def is_valid(self) -> bool:
        """Check whether the degrees form a formally valid IFV."""
        return (
            0.0 <= self.mu <= 1.0
            and 0.0 <= self.nu <= 1.0
            and self.mu + self.nu <= 1.0
        )

    @property
    def membership_dominates(self) -> bool:
        """True when membership ties or exceeds non-membership."""
        return self.mu >= self.nu

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> IntuitionisticFuzzyValue:
        """Create an IFV from dictionary data."""
        return cls(
            name=data["name"],
            mu=float(data["mu"]),
            nu=float(data["nu"])
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "mu": self.mu, "nu": self.nu}
