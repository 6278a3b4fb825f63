"""Diagnostics for IFV sets.

Nothing here rejects input: scoring runs on whatever it is given.
The checks only describe what the scorer will silently tolerate.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from riq.fuzzy import IntuitionisticFuzzyValue


@dataclass
class ValidationResult:
    """Results of IFV set inspection."""
    is_valid: bool = True
    violations: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_violation(self, message: str) -> None:
        """Record an IFV that breaks the formal definition."""
        self.violations.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a set-level warning (non-fatal)."""
        self.warnings.append(message)

    @property
    def messages(self) -> List[str]:
        return self.violations + self.warnings

    def to_dict(self) -> Dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_valid": self.is_valid,
            "violations": self.violations,
            "warnings": self.warnings,
        }


class IFVSetValidator:
    """
    Inspects an IFV set for values the scorer will tolerate but which
    are not well-formed intuitionistic fuzzy values.
    """

    def inspect(self, ifvs: Sequence[IntuitionisticFuzzyValue]) -> ValidationResult:
        """
        Inspect a complete IFV set.

        Args:
            ifvs: The set that is about to be scored

        Returns:
            ValidationResult describing every anomaly found
        """
        result = ValidationResult()

        for ifv in ifvs:
            self._inspect_value(ifv, result)

        self._check_duplicates(ifvs, result)

        if len(ifvs) == 1:
            result.add_warning(
                "Set has a single IFV: its RIQ divides by n - 1 = 0 and is undefined"
            )

        return result

    def _inspect_value(
        self,
        ifv: IntuitionisticFuzzyValue,
        result: ValidationResult
    ) -> None:
        """Check the degrees of one IFV."""
        for label, degree in (("mu", ifv.mu), ("nu", ifv.nu)):
            if not math.isfinite(degree):
                result.add_violation(f"IFV '{ifv.name}': {label} is not finite ({degree})")
            elif not 0.0 <= degree <= 1.0:
                result.add_violation(
                    f"IFV '{ifv.name}': {label}={degree} is outside [0, 1]"
                )

        if ifv.mu + ifv.nu > 1.0:
            result.add_violation(
                f"IFV '{ifv.name}': mu + nu = {ifv.mu + ifv.nu:.4f} exceeds 1, "
                f"hesitation clamped to 0"
            )

    @staticmethod
    def _check_duplicates(
        ifvs: Sequence[IntuitionisticFuzzyValue],
        result: ValidationResult
    ) -> None:
        counts = Counter(ifv.name for ifv in ifvs)
        for name, count in counts.items():
            if count > 1:
                result.add_warning(f"Name '{name}' appears {count} times")

    @staticmethod
    def is_well_formed(ifvs: Sequence[IntuitionisticFuzzyValue]) -> bool:
        """Quick check that every IFV satisfies the formal definition."""
        return all(ifv.is_valid for ifv in ifvs)
