"""Severity classification for nutrients below target."""

from collections.abc import Mapping
from dataclasses import dataclass

from nutrient_gap.domain.analysis import Deficiency, NutrientStatus, Severity
from nutrient_gap.domain.errors import ConfigError
from nutrient_gap.domain.nutrients import NutrientKey

SEVERE_CEILING = 50
MODERATE_CEILING = 70
DEFAULT_ELIGIBILITY_CUTOFF = 80
MAX_ELIGIBILITY_CUTOFF = 100


@dataclass(frozen=True)
class SeverityPolicy:
    """Decides which nutrients are surfaced as deficiencies.

    A nutrient is eligible when its percentage is strictly below
    ``eligibility_cutoff``. The default of 80 keeps nutrients in the "good"
    band out of the recommendations; 100 surfaces everything short of target,
    with the extra band classified as mild.
    """

    eligibility_cutoff: int = DEFAULT_ELIGIBILITY_CUTOFF

    def __post_init__(self) -> None:
        if not MODERATE_CEILING <= self.eligibility_cutoff <= MAX_ELIGIBILITY_CUTOFF:
            raise ConfigError(
                "Severity eligibility cutoff must be between "
                f"{MODERATE_CEILING} and {MAX_ELIGIBILITY_CUTOFF}: "
                f"{self.eligibility_cutoff}"
            )

    def is_eligible(self, percentage: int) -> bool:
        """Return True when the percentage should produce a deficiency."""
        return percentage < self.eligibility_cutoff


def severity_for(percentage: int) -> Severity:
    """Map an eligible percentage onto a severity tier."""
    if percentage < SEVERE_CEILING:
        return Severity.SEVERE
    if percentage < MODERATE_CEILING:
        return Severity.MODERATE
    return Severity.MILD


def classify_deficiencies(
    statuses: Mapping[NutrientKey, NutrientStatus],
    policy: SeverityPolicy | None = None,
) -> list[Deficiency]:
    """Return eligible deficiencies, most severe first."""
    resolved_policy = policy or SeverityPolicy()
    deficiencies = [
        Deficiency(
            nutrient=key,
            consumed=status.consumed,
            recommended=status.recommended,
            percentage=status.percentage,
            severity=severity_for(status.percentage),
        )
        for key, status in statuses.items()
        if resolved_policy.is_eligible(status.percentage)
    ]
    deficiencies.sort(key=lambda item: (item.percentage, str(item.nutrient)))
    return deficiencies
