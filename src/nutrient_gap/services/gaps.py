"""Gap analysis of daily intake against recommended values."""

import math
from collections.abc import Mapping

from nutrient_gap.domain.analysis import IntakeStatus, NutrientStatus
from nutrient_gap.domain.errors import ConfigError
from nutrient_gap.domain.nutrients import NutrientKey, parse_nutrient_key

MET_FLOOR = 100
GOOD_FLOOR = 80
LOW_FLOOR = 50
# Ratios beyond this are reported at the cap.
PERCENTAGE_CAP = 1_000_000


def analyze_gaps(
    intake: Mapping[str, float], recommended: Mapping[str, float]
) -> dict[NutrientKey, NutrientStatus]:
    """Return the intake status of every nutrient in the recommended table.

    Nutrients absent from ``intake`` count as zero. The whole table is
    validated before any percentage is computed, so a bad target never yields
    partial results.
    """
    targets = _validated_targets(recommended)
    statuses: dict[NutrientKey, NutrientStatus] = {}
    for key in NutrientKey:
        if key not in targets:
            continue
        target = targets[key]
        consumed = float(intake.get(key) or 0.0)
        percentage = intake_percentage(consumed, target)
        statuses[key] = NutrientStatus(
            consumed=consumed,
            recommended=target,
            percentage=percentage,
            status=status_for(percentage),
        )
    return statuses


def intake_percentage(consumed: float, recommended: float) -> int:
    """Return consumed as a whole percentage of recommended, rounding half up."""
    ratio = consumed / recommended * 100
    if not ratio < PERCENTAGE_CAP:
        return PERCENTAGE_CAP
    return math.floor(ratio + 0.5)


def status_for(percentage: int) -> IntakeStatus:
    """Map a percentage of target onto an intake status."""
    if percentage >= MET_FLOOR:
        return IntakeStatus.MET
    if percentage >= GOOD_FLOOR:
        return IntakeStatus.GOOD
    if percentage >= LOW_FLOOR:
        return IntakeStatus.LOW
    return IntakeStatus.DEFICIENT


def _validated_targets(recommended: Mapping[str, float]) -> dict[NutrientKey, float]:
    targets: dict[NutrientKey, float] = {}
    for raw_key, value in recommended.items():
        key = parse_nutrient_key(str(raw_key))
        if key is None:
            raise ConfigError(f"Recommended value for untracked nutrient: {raw_key}")
        if isinstance(value, bool) or not isinstance(value, int | float):
            raise ConfigError(f"Recommended value for {key} is missing or not numeric")
        if not math.isfinite(value) or value <= 0:
            raise ConfigError(f"Recommended value for {key} must be positive: {value}")
        targets[key] = float(value)
    return targets
