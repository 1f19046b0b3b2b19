"""Recommended daily values per nutrient."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from nutrient_gap.domain.errors import ConfigError
from nutrient_gap.domain.nutrients import NutrientKey

BASE_CALORIES = 2000.0

DEFAULT_RECOMMENDED_VALUES: Mapping[NutrientKey, float] = MappingProxyType(
    {
        NutrientKey.CALORIES: 2000.0,
        NutrientKey.PROTEIN: 50.0,
        NutrientKey.CARBS: 275.0,
        NutrientKey.FIBER: 28.0,
        NutrientKey.FAT: 78.0,
        NutrientKey.VITAMIN_A: 900.0,
        NutrientKey.VITAMIN_C: 90.0,
        NutrientKey.VITAMIN_D: 20.0,
        NutrientKey.VITAMIN_E: 15.0,
        NutrientKey.VITAMIN_K: 120.0,
        NutrientKey.THIAMIN: 1.2,
        NutrientKey.RIBOFLAVIN: 1.3,
        NutrientKey.NIACIN: 16.0,
        NutrientKey.VITAMIN_B6: 1.7,
        NutrientKey.VITAMIN_B12: 2.4,
        NutrientKey.CALCIUM: 1300.0,
        NutrientKey.IRON: 18.0,
        NutrientKey.MAGNESIUM: 420.0,
        NutrientKey.PHOSPHORUS: 1250.0,
        NutrientKey.POTASSIUM: 4700.0,
        NutrientKey.ZINC: 11.0,
        NutrientKey.OMEGA3: 1.6,
        NutrientKey.SODIUM: 2300.0,
    }
)

# Targets that follow total energy intake.
ENERGY_SCALED = frozenset(
    {
        NutrientKey.CALORIES,
        NutrientKey.PROTEIN,
        NutrientKey.CARBS,
        NutrientKey.FIBER,
        NutrientKey.FAT,
    }
)


@dataclass(frozen=True)
class NutrientProfile:
    """Immutable table of recommended daily values for a reference diet."""

    recommended_values: Mapping[NutrientKey, float] = field(
        default_factory=lambda: DEFAULT_RECOMMENDED_VALUES
    )
    base_calories: float = BASE_CALORIES

    def __post_init__(self) -> None:
        missing = [key for key in NutrientKey if key not in self.recommended_values]
        if missing:
            names = ", ".join(str(key) for key in missing)
            raise ConfigError(f"Nutrient profile is missing values for: {names}")
        for key, value in self.recommended_values.items():
            if not isinstance(value, int | float) or not value > 0:
                raise ConfigError(f"Nutrient profile value for {key} must be positive")
        if not self.base_calories > 0:
            raise ConfigError("Nutrient profile base calories must be positive")

    def recommended_for(
        self, target_calories: float | None = None
    ) -> dict[NutrientKey, float]:
        """Return recommended values, scaling macros to a calorie target.

        Missing or non-positive targets fall back to the reference diet.
        """
        values = dict(self.recommended_values)
        if target_calories is None or not math.isfinite(target_calories):
            return values
        if target_calories <= 0:
            return values
        factor = target_calories / self.base_calories
        for key in ENERGY_SCALED:
            values[key] = self.recommended_values[key] * factor
        return values
