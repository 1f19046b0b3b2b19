"""Domain models for nutrient gap analysis."""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from nutrient_gap.domain.nutrients import NutrientKey


class IntakeStatus(StrEnum):
    """Intake status relative to the recommended daily value."""

    MET = "met"
    GOOD = "good"
    LOW = "low"
    DEFICIENT = "deficient"


class Severity(StrEnum):
    """Severity tier for a nutrient falling short of target."""

    SEVERE = "severe"
    MODERATE = "moderate"
    MILD = "mild"


@dataclass(frozen=True)
class NutrientStatus:
    """Consumed vs recommended amount for one nutrient."""

    consumed: float
    recommended: float
    percentage: int
    status: IntakeStatus


@dataclass(frozen=True)
class Deficiency:
    """Nutrient whose intake falls within the severity-eligible range."""

    nutrient: NutrientKey
    consumed: float
    recommended: float
    percentage: int
    severity: Severity


@dataclass(frozen=True)
class Supplement:
    """Curated supplement suggestion."""

    name: str
    description: str
    dosage_guidance: str
    importance_note: str
    purchase_link: str


@dataclass(frozen=True)
class Recommendation:
    """Deficiency with an optional matched supplement."""

    deficiency: Deficiency
    supplement: Supplement | None = None


@dataclass(frozen=True)
class NutritionAnalysis:
    """Per-nutrient status with calorie totals."""

    nutrients: Mapping[NutrientKey, NutrientStatus]
    total_calories: float
    target_calories: float
