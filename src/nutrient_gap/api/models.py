"""Pydantic models for the analysis API payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nutrient_gap.domain.analysis import IntakeStatus, Severity
from nutrient_gap.domain.nutrients import NutrientCategory, NutrientKey
from nutrient_gap.services.supplements import SupplementEntry


class AnalysisRequest(BaseModel):
    """Aggregated intake with optional targets."""

    model_config = ConfigDict(populate_by_name=True)

    consumed_nutrients: dict[str, Any] = Field(
        default_factory=dict, alias="consumedNutrients"
    )
    recommended_values: dict[str, Any] | None = Field(
        default=None, alias="recommendedValues"
    )
    target_calories: float | None = Field(
        default=None, gt=0, allow_inf_nan=False, alias="targetCalories"
    )


class NutrientStatusModel(BaseModel):
    """Status of a single nutrient."""

    consumed: float
    recommended: float
    percentage: int
    status: IntakeStatus


class AnalysisResponse(BaseModel):
    """Per-nutrient analysis with calorie totals."""

    model_config = ConfigDict(populate_by_name=True)

    nutrient_analysis: dict[NutrientKey, NutrientStatusModel] = Field(
        alias="nutrientAnalysis"
    )
    total_calories: float = Field(alias="totalCalories")
    target_calories: float = Field(alias="targetCalories")


class RecommendationModel(BaseModel):
    """Deficiency with an optional supplement suggestion."""

    nutrient: NutrientKey
    consumed: float
    recommended: float
    percentage: int
    severity: Severity
    supplement: SupplementEntry | None = None


class RecommendationsResponse(BaseModel):
    """Recommendations ordered from the most severe deficiency."""

    recommendations: list[RecommendationModel]


class NutrientInfo(BaseModel):
    """Display metadata for a tracked nutrient."""

    key: NutrientKey
    label: str
    unit: str
    category: NutrientCategory


class NutrientsResponse(BaseModel):
    """All tracked nutrients with display metadata."""

    nutrients: list[NutrientInfo]
