"""Composition of gap analysis, severity and supplement matching."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from nutrient_gap.domain.analysis import NutritionAnalysis, Recommendation
from nutrient_gap.domain.nutrients import NutrientKey
from nutrient_gap.services.gaps import analyze_gaps
from nutrient_gap.services.severity import SeverityPolicy, classify_deficiencies
from nutrient_gap.services.supplements import SupplementMatcher


@dataclass
class RecommendationService:
    """Stateless service turning intake snapshots into recommendations."""

    matcher: SupplementMatcher = field(default_factory=SupplementMatcher)
    policy: SeverityPolicy = field(default_factory=SeverityPolicy)

    def analyze(
        self,
        intake: Mapping[str, float],
        recommended: Mapping[str, float],
        target_calories: float | None = None,
    ) -> NutritionAnalysis:
        """Return the status of every recommended nutrient with calorie totals."""
        statuses = analyze_gaps(intake, recommended)
        if target_calories is None:
            target_calories = float(recommended.get(NutrientKey.CALORIES) or 0.0)
        return NutritionAnalysis(
            nutrients=MappingProxyType(statuses),
            total_calories=float(intake.get(NutrientKey.CALORIES) or 0.0),
            target_calories=target_calories,
        )

    def recommend(
        self, intake: Mapping[str, float], recommended: Mapping[str, float]
    ) -> list[Recommendation]:
        """Return recommendations ordered from the most severe deficiency.

        An empty list means no deficiencies were found.
        """
        statuses = analyze_gaps(intake, recommended)
        deficiencies = classify_deficiencies(statuses, self.policy)
        return [
            Recommendation(
                deficiency=deficiency,
                supplement=self.matcher.match(
                    deficiency.nutrient, deficiency.severity
                ),
            )
            for deficiency in deficiencies
        ]
