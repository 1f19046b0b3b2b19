"""Analysis API endpoints consumed by the dashboard and suggestions pages."""

import logging
from typing import Any

from fastapi import APIRouter, Request

from nutrient_gap.api.models import (
    AnalysisRequest,
    AnalysisResponse,
    NutrientInfo,
    NutrientsResponse,
    NutrientStatusModel,
    RecommendationModel,
    RecommendationsResponse,
)
from nutrient_gap.containers import AppContainer
from nutrient_gap.domain.analysis import Recommendation
from nutrient_gap.domain.nutrients import (
    NUTRIENT_CATEGORIES,
    NUTRIENT_UNITS,
    NutrientKey,
    format_nutrient_name,
)
from nutrient_gap.services.intake import normalize_intake
from nutrient_gap.services.supplements import SupplementEntry

_logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["analysis"])


@router.get("/nutrients")
async def nutrients() -> NutrientsResponse:
    """Return unit and label metadata for every tracked nutrient."""
    return NutrientsResponse(
        nutrients=[
            NutrientInfo(
                key=key,
                label=format_nutrient_name(key),
                unit=NUTRIENT_UNITS[key],
                category=NUTRIENT_CATEGORIES[key],
            )
            for key in NutrientKey
        ]
    )


@router.post("/analysis/nutrients")
async def analyze_nutrients(
    payload: AnalysisRequest, request: Request
) -> AnalysisResponse:
    """Return intake status for every recommended nutrient."""
    container: AppContainer = request.app.state.container
    intake = normalize_intake(payload.consumed_nutrients)
    recommended = _resolve_recommended(container, payload)
    analysis = container.recommendation_service.analyze(
        intake, recommended, target_calories=payload.target_calories
    )
    return AnalysisResponse(
        nutrient_analysis={
            key: NutrientStatusModel(
                consumed=status.consumed,
                recommended=status.recommended,
                percentage=status.percentage,
                status=status.status,
            )
            for key, status in analysis.nutrients.items()
        },
        total_calories=analysis.total_calories,
        target_calories=analysis.target_calories,
    )


@router.post("/analysis/recommendations", response_model_exclude_none=True)
async def recommend(
    payload: AnalysisRequest, request: Request
) -> RecommendationsResponse:
    """Return supplement recommendations, most severe first."""
    container: AppContainer = request.app.state.container
    intake = normalize_intake(payload.consumed_nutrients)
    recommended = _resolve_recommended(container, payload)
    recommendations = container.recommendation_service.recommend(intake, recommended)
    if not recommendations:
        _logger.info("No deficiencies found")
    return RecommendationsResponse(
        recommendations=[_to_model(item) for item in recommendations]
    )


def _resolve_recommended(
    container: AppContainer, payload: AnalysisRequest
) -> dict[str, Any]:
    """Use caller targets when given, else the personalized default profile."""
    if payload.recommended_values is not None:
        return payload.recommended_values
    target = payload.target_calories or container.settings.default_target_calories
    return dict(container.nutrient_profile.recommended_for(target))


def _to_model(recommendation: Recommendation) -> RecommendationModel:
    deficiency = recommendation.deficiency
    supplement = recommendation.supplement
    return RecommendationModel(
        nutrient=deficiency.nutrient,
        consumed=deficiency.consumed,
        recommended=deficiency.recommended,
        percentage=deficiency.percentage,
        severity=deficiency.severity,
        supplement=(
            SupplementEntry(
                name=supplement.name,
                description=supplement.description,
                dosage=supplement.dosage_guidance,
                url=supplement.purchase_link,
                importance=supplement.importance_note,
            )
            if supplement
            else None
        ),
    )
