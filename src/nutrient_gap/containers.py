"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrient_gap.config import Settings
from nutrient_gap.services.profile import NutrientProfile
from nutrient_gap.services.recommendations import RecommendationService
from nutrient_gap.services.severity import SeverityPolicy
from nutrient_gap.services.supplements import (
    DEFAULT_CATALOG,
    SupplementMatcher,
    load_supplement_catalog,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    nutrient_profile: NutrientProfile
    recommendation_service: RecommendationService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog = DEFAULT_CATALOG
    if resolved_settings.supplement_catalog_path is not None:
        catalog = load_supplement_catalog(resolved_settings.supplement_catalog_path)
    recommendation_service = RecommendationService(
        matcher=SupplementMatcher(catalog),
        policy=SeverityPolicy(resolved_settings.severity_cutoff),
    )
    return AppContainer(
        settings=resolved_settings,
        nutrient_profile=NutrientProfile(),
        recommendation_service=recommendation_service,
    )
