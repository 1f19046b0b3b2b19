"""Shared test fixtures."""

from types import MappingProxyType

import pytest

from nutrient_gap.config import Settings
from nutrient_gap.containers import AppContainer
from nutrient_gap.domain.analysis import Supplement
from nutrient_gap.domain.nutrients import NutrientKey
from nutrient_gap.services.profile import NutrientProfile
from nutrient_gap.services.recommendations import RecommendationService
from nutrient_gap.services.severity import SeverityPolicy
from nutrient_gap.services.supplements import SupplementMatcher

IRON_SUPPLEMENT = Supplement(
    name="Test Iron",
    description="Iron for tests.",
    dosage_guidance="18 mg per day",
    importance_note="Carries oxygen.",
    purchase_link="https://example.com/iron",
)


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def iron_only_matcher() -> SupplementMatcher:
    return SupplementMatcher(MappingProxyType({NutrientKey.IRON: IRON_SUPPLEMENT}))


@pytest.fixture
def recommendation_service(
    iron_only_matcher: SupplementMatcher,
) -> RecommendationService:
    return RecommendationService(matcher=iron_only_matcher, policy=SeverityPolicy())


@pytest.fixture
def container(
    settings: Settings, recommendation_service: RecommendationService
) -> AppContainer:
    return AppContainer(
        settings=settings,
        nutrient_profile=NutrientProfile(),
        recommendation_service=recommendation_service,
    )
